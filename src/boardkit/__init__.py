"""boardkit - state engine for multi-dashboard kanban boards."""

from .app import BoardkitApp

__version__ = "0.1.0"

__all__ = ["BoardkitApp", "__version__"]
