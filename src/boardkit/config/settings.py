"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from ..models import DEFAULT_COLUMN_TITLES, DEFAULT_DASHBOARD_NAME


class Settings(BaseSettings):
    """Application settings."""

    state_dir: Path = Field(
        default=Path(".boardkit"),
        description="Directory holding the persisted board state",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    default_dashboard_name: str = Field(
        default=DEFAULT_DASHBOARD_NAME,
        description="Display name of the protected default dashboard",
    )

    default_columns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_COLUMN_TITLES),
        description="Column titles seeded into every new board",
    )

    model_config = {
        "env_prefix": "BOARDKIT_",
    }
