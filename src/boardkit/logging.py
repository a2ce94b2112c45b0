"""Logging configuration for boardkit."""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _verbosity_level(verbose: int) -> int:
    """-v shows accepted board changes, -vv also shows ignored ones."""
    return logging.DEBUG if verbose >= 2 else logging.INFO


def setup_logging(
    verbose: int = 0,
    log_file: Path | None = None,
    state_dir: Path | None = None,
) -> None:
    """Attach handlers to the ``boardkit`` logger.

    Nothing is configured unless verbosity or a log file is requested, so
    an embedding application keeps full control of logging.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to append logs to
        state_dir: Directory of the persisted boards, named in the banner
    """
    if verbose == 0 and log_file is None:
        return

    level = _verbosity_level(verbose)
    logger = logging.getLogger("boardkit")
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = []
    if verbose > 0:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(
        "boardkit session | state=%s | level=%s",
        state_dir if state_dir is not None else "-",
        logging.getLevelName(level),
    )
