"""Configure unified linediff logging."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(level: int = logging.INFO, home: Path | None = None) -> None:
    """Configure unified linediff logging.

    Args:
        level: Level for the ``linediff`` logger
        home: linediff home directory. If None, derived from environment.
    """
    global _CONFIGURED
    root_logger = logging.getLogger("linediff")
    root_logger.setLevel(level)
    if _CONFIGURED:
        return

    if home is None:
        home = get_home_dir()

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "linediff.log"

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
