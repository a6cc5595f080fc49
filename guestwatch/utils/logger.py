import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(
    home: Path | None = None,
    level: str = "INFO",
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
    stderr: bool = False,
) -> None:
    """Configure unified guestwatch logging.

    Args:
        home: Path to the guestwatch home directory. If None, derived from environment.
        level: Logging level name for the ``guestwatch`` logger
        max_bytes: Rotate the logfile once it grows past this size
        backup_count: Number of rotated logfiles to keep
        stderr: Also echo records to stderr (foreground runs)
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        home = get_home_dir()

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "guestwatch.log"

    root_logger = logging.getLogger("guestwatch")
    root_logger.setLevel(logging.getLevelName(level.upper()))

    # Format
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # File Handler
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    if stderr:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)

    # Suppress noisy third-party loggers
    logging.getLogger("watchdog").setLevel(logging.WARNING)

    _CONFIGURED = True
