"""Get guestwatch home directory path or path under it."""

import os
from pathlib import Path

from ..constants import GUESTWATCH_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get guestwatch home directory path or path under it.

    Checks GUESTWATCH_HOME environment variable first, defaults to
    ~/.guestwatch if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to the home directory or a subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.guestwatch")
        >>> get_home_dir("config.json")
        Path("/Users/user/.guestwatch/config.json")
    """
    home_env = os.environ.get("GUESTWATCH_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        user_home = os.environ.get("HOME")
        home = Path(user_home) / GUESTWATCH_HOME_EXT if user_home else Path.home() / GUESTWATCH_HOME_EXT

    return home / Path(*parts) if parts else home
