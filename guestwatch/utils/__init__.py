"""guestwatch utility functions.

Each file in this package exports exactly one function or class, following
the single file == function/class rule.
"""

from .get_home_dir import get_home_dir
from .logger import configure_logging

__all__ = [
    "configure_logging",
    "get_home_dir",
]
