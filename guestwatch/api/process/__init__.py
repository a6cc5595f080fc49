"""Process module - contract between background processes and their supervisor."""

from .Process import Process
from .ProcessNotRunningError import ProcessNotRunningError

__all__ = [
    "Process",
    "ProcessNotRunningError",
]
