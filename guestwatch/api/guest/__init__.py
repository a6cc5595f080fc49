"""Guest module - the Lima instance the watcher forwards touches to."""

from .GuestActions import GuestActions
from .GuestCommandError import GuestCommandError

__all__ = [
    "GuestActions",
    "GuestCommandError",
]
