"""Error notification emitted alongside raw events."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WatchError:
    """A non-fatal problem reported by the watch primitive (e.g. a lost watch)."""

    path: str
    message: str
