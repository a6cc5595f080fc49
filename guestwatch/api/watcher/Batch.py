"""Events collected during one batch window."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from .RawEvent import RawEvent


@dataclass
class Batch:
    """Ordered events of one window, after the overflow cap.

    dropped counts the events discarded past the cap.
    """

    events: list[RawEvent] = field(default_factory=list)
    dropped: int = 0

    @classmethod
    def capped(cls, events: Sequence[RawEvent], limit: int) -> "Batch":
        """Keep the first `limit` events in arrival order and count the rest."""
        if len(events) <= limit:
            return cls(events=list(events))
        return cls(events=list(events[:limit]), dropped=len(events) - limit)

    def __len__(self) -> int:
        return len(self.events)
