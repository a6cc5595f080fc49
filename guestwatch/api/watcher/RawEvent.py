"""Raw filesystem notification as seen by the aggregator."""

from dataclasses import dataclass
from enum import Enum


class Op(str, Enum):
    """Kind of filesystem notification."""

    WRITE = "write"
    CREATE = "create"
    REMOVE = "remove"
    RENAME = "rename"
    CHMOD = "chmod"
    OTHER = "other"


@dataclass(frozen=True)
class RawEvent:
    """An (operation kind, path) pair for a watched directory."""

    op: Op
    path: str

    @property
    def is_write(self) -> bool:
        return self.op is Op.WRITE
