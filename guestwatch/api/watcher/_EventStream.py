"""Bridge from watchdog callbacks to a queue consumed by the aggregator."""

import logging
import os
import queue

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers.api import BaseObserver

from .RawEvent import Op, RawEvent
from .WatchError import WatchError

logger = logging.getLogger(__name__)

# Queued once when the producer goes away
STREAM_CLOSED = object()

_FILE_OPS = {
    EVENT_TYPE_MODIFIED: Op.WRITE,
    EVENT_TYPE_CREATED: Op.CREATE,
    EVENT_TYPE_DELETED: Op.REMOVE,
    EVENT_TYPE_MOVED: Op.RENAME,
}


def _to_raw_event(event: FileSystemEvent) -> RawEvent:
    path = os.fsdecode(event.src_path)
    if event.is_directory:
        # directory content changes are not file writes
        op = Op.REMOVE if event.event_type == EVENT_TYPE_DELETED else Op.OTHER
        return RawEvent(op=op, path=path)
    return RawEvent(op=_FILE_OPS.get(event.event_type, Op.OTHER), path=path)


class _EventStream(FileSystemEventHandler):
    """Queues every notification from the directories it is scheduled on.

    Items are RawEvent, WatchError, or STREAM_CLOSED once the observer thread
    is gone.
    """

    def __init__(self, observer: BaseObserver | None = None) -> None:
        super().__init__()
        self._observer = observer
        self._queue: queue.Queue = queue.Queue()
        self._closed = False
        self._lost_watches: set[str] = set()

    def on_any_event(self, event: FileSystemEvent) -> None:
        self._queue.put(_to_raw_event(event))

    def report_error(self, path: str, message: str) -> None:
        self._queue.put(WatchError(path=path, message=message))

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._queue.put(STREAM_CLOSED)

    def _poll_observer(self) -> None:
        if self._observer is None or self._closed:
            return
        if not self._observer.is_alive():
            logger.error("watchdog observer stopped, closing event stream")
            self.close()
            return
        # an emitter stops by itself when its directory goes away
        for emitter in list(self._observer.emitters):
            path = os.fsdecode(emitter.watch.path)
            if emitter.is_alive() or path in self._lost_watches:
                continue
            self._lost_watches.add(path)
            logger.warning("watch on %s stopped", path)
            self.report_error(path, "watch stopped")

    def get(self, timeout: float) -> object:
        """Next item, waiting at most timeout seconds.

        Raises:
            queue.Empty: If nothing arrived in time
        """
        self._poll_observer()
        return self._queue.get(timeout=timeout)
