"""Collect write events into fixed windows and hand each window off."""

import logging
import queue
import threading
import time
from collections.abc import Callable

from ._EventStream import STREAM_CLOSED
from .RawEvent import RawEvent
from .WatchError import WatchError
from .WatcherError import WatchStreamClosedError

logger = logging.getLogger(__name__)

# Upper bound on how long cancellation can go unnoticed
_TICK_SECS = 0.1


class _EventAggregator:
    """Alternates between collecting a window of events and dispatching it.

    The stream must provide get(timeout) raising queue.Empty when idle. The
    dispatch callable must not block; it takes ownership of the list.
    """

    def __init__(
        self,
        stream,
        dispatch: Callable[[list[RawEvent]], object],
        window_secs: float = 1.0,
        is_echo: Callable[[str], bool] | None = None,
        tick_secs: float = _TICK_SECS,
    ) -> None:
        self._stream = stream
        self._dispatch = dispatch
        self._window_secs = window_secs
        self._is_echo = is_echo
        self._tick_secs = tick_secs

    def run(self, cancel: threading.Event) -> None:
        """Loop until cancel is set.

        Raises:
            WatchStreamClosedError: If the notification stream closes
        """
        while True:
            events = self.collect(cancel)
            if events is None:
                return
            self._dispatch(events)

    def collect(self, cancel: threading.Event) -> list[RawEvent] | None:
        """Collect write events for one window.

        Returns:
            Events in arrival order, or None if cancel was set (the partial window is dropped)
        """
        events: list[RawEvent] = []
        deadline = time.monotonic() + self._window_secs
        while True:
            if cancel.is_set():
                if events:
                    logger.debug("cancelled, dropping %d pending event(s)", len(events))
                return None

            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return events

            try:
                item = self._stream.get(timeout=min(remaining, self._tick_secs))
            except queue.Empty:
                continue

            if item is STREAM_CLOSED:
                raise WatchStreamClosedError("watcher channel closed")
            if isinstance(item, WatchError):
                logger.debug("watch error on %s: %s", item.path, item.message)
                continue

            logger.debug("got event: %s, file: %s", item.op.value, item.path)
            if not item.is_write:
                continue
            if self._is_echo is not None and self._is_echo(item.path):
                logger.debug("ignoring echo of touch on %s", item.path)
                continue
            events.append(item)
