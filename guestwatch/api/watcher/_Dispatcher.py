"""Fan a batch out into independent guest touches."""

import logging
import threading
import time
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from functools import partial

from ...constants import MAX_BATCH_EVENTS
from ..guest.GuestActions import GuestActions
from .Batch import Batch
from .RawEvent import RawEvent

logger = logging.getLogger(__name__)

TOUCH_COMMAND = ("touch", "-c")


class _Dispatcher:
    """Caps each batch and touches every retained path in the guest.

    Touches run on a worker pool and are never awaited; a failure is logged
    and affects nothing else. With echo suppression on, every successful
    touch expects exactly one write to come back for its path.
    """

    def __init__(
        self,
        guest: GuestActions,
        max_batch_events: int = MAX_BATCH_EVENTS,
        echo_suppress_secs: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._guest = guest
        self._max_batch_events = min(max_batch_events, MAX_BATCH_EVENTS)
        self._echo_suppress_secs = echo_suppress_secs
        self._clock = clock
        self._executor = ThreadPoolExecutor(max_workers=self._max_batch_events, thread_name_prefix="guestwatch-touch")
        # path -> times of touches whose echo has not been seen yet
        self._pending: dict[str, list[float]] = {}
        self._lock = threading.Lock()

    def dispatch(self, events: list[RawEvent]) -> Batch | None:
        """Submit one touch per retained event and return without waiting.

        Returns:
            The capped batch, or None when there was nothing to do
        """
        if not events:
            return None

        batch = Batch.capped(events, self._max_batch_events)
        if batch.dropped:
            logger.warning(
                "fsnotify events more than %d (%d), discarding the extra %d",
                self._max_batch_events,
                len(events),
                batch.dropped,
            )

        self._prune_pending()
        for event in batch.events:
            logger.debug("%s modified, touching...", event.path)
            future = self._executor.submit(self.touch, event.path)
            future.add_done_callback(partial(self._log_failure, event.path))
        return batch

    def touch(self, path: str) -> None:
        """Touch path inside the guest (raises GuestCommandError on failure)."""
        self._guest.run_quiet(*TOUCH_COMMAND, path)
        if self._echo_suppress_secs > 0:
            with self._lock:
                self._pending.setdefault(path, []).append(self._clock())

    def is_echo(self, path: str) -> bool:
        """Whether a write on path is the echo of one of our touches.

        A match consumes that touch, so the next write on path is treated as real.
        """
        if self._echo_suppress_secs <= 0:
            return False
        cutoff = self._clock() - self._echo_suppress_secs
        with self._lock:
            pending = [t for t in self._pending.pop(path, ()) if t > cutoff]
            if not pending:
                return False
            del pending[0]
            if pending:
                self._pending[path] = pending
        return True

    def _prune_pending(self) -> None:
        cutoff = self._clock() - self._echo_suppress_secs
        with self._lock:
            for path in list(self._pending):
                pending = [t for t in self._pending[path] if t > cutoff]
                if pending:
                    self._pending[path] = pending
                else:
                    del self._pending[path]

    @staticmethod
    def _log_failure(path: str, future: Future) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.error("error touching %s in guest: %s", path, exc)

    def shutdown(self) -> None:
        """Stop accepting work; queued touches are cancelled, running ones finish on their own."""
        self._executor.shutdown(wait=False, cancel_futures=True)
