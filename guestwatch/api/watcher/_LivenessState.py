"""Lock-guarded alive flag read by the supervisor."""

import threading

from ..process.ProcessNotRunningError import ProcessNotRunningError


class _LivenessState:
    """Flips from not-running to running exactly once."""

    def __init__(self) -> None:
        self._alive = False
        self._lock = threading.Lock()

    def mark_alive(self) -> None:
        with self._lock:
            self._alive = True

    def is_alive(self) -> bool:
        with self._lock:
            return self._alive

    def check(self) -> None:
        with self._lock:
            if self._alive:
                return
        raise ProcessNotRunningError("not running")
