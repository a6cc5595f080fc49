"""Abstract base class for supervised background processes."""

import threading
from abc import ABC, abstractmethod


class Process(ABC):
    """A long-running background process managed by a supervisor.

    The supervisor starts the process on a thread of its own, queries alive()
    to decide whether it is healthy and sets the cancel event to stop it.
    """

    @abstractmethod
    def name(self) -> str:
        """Unique process name."""
        pass

    @abstractmethod
    def dependencies(self) -> tuple[list[str], bool]:
        """Return (names of required host dependencies, whether root is required)."""
        pass

    @abstractmethod
    def alive(self) -> None:
        """Return when the process is healthy.

        Raises:
            ProcessNotRunningError: If the process is not running
        """
        pass

    @abstractmethod
    def start(self, cancel: threading.Event) -> None:
        """Run until cancel is set or a fatal error occurs.

        Returns normally on cancellation and raises on fatal errors.
        """
        pass
