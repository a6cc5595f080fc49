"""Abstract base class for running commands inside the guest."""

from abc import ABC, abstractmethod


class GuestActions(ABC):
    """Command execution inside the guest environment.

    Every method raises GuestCommandError when the command cannot be run or
    exits non-zero.
    """

    @abstractmethod
    def run(self, *args: str) -> None:
        """Run a command in the guest, passing its output through."""
        pass

    @abstractmethod
    def run_quiet(self, *args: str) -> None:
        """Run a command in the guest with its output suppressed."""
        pass

    @abstractmethod
    def write(self, path: str, data: bytes) -> None:
        """Write data to a file inside the guest, replacing it."""
        pass
