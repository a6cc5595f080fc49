"""Error raised when a command inside the guest fails."""


class GuestCommandError(RuntimeError):
    """A guest command could not be run or exited non-zero."""

    def __init__(self, command: list[str], message: str, returncode: int | None = None):
        self.command = command
        self.returncode = returncode
        super().__init__(f"{' '.join(command)}: {message}")
