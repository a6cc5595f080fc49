"""Error reported by a process that is not (yet) running."""


class ProcessNotRunningError(RuntimeError):
    """Raised by Process.alive() while the process is not running."""
