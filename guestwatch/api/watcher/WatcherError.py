"""Fatal watcher errors surfaced from WatchProcess.start()."""


class WatcherError(RuntimeError):
    """Base class for fatal watcher errors."""


class WatchStartupError(WatcherError):
    """Startup failed: instance config, mount path or observer unavailable."""


class WatchStreamClosedError(WatcherError):
    """The filesystem notification stream closed while collecting."""
