"""Watcher process: replays host writes under the guest mounts as guest touches."""

import logging
import threading
from collections.abc import Callable

from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

from ..guest.GuestActions import GuestActions
from ..guest.LimaEnvironment import LimaEnvironment
from ..process.Process import Process
from ._Dispatcher import _Dispatcher
from ._EventAggregator import _EventAggregator
from ._EventStream import _EventStream
from ._LivenessState import _LivenessState
from ._register_tree import _register_tree
from ._resolve_watch_roots import _resolve_watch_roots
from ._wait_for_guest import _wait_for_guest
from .WatcherConfig import WatcherConfig
from .WatcherError import WatchStartupError

logger = logging.getLogger(__name__)

NAME = "fsnotify"

# Bound on waiting for the observer thread at shutdown
_OBSERVER_JOIN_SECS = 5.0


class WatchProcess(Process):
    """Supervised process holding the guest, the watch roots and the alive flag.

    start() waits for the instance, resolves the mounts, registers every
    eligible directory with one non-recursive watchdog watch each, then
    batches writes and touches them in the guest until cancelled.
    """

    def __init__(
        self,
        guest: GuestActions,
        environment: LimaEnvironment,
        config: WatcherConfig | None = None,
        observer_factory: Callable[[], BaseObserver] = Observer,
    ) -> None:
        self.guest = guest
        self.environment = environment
        self.config = config or WatcherConfig()
        self.roots: list[str] = []
        self._observer_factory = observer_factory
        self._liveness = _LivenessState()

    def name(self) -> str:
        return NAME

    def dependencies(self) -> tuple[list[str], bool]:
        return [], False

    def alive(self) -> None:
        self._liveness.check()

    def start(self, cancel: threading.Event) -> None:
        if not _wait_for_guest(self.environment.current_instance, cancel, self.config.poll_interval_secs):
            logger.info("cancelled while waiting for the guest, not watching")
            return

        self.roots = _resolve_watch_roots(self.environment.current_instance_config)
        self._watch(cancel)

    def _watch(self, cancel: threading.Event) -> None:
        try:
            observer = self._observer_factory()
            observer.start()
        except (OSError, RuntimeError) as exc:
            raise WatchStartupError(f"error creating watcher: {exc}") from exc

        stream = _EventStream(observer)
        dispatcher = _Dispatcher(
            self.guest,
            max_batch_events=self.config.max_batch_events,
            echo_suppress_secs=self.config.echo_suppress_secs,
        )

        def register(path: str) -> None:
            observer.schedule(stream, path, recursive=False)

        try:
            for root in self.roots:
                count = _register_tree(register, root)
                logger.info("watching %d director%s under %s", count, "y" if count == 1 else "ies", root)

            self._liveness.mark_alive()

            aggregator = _EventAggregator(
                stream,
                dispatcher.dispatch,
                window_secs=self.config.batch_window_secs,
                is_echo=dispatcher.is_echo,
            )
            aggregator.run(cancel)
        finally:
            dispatcher.shutdown()
            observer.stop()
            observer.join(timeout=_OBSERVER_JOIN_SECS)
