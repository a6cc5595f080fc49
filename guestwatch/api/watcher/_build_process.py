"""Construct a WatchProcess for the configured Lima instance."""

from ..config.GuestwatchConfig import GuestwatchConfig
from ..guest.LimaEnvironment import LimaEnvironment
from ..guest.LimaGuest import LimaGuest
from .WatchProcess import WatchProcess


def _build_process(config: GuestwatchConfig) -> WatchProcess:
    return WatchProcess(
        guest=LimaGuest(config.guest),
        environment=LimaEnvironment(config.guest),
        config=config.watcher,
    )
