"""Derive watch roots from the instance mount configuration."""

import logging
from collections.abc import Callable

from ..guest.InstanceConfig import InstanceConfig
from .WatcherError import WatchStartupError

logger = logging.getLogger(__name__)


def _resolve_watch_roots(current_instance_config: Callable[[], InstanceConfig]) -> list[str]:
    """Return the canonical host path of every mount, in configuration order.

    Raises:
        WatchStartupError: If the configuration or any mount path is unavailable
    """
    try:
        config = current_instance_config()
    except Exception as exc:
        raise WatchStartupError(f"error retrieving instance config: {exc}") from exc

    roots: list[str] = []
    for mount in config.mounts_or_default():
        try:
            path = mount.clean_path()
        except OSError as exc:
            raise WatchStartupError(f"error retrieving mount path {mount.location!r}: {exc}") from exc
        if path in roots:
            continue
        roots.append(path)
        logger.debug("watch root %s", path)

    return roots
