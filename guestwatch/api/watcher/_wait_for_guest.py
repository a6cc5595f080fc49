"""Block until the guest instance reports itself running."""

import logging
import threading
from collections.abc import Callable

from ..guest.Instance import Instance

logger = logging.getLogger(__name__)


def _wait_for_guest(
    current_instance: Callable[[], Instance],
    cancel: threading.Event,
    interval_secs: float,
) -> bool:
    """Poll the instance every interval_secs until it runs.

    Errors from the readiness source count as not running.

    Returns:
        True once the instance is running, False if cancel was set first
    """
    while True:
        logger.debug("waiting for guest instance...")
        if cancel.wait(interval_secs):
            return False
        try:
            instance = current_instance()
        except Exception as exc:
            logger.debug("guest readiness check failed: %s", exc)
            continue
        if instance.running:
            logger.info("guest instance %s is running", instance.name)
            return True
