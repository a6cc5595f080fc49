"""Run the watcher in the foreground until interrupted."""

import logging
import signal
import threading
from collections.abc import Iterator

from ...utils.logger import configure_logging
from ..config.GuestwatchConfig import GuestwatchConfig
from ..process.ProcessNotRunningError import ProcessNotRunningError
from ..StageResult import StageResult
from ._build_process import _build_process
from .WatcherError import WatcherError

logger = logging.getLogger(__name__)

_STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def cmd_run(cancel: threading.Event | None = None) -> StageResult:
    """Run the watcher, blocking until SIGINT/SIGTERM or a fatal error.

    Args:
        cancel: Optional event that stops the watcher when set (signals set it too).
    """
    stop = cancel or threading.Event()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = GuestwatchConfig.load()
        except ValueError as exc:
            result_obj.result = f"Error loading configuration: {exc}"
            result_obj.output = {
                "errors": [str(exc)],
                "warnings": [],
                "name": "",
                "instance": "",
                "roots": [],
                "alive": False,
                "stopped": False,
            }
            result_obj.success = False
            yield (1.0, "Complete")
            return

        configure_logging(
            GuestwatchConfig.get_home_dir(),
            level=config.log.level,
            max_bytes=config.log.max_bytes,
            backup_count=config.log.backup_count,
            stderr=True,
        )
        process = _build_process(config)

        previous = {}
        if threading.current_thread() is threading.main_thread():

            def handle_signal(signum, _frame):
                logger.info("received %s, stopping", signal.Signals(signum).name)
                stop.set()

            for signum in _STOP_SIGNALS:
                previous[signum] = signal.signal(signum, handle_signal)

        yield (0.2, f"Watching mounts of {config.guest.instance} (Ctrl+C to stop)...")
        errors: list[str] = []
        try:
            process.start(stop)
        except WatcherError as exc:
            logger.error("%s stopped: %s", process.name(), exc)
            errors.append(str(exc))
        finally:
            for signum, handler in previous.items():
                signal.signal(signum, handler)

        try:
            process.alive()
            alive = True
        except ProcessNotRunningError:
            alive = False

        result_obj.result = f"Watcher failed: {errors[0]}" if errors else "Watcher stopped"
        result_obj.output = {
            "errors": errors,
            "warnings": [],
            "name": process.name(),
            "instance": config.guest.instance,
            "roots": list(process.roots),
            "alive": alive,
            "stopped": not errors,
        }
        result_obj.success = not errors
        yield (1.0, "Complete")

    return StageResult(
        announce="Starting watcher...",
        progress_callback=do_work,
    )
