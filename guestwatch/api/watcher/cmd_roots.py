"""List the watch roots derived from the instance mounts."""

from collections.abc import Iterator

from ..config.GuestwatchConfig import GuestwatchConfig
from ..guest.LimaEnvironment import LimaEnvironment
from ..StageResult import StageResult
from ._resolve_watch_roots import _resolve_watch_roots
from .WatcherError import WatchStartupError


def cmd_roots() -> StageResult:
    """Resolve the host directories the watcher would monitor."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        instance = ""
        try:
            config = GuestwatchConfig.load()
            instance = config.guest.instance
            environment = LimaEnvironment(config.guest)
            yield (0.5, f"Reading mounts of {instance}...")
            roots = _resolve_watch_roots(environment.current_instance_config)
        except (ValueError, WatchStartupError) as exc:
            result_obj.result = f"Error resolving watch roots: {exc}"
            result_obj.output = {
                "errors": [str(exc)],
                "warnings": [],
                "instance": instance,
                "roots": [],
            }
            result_obj.success = False
            yield (1.0, "Complete")
            return

        result_obj.result = f"Found {len(roots)} watch root(s)"
        result_obj.output = {
            "errors": [],
            "warnings": [] if roots else ["No watch roots resolved"],
            "instance": instance,
            "roots": roots,
        }
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Resolving watch roots...",
        progress_callback=do_work,
    )
