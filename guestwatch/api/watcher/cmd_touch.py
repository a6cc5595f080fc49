"""Send a single touch hint to the guest."""

from collections.abc import Iterator
from pathlib import Path

from ..config.GuestwatchConfig import GuestwatchConfig
from ..guest.GuestCommandError import GuestCommandError
from ..guest.LimaGuest import LimaGuest
from ..StageResult import StageResult
from ._Dispatcher import TOUCH_COMMAND


def cmd_touch(path: Path) -> StageResult:
    """Touch path inside the guest, as the watcher would after a write.

    Args:
        path: Host path; it is made absolute since mounts use identical paths in the guest.
    """
    target = str(path.expanduser().absolute())

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = GuestwatchConfig.load()
            yield (0.5, f"Touching {target}...")
            LimaGuest(config.guest).run_quiet(*TOUCH_COMMAND, target)
        except (ValueError, GuestCommandError) as exc:
            result_obj.result = f"Error touching {target}: {exc}"
            result_obj.output = {"errors": [str(exc)], "warnings": [], "path": target, "touched": False}
            result_obj.success = False
            yield (1.0, "Complete")
            return

        result_obj.result = f"Touched {target}"
        result_obj.output = {"errors": [], "warnings": [], "path": target, "touched": True}
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Touching {target} in guest...",
        progress_callback=do_work,
    )
