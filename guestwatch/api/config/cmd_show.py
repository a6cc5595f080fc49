"""Show configuration command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .GuestwatchConfig import GuestwatchConfig


def cmd_show(section: str = "") -> StageResult:
    """Show a configuration section, or every section when none is given.

    Args:
        section: Section name ("guest", "watcher", "log"). Empty string returns all sections.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        config_path = str(GuestwatchConfig.get_config_path())
        try:
            config = GuestwatchConfig.load()
        except ValueError as exc:
            result_obj.result = f"Error loading configuration: {exc}"
            result_obj.output = {
                "errors": [str(exc)],
                "warnings": [],
                "section": section,
                "content": {},
                "config_path": config_path,
            }
            result_obj.success = False
            yield (1.0, "Complete")
            return

        config_dict = config.to_dict()
        if section and section not in config_dict:
            result_obj.result = f"Section '{section}' not found"
            result_obj.output = {
                "errors": [f"Unknown section: {section}"],
                "warnings": [],
                "section": section,
                "content": {},
                "config_path": config_path,
            }
            result_obj.success = False
            yield (1.0, "Complete")
            return

        content = config_dict[section] if section else config_dict
        result_obj.result = f"Retrieved configuration for '{section}'" if section else "Retrieved configuration"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "section": section,
            "content": content,
            "config_path": config_path,
        }
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Loading configuration...",
        progress_callback=do_work,
    )
