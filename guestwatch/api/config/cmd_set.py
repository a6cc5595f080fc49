"""Set or remove a configuration value by dot-path key."""

import json
from collections.abc import Iterator
from typing import Any

from ..StageResult import StageResult
from .GuestwatchConfig import GuestwatchConfig

_MISSING = object()


def _parse_value(raw: str) -> Any:
    """Parse a value string as JSON, falling back to plain string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _deep_set(d: dict, keys: list[str], value: Any) -> None:
    for key in keys[:-1]:
        if not isinstance(d.get(key), dict):
            d[key] = {}
        d = d[key]
    d[keys[-1]] = value


def _deep_delete(d: dict, keys: list[str]) -> bool:
    for key in keys[:-1]:
        if not isinstance(d.get(key), dict):
            return False
        d = d[key]
    return d.pop(keys[-1], _MISSING) is not _MISSING


def cmd_set(key: str, value: str = "", delete: bool = False) -> StageResult:
    """Set a configuration value, or reset it to its default with delete.

    Args:
        key: Dot-path key such as "guest.instance" or "watcher.batch_window_secs"
        value: New value, parsed as JSON when possible
        delete: Remove the key so the default applies again
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = str(GuestwatchConfig.get_config_path())

        def fail(message: str, result_value: Any = None) -> None:
            result_obj.result = message
            result_obj.output = {
                "errors": [message],
                "warnings": [],
                "key": key,
                "value": result_value,
                "config_path": config_path,
            }
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = GuestwatchConfig.load()
        except ValueError as exc:
            fail(str(exc))
            yield (1.0, "Complete")
            return

        config_dict = config.to_dict()
        keys = key.split(".")
        if not all(keys):
            fail(f"Invalid key path: {key}")
            yield (1.0, "Complete")
            return

        if delete:
            yield (0.4, f"Removing {key}...")
            if not _deep_delete(config_dict, keys):
                fail(f"Key not found: {key}")
                yield (1.0, "Complete")
                return
            result_value = None
        else:
            if value == "":
                fail("No value provided (use --delete to reset a key)")
                yield (1.0, "Complete")
                return
            result_value = _parse_value(value)
            yield (0.4, f"Setting {key}...")
            _deep_set(config_dict, keys, result_value)

        yield (0.6, "Validating configuration...")
        try:
            new_config = GuestwatchConfig(**config_dict)
        except ValueError as exc:
            fail(f"Validation failed: {exc}", result_value)
            yield (1.0, "Complete")
            return

        yield (0.8, "Saving configuration...")
        try:
            new_config.save()
        except RuntimeError as exc:
            fail(str(exc), result_value)
            yield (1.0, "Complete")
            return

        if delete:
            result_obj.result = f"Reset {key} to its default"
        else:
            result_obj.result = f"Set {key} = {json.dumps(result_value)}"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "key": key,
            "value": result_value,
            "config_path": config_path,
        }
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Updating {key}...",
        progress_callback=do_work,
    )
