"""Top-level guestwatch configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.get_home_dir import get_home_dir
from ..guest.GuestConfig import GuestConfig
from ..watcher.WatcherConfig import WatcherConfig
from .LogConfig import LogConfig


class GuestwatchConfig(BaseModel):
    """Top-level configuration for guestwatch layers."""

    model_config = ConfigDict(extra="forbid")

    guest: GuestConfig = Field(default_factory=GuestConfig)
    watcher: WatcherConfig = Field(default_factory=WatcherConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get guestwatch home directory based on GUESTWATCH_HOME or default to ~/.guestwatch."""
        return get_home_dir()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file under the home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "GuestwatchConfig":
        """Load and validate config from file.

        A missing config file yields the defaults; every section is optional.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert instance to a dictionary for serialization."""
        return {
            "guest": self.guest.model_dump(),
            "watcher": self.watcher.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
