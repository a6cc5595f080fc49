"""Instance configuration read from lima.yaml."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .Mount import Mount


class InstanceConfig(BaseModel):
    """The part of a Lima instance configuration the watcher cares about."""

    model_config = ConfigDict(extra="ignore")

    mounts: list[Mount] = Field(default_factory=list)

    def mounts_or_default(self) -> list[Mount]:
        """Configured mounts, or the user home directory when none are declared."""
        if self.mounts:
            return self.mounts
        return [Mount(location=str(Path.home()), writable=True)]

    @classmethod
    def from_file(cls, path: Path) -> "InstanceConfig":
        """Load the instance configuration from a lima.yaml file.

        Raises:
            ValueError: If the file cannot be read, parsed or validated
        """
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ValueError(f"Cannot read instance config {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in instance config {path}: {e}") from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ValueError(f"Instance config {path} must be a mapping")
        if raw.get("mounts") is None:
            raw["mounts"] = []

        try:
            return cls(**raw)
        except ValidationError as e:
            raise ValueError(f"Invalid instance config {path}: {e}") from e
