"""A host directory mounted into the guest."""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Mount(BaseModel):
    """One entry of the `mounts` list in lima.yaml."""

    model_config = ConfigDict(extra="ignore")

    location: str = Field(..., description="Host path, may start with ~")
    writable: bool = Field(False, description="Whether the guest may write to the mount")

    def clean_path(self) -> str:
        """Return the canonical host path without a trailing separator.

        Raises:
            OSError: If the location does not exist or cannot be resolved
        """
        resolved = Path(self.location).expanduser().resolve(strict=True)
        if not resolved.is_dir():
            raise NotADirectoryError(f"mount location is not a directory: {resolved}")
        # watchdog re-matches watches by exact path, so never keep a trailing separator
        return str(resolved).rstrip(os.sep) or os.sep
