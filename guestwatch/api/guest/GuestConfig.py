"""Guest (Lima instance) configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GuestConfig(BaseModel):
    """Which Lima instance to talk to and how."""

    model_config = ConfigDict(extra="forbid")

    instance: str = Field("colima", description="Lima instance name")
    limactl: str = Field("limactl", description="limactl executable (name on PATH or absolute path)")
    lima_home: str | None = Field(None, description="Override for LIMA_HOME (defaults to env or ~/.lima)")
    command_timeout_secs: float = Field(30.0, gt=0, description="Timeout for a single guest command")

    @field_validator("instance")
    @classmethod
    def validate_instance(cls, v: str) -> str:
        if not v or "/" in v:
            raise ValueError(f"guest.instance must be a plain instance name, got: {v!r}")
        return v
