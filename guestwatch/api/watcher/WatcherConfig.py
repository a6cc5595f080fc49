"""Watcher configuration (polling, batching and dispatch limits)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ...constants import MAX_BATCH_EVENTS


class WatcherConfig(BaseModel):
    """Watcher configuration."""

    model_config = ConfigDict(extra="forbid")

    poll_interval_secs: float = Field(5.0, gt=0, description="Interval between guest readiness polls")
    batch_window_secs: float = Field(1.0, gt=0, description="Window over which write events are batched")
    max_batch_events: int = Field(
        MAX_BATCH_EVENTS, gt=0, le=MAX_BATCH_EVENTS, description="Events beyond this count in one batch are dropped"
    )
    echo_suppress_secs: float = Field(
        2.0, ge=0, description="Ignore the single write echoed back by each touch for this long (0 disables)"
    )

    @model_validator(mode="before")
    @classmethod
    def validate_fields(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            raise ValueError(f"watcher config must be a dict, got {type(values).__name__}")
        return values
