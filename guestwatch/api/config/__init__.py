"""Config module - layered pydantic configuration."""
