"""Settings for the synchronization engine and the map application under test."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SyncSettings(BaseSettings):
    """Environment-backed settings (prefix ``MAP_UI_SYNC_``).

    Every timing constant used by the controllers lives here so call sites do
    not each pick their own. Quiescence timeouts can still be overridden per
    call.
    """

    model_config = SettingsConfigDict(env_prefix="MAP_UI_SYNC_", env_file=".env", extra="ignore", frozen=True)

    base_url: str = Field(default="http://localhost:3000", description="Base URL of the map application")

    load_timeout_sec: float = Field(default=30.0, gt=0, description="Overall budget for a quiescence run")
    per_request_timeout_sec: float = Field(default=10.0, gt=0, description="Silence that counts as quiescence")
    settle_delay_sec: float = Field(default=0.5, ge=0, description="Pause between two observed requests")

    ui_timeout_sec: float = Field(default=5.0, gt=0, description="Bound for visibility/attribute polling")
    popup_ready_timeout_sec: float = Field(default=30.0, gt=0, description="Bound for a popup to finish loading")
    poll_interval_sec: float = Field(default=0.1, gt=0, description="Interval between two state reads")

    map_tiles_pattern: str = Field(default="**/tiles/**", description="URL glob of map data requests")
    datasets_route: str = Field(default="**/api/datasets**", description="URL glob of the datasets endpoint")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalize the base URL so paths can be appended directly."""
        stripped = value.strip().rstrip("/")
        if not stripped:
            raise ValueError("must be non-empty")
        return stripped

    @model_validator(mode="after")
    def validate_quiescence_budget(self) -> SyncSettings:
        """The per-request silence window must fit in the overall budget."""
        if self.per_request_timeout_sec > self.load_timeout_sec:
            raise ValueError("per_request_timeout_sec must not exceed load_timeout_sec")
        return self


@lru_cache(maxsize=1)
def get_settings() -> SyncSettings:
    """Load and cache validated settings from the environment."""
    try:
        return SyncSettings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid map-ui-sync settings: {exc}") from exc


__all__ = [
    "SyncSettings",
    "get_settings",
]
