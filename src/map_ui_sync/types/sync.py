"""State and result types for the interface synchronization engine."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class RequestEvent(BaseModel):
    """An outbound network request observed on the interface.

    Attributes:
        url: Full request URL.
        timestamp: Monotonic time (seconds) at which the request was dispatched.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(description="Full request URL")
    timestamp: float = Field(description="Monotonic dispatch time in seconds")


class QuiescenceVerdict(StrEnum):
    """Outcome of a quiescence detection run. Only LOADED is a success."""

    LOADED = "loaded"  # requests started, then stopped
    NEVER_STARTED = "never_started"  # no matching request ever arrived
    TIMED_OUT = "timed_out"  # requests kept arriving past the overall budget


class QuiescenceResult(BaseModel):
    """Result from a quiescence detection run.

    Attributes:
        pattern: Description of the URL pattern that was tracked.
        verdict: Tri-state outcome.
        request_count: Number of matching requests observed.
        elapsed_sec: Time spent waiting.
    """

    model_config = ConfigDict(frozen=True)

    pattern: str = Field(description="Tracked URL pattern")
    verdict: QuiescenceVerdict = Field(description="Tri-state outcome")
    request_count: int = Field(ge=0, description="Number of matching requests observed")
    elapsed_sec: float = Field(ge=0, description="Time spent waiting in seconds")

    @property
    def success(self) -> bool:
        """True only for the LOADED verdict."""
        return self.verdict == QuiescenceVerdict.LOADED


class ToggleState(StrEnum):
    """State of a binary control."""

    ON = "on"
    OFF = "off"

    @classmethod
    def from_bool(cls, value: bool) -> ToggleState:
        return cls.ON if value else cls.OFF


class DisclosureState(StrEnum):
    """State of a collapsible region, inferred from its sentinel's visibility."""

    OPEN = "open"
    CLOSED = "closed"


__all__ = [
    "DisclosureState",
    "QuiescenceResult",
    "QuiescenceVerdict",
    "RequestEvent",
    "ToggleState",
]
