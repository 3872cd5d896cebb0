"""Error taxonomy of the synchronization engine.

Every controller either converges to the requested state or raises one of
these with enough observed state to diagnose the failure. Nothing here is
retried beyond the bounded polling inside the controllers.
"""

from __future__ import annotations

from typing import Any

from map_ui_sync.core.utils.displayed_values import DisplayedValueError
from map_ui_sync.types import QuiescenceResult


class InterfaceSyncError(RuntimeError):
    """Base error for synchronization failures."""


class QuiescenceError(InterfaceSyncError):
    """Raised when network traffic did not start and then settle."""

    def __init__(self, message: str, *, result: QuiescenceResult) -> None:
        super().__init__(message)
        self.result = result


class NeverStartedError(QuiescenceError):
    """No matching request was ever observed (wiring or selector defect)."""


class QuiescenceTimeoutError(QuiescenceError):
    """Requests kept arriving past the overall budget (slow or degraded backend)."""


class ControllerError(InterfaceSyncError):
    """Raised when a post-condition is not observed within its bound.

    Attributes:
        target: Name of the widget the controller was driving.
        last_observed: Last state read before giving up.
    """

    def __init__(self, message: str, *, target: str, last_observed: Any = None) -> None:
        super().__init__(f"{message} (target={target!r}, last_observed={last_observed!r})")
        self.target = target
        self.last_observed = last_observed


class DisclosureError(ControllerError):
    """A disclosure could not be opened, closed or isolated."""


class ToggleError(ControllerError):
    """A toggle did not reach the requested state."""


class SelectionError(ControllerError):
    """A selection widget did not converge to the requested selection."""


class ZoomLevelError(ControllerError):
    """A zoom action did not change the displayed level by exactly one step."""


class WidgetLoadError(ControllerError):
    """A widget did not finish loading its data within the bounded wait."""


__all__ = [
    "ControllerError",
    "DisclosureError",
    "DisplayedValueError",
    "InterfaceSyncError",
    "NeverStartedError",
    "QuiescenceError",
    "QuiescenceTimeoutError",
    "SelectionError",
    "ToggleError",
    "WidgetLoadError",
    "ZoomLevelError",
]
