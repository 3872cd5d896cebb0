"""Interface synchronization engine: quiescence detection and idempotent controllers."""

from .disclosure import DISMISS_KEY, DisclosureController
from .errors import (
    ControllerError,
    DisclosureError,
    InterfaceSyncError,
    NeverStartedError,
    QuiescenceError,
    QuiescenceTimeoutError,
    SelectionError,
    ToggleError,
    WidgetLoadError,
    ZoomLevelError,
)
from .polling import wait_until
from .quiescence import QuiescenceDetector
from .selection import SelectionController
from .toggle import ToggleController

__all__ = [
    "DISMISS_KEY",
    "ControllerError",
    "DisclosureController",
    "DisclosureError",
    "InterfaceSyncError",
    "NeverStartedError",
    "QuiescenceDetector",
    "QuiescenceError",
    "QuiescenceTimeoutError",
    "SelectionController",
    "SelectionError",
    "ToggleController",
    "ToggleError",
    "WidgetLoadError",
    "ZoomLevelError",
    "wait_until",
]
