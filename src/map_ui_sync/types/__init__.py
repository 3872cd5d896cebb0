"""Type definitions for map-ui-sync."""

from .config import SyncSettings, get_settings
from .element import ElementDescriptor
from .sync import DisclosureState, QuiescenceResult, QuiescenceVerdict, RequestEvent, ToggleState
from .widgets import Disclosure, SelectionWidget, Toggle

__all__ = [
    "Disclosure",
    "DisclosureState",
    "ElementDescriptor",
    "QuiescenceResult",
    "QuiescenceVerdict",
    "RequestEvent",
    "SelectionWidget",
    "SyncSettings",
    "Toggle",
    "ToggleState",
    "get_settings",
]
