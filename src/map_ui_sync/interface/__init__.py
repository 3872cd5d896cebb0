"""Interface handles: the capability the controllers drive.

Provides the protocol the controllers depend on, its Playwright
implementation, and JSON response mutation helpers.
"""

from .playwright_handle import PlaywrightInterfaceHandle
from .protocol import InterfaceHandle
from .response_mutation import remove_top_level_key, without_key

__all__ = [
    "InterfaceHandle",
    "PlaywrightInterfaceHandle",
    "remove_top_level_key",
    "without_key",
]
