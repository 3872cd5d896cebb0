"""map-ui-sync - synchronization engine and page objects for map end-to-end tests"""

from map_ui_sync.core.utils import logger
from map_ui_sync.pages import AppUI
from map_ui_sync.session import InterfaceSession

__all__ = ["AppUI", "InterfaceSession", "logger"]
