"""Abstraction of the UI part of the map application."""

from __future__ import annotations

from typing import TYPE_CHECKING

from map_ui_sync.session import InterfaceSession

from .home import HomePage
from .map_page import MapPage

if TYPE_CHECKING:
    from map_ui_sync.interface.protocol import InterfaceHandle
    from map_ui_sync.types import SyncSettings


class AppUI:
    """Entry point of the page objects for one scenario.

    Args:
        handle: Session handle owned by the scenario.
        settings: Settings. If None, loaded from the environment.

    Example:
        >>> app_ui = AppUI(PlaywrightInterfaceHandle(page))
        >>> app_ui.open()
        >>> app_ui.home_page.open_map_via_top_section_explore_map_btn()
        >>> app_ui.map_page.wait_until_map_has_loaded()
    """

    def __init__(self, handle: InterfaceHandle, settings: SyncSettings | None = None) -> None:
        self.session = InterfaceSession.create(handle, settings)
        self.home_page = HomePage(self.session)
        self.map_page = MapPage(self.session)

    def open(self, path: str = "/") -> None:
        """Navigate to ``path`` on the configured base URL."""
        self.session.handle.goto(f"{self.session.settings.base_url}{path}")

    def close(self) -> None:
        self.session.close()
