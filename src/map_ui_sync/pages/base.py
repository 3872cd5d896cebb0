"""Shared plumbing for page objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from map_ui_sync.controllers import ControllerError, wait_until
from map_ui_sync.interface import PlaywrightInterfaceHandle

if TYPE_CHECKING:
    from playwright.sync_api import Locator

    from map_ui_sync.session import InterfaceSession
    from map_ui_sync.types import ElementDescriptor

# Class tokens set by Material UI on interactive components
SELECTED_TOKEN = "Mui-selected"
CHECKED_TOKEN = "Mui-checked"
DISABLED_TOKEN = "Mui-disabled"

POPOVER_SELECTOR = ".MuiPopover-paper"


class PageComponent:
    """Base class for page objects and widgets bound to one session."""

    def __init__(self, session: InterfaceSession) -> None:
        self.session = session
        self.handle = session.handle
        self.settings = session.settings

    def wait_for_visibility(self, element: ElementDescriptor, *, visible: bool = True) -> None:
        """Wait until ``element`` is (or is no longer) visible.

        Raises:
            ControllerError: If the visibility is not reached within the UI timeout.
        """
        reached = wait_until(
            self.handle,
            lambda: self.handle.is_visible(element) == visible,
            timeout_sec=self.settings.ui_timeout_sec,
            interval_sec=self.settings.poll_interval_sec,
        )
        if not reached:
            expected = "visible" if visible else "hidden"
            raise ControllerError(f"Element did not become {expected}", target=element.name, last_observed=not visible)

    def locator(self, element: ElementDescriptor) -> Locator:
        """Playwright locator for assertions. Requires a Playwright-backed session."""
        if not isinstance(self.handle, PlaywrightInterfaceHandle):
            raise TypeError(f"Assertions need a PlaywrightInterfaceHandle, got {type(self.handle).__name__}")
        return self.handle.locator(element)

    @property
    def expect_timeout_ms(self) -> float:
        return self.settings.ui_timeout_sec * 1000
