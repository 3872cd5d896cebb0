"""Configuration popups opened from the Map page toolbar.

Both popups render into the same Material UI popover, so only one can be open
at a time. The disclosure controller dismisses whichever is open before
opening the requested one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from map_ui_sync.controllers import QuiescenceTimeoutError
from map_ui_sync.core.utils import logger
from map_ui_sync.types import Disclosure, ElementDescriptor, QuiescenceVerdict, SelectionWidget, Toggle, ToggleState

from .base import DISABLED_TOKEN, POPOVER_SELECTOR, PageComponent

if TYPE_CHECKING:
    from map_ui_sync.session import InterfaceSession

POPOVER = ElementDescriptor(name="Configuration popover", selector=POPOVER_SELECTOR)


class MoreLayersConfig(PageComponent):
    """The More Layers popup: optional map layers, each behind a switch."""

    def __init__(self, session: InterfaceSession) -> None:
        super().__init__(session)
        self.btn = ElementDescriptor(name="More Layers button", selector="text=More Layers")
        self.popup = POPOVER
        self.facilities_and_structures_switch = POPOVER.child(
            ".MuiGrid-direction-xs-column + div > div:first-child > li:first-child span.MuiIconButton-root",
            name="Facilities and Structures switch",
        )
        # One of the switches is used to tell whether the popup is open
        self.disclosure = Disclosure(
            name="More Layers",
            trigger=self.btn,
            sentinel=self.facilities_and_structures_switch,
            content=self.popup,
        )
        self.facilities_and_structures_toggle = Toggle(
            name="Facilities and Structures layer",
            element=self.facilities_and_structures_switch,
            disclosure=self.disclosure,
        )

    def expand(self) -> None:
        """Expands the menu by clicking on the More Layers button."""
        self.session.disclosures.ensure_open(self.disclosure)

    def toggle_facilities_and_structures(self, on: bool = True) -> ToggleState:
        """Switch the Facilities and Structures layer on or off, then let its data settle.

        A layer switched off, or served from cache, makes no request at all,
        so only a quiescence timeout is treated as a failure here.

        Raises:
            QuiescenceTimeoutError: If layer requests do not settle in time.
        """
        state = self.session.toggles.set_toggle(self.facilities_and_structures_toggle, ToggleState.from_bool(on))
        result = self.session.quiescence.await_quiescence(self.settings.map_tiles_pattern)
        if result.verdict == QuiescenceVerdict.TIMED_OUT:
            raise QuiescenceTimeoutError(
                f"Layer requests matching {result.pattern} did not settle after switching {state.value}",
                result=result,
            )
        if result.verdict == QuiescenceVerdict.NEVER_STARTED:
            logger.debug("No layer request after the switch, nothing to wait for")
        return state


class HDOTAssetsConfig(PageComponent):
    """The HDOT Assets popup: per-asset switches plus an Unselect All action."""

    def __init__(self, session: InterfaceSession) -> None:
        super().__init__(session)
        self.btn = ElementDescriptor(
            name="HDOT Assets button",
            selector="button[aria-controls='simple-menu'] span",
            has_text="HDOT Assets",
        )
        self.popup = POPOVER
        self.unselect_all_btn = POPOVER.child("button.MuiButton-disableElevation", name="Unselect All button")
        self.selected_msg = POPOVER.child("button.MuiButton-disableElevation + p", name="HDOT Assets selected caption")
        # Switches stay disabled until the popup has loaded the asset list
        self.disabled_switches = POPOVER.child(
            "span.MuiIconButton-root[aria-disabled='true']", name="Disabled asset switches"
        )
        self.disclosure = Disclosure(
            name="HDOT Assets",
            trigger=self.btn,
            sentinel=self.unselect_all_btn,
            content=self.popup,
            busy_indicator=self.disabled_switches,
        )
        self.selection = SelectionWidget(
            name="HDOT Assets",
            count_label=self.selected_msg,
            clear_action=self.unselect_all_btn,
            disclosure=self.disclosure,
            disabled_token=DISABLED_TOKEN,
        )

    def expand(self) -> None:
        """Expands the menu by clicking on the HDOT Assets button."""
        self.session.disclosures.ensure_open(self.disclosure)

    def unselect_all(self) -> int:
        """Clicks on the Unselect All button in the expanded menu."""
        return self.session.selections.clear_selection(self.selection)
