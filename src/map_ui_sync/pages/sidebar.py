"""Sidebar of the Map page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from map_ui_sync.controllers import ControllerError, wait_until
from map_ui_sync.types import ElementDescriptor, Toggle

from .base import SELECTED_TOKEN, PageComponent
from .categories import CategoriesVerticalBar
from .side_widgets import FacilitiesAndStructuresWidget, HDOTAssetsByTypeWidget

if TYPE_CHECKING:
    from map_ui_sync.session import InterfaceSession

SIDEBAR_SELECTOR = ".MuiGrid-grid-xs-true > .MuiBox-root > div:first-child"
HOME_ANCHOR = "#back-to-top-anchor"


def _sidebar_tab(label: str) -> Toggle:
    return Toggle(
        name=f"{label} tab",
        element=ElementDescriptor(name=f"{label} tab", selector=f"{SIDEBAR_SELECTOR} a[aria-label='{label}']"),
        on_token=SELECTED_TOKEN,
        dismiss_first=True,
    )


class MapPageSideBar(PageComponent):
    def __init__(self, session: InterfaceSession) -> None:
        super().__init__(session)
        self.logo = ElementDescriptor(name="Sidebar logo", selector=f"{SIDEBAR_SELECTOR} header svg")
        self.information_tab = _sidebar_tab("Information")
        self.insights_tab = _sidebar_tab("Insights")
        self.title = ElementDescriptor(name="Sidebar title", selector=f"{SIDEBAR_SELECTOR} h4.MuiTypography-root")
        self.text_paragraphs = ElementDescriptor(
            name="Sidebar paragraphs",
            selector=f"{SIDEBAR_SELECTOR} p.MuiTypography-paragraph",
        )
        self.hdot_assets_by_type_widget = HDOTAssetsByTypeWidget(session)
        self.categories_vertical_bar = CategoriesVerticalBar(session)
        self.facilities_and_structures_widget = FacilitiesAndStructuresWidget(session)

    def click_logo(self) -> None:
        """Go back to the Home page through the logo.

        Raises:
            ControllerError: If the sidebar stays visible or the URL does not
                land on the Home page anchor.
        """
        self.handle.click(self.logo)
        self.wait_for_visibility(self.information_tab.element, visible=False)
        landed = wait_until(
            self.handle,
            lambda: HOME_ANCHOR in self.handle.url,
            timeout_sec=self.settings.ui_timeout_sec,
            interval_sec=self.settings.poll_interval_sec,
        )
        if not landed:
            raise ControllerError("Did not return to the Home page", target="Sidebar logo", last_observed=self.handle.url)

    def go_to_information_tab(self) -> None:
        self.session.toggles.ensure_selected(self.information_tab)

    def go_to_insights_tab(self) -> None:
        self.session.toggles.ensure_selected(self.insights_tab)
