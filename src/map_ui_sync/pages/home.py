"""Page object for the Home page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from playwright.sync_api import expect

from map_ui_sync.core.utils import logger
from map_ui_sync.types import ElementDescriptor, Toggle

from .base import SELECTED_TOKEN, PageComponent

if TYPE_CHECKING:
    from map_ui_sync.session import InterfaceSession

NAV_BAR_SELECTOR = "header.MuiPaper-root"
_TAB_SELECTOR = f"{NAV_BAR_SELECTOR} .MuiTabs-flexContainer > a[role='tab']"

# Section key -> (display name, position selector among the nav bar tabs)
NAV_BAR_SECTIONS: dict[str, tuple[str, str]] = {
    "climate_resilience": ("Climate Resilience", ":first-child"),
    "action_plan": ("Action Plan", ":nth-child(2)"),
    "climate_stressor": ("Climate Stressor", ":nth-child(3)"),
    "the_urgency": ("The Urgency", ":nth-child(4)"),
    "hdot_map": ("HDOT Map", ":nth-child(5)"),
    "map_components": ("Map Components", ":last-child"),
}


class HomePageNavBar(PageComponent):
    """The nav bar at the top of the Home page. Each tab scrolls to a section."""

    def __init__(self, session: InterfaceSession) -> None:
        super().__init__(session)
        self.logo = ElementDescriptor(name="Nav bar logo", selector=f"{NAV_BAR_SELECTOR} svg")
        self.tabs: dict[str, Toggle] = {
            key: Toggle(
                name=f"{label} tab",
                element=ElementDescriptor(name=f"{label} tab", selector=f"{_TAB_SELECTOR}{position}"),
                on_token=SELECTED_TOKEN,
            )
            for key, (label, position) in NAV_BAR_SECTIONS.items()
        }
        self.back_to_top_btn = ElementDescriptor(
            name="Back to top button",
            selector="button[aria-label='scroll back to top']",
        )

    def go_to_section(self, section: str) -> None:
        """Select the nav bar tab of ``section`` (a key of ``NAV_BAR_SECTIONS``)."""
        self.session.toggles.ensure_selected(self.tabs[section])

    def go_to_climate_resilience_section(self) -> None:
        self.go_to_section("climate_resilience")

    def go_to_action_plan_section(self) -> None:
        self.go_to_section("action_plan")

    def go_to_climate_stressor_section(self) -> None:
        self.go_to_section("climate_stressor")

    def go_to_the_urgency_section(self) -> None:
        self.go_to_section("the_urgency")

    def go_to_hdot_map_section(self) -> None:
        self.go_to_section("hdot_map")

    def go_to_map_components_section(self) -> None:
        self.go_to_section("map_components")

    def go_to_top_of_page_via_btn(self) -> None:
        """Scroll back to the top with the floating button, which hides once at the top."""
        self.wait_for_visibility(self.back_to_top_btn)
        self.handle.click(self.back_to_top_btn)
        self.wait_for_visibility(self.back_to_top_btn, visible=False)


class HomePage(PageComponent):
    """Abstraction of the Home page."""

    def __init__(self, session: InterfaceSession) -> None:
        super().__init__(session)
        self.nav_bar = HomePageNavBar(session)
        self.top_section_explore_map_btn = ElementDescriptor(
            name="Explore map button",
            selector="div#back-to-top-anchor a[href='/map/information/info']",
        )

    def open_map_via_top_section_explore_map_btn(self) -> None:
        """Open the Map page from the top section. The Home page content goes away."""
        logger.info("Opening the map from the Home page")
        self.handle.click(self.top_section_explore_map_btn)
        self.wait_for_visibility(self.top_section_explore_map_btn, visible=False)

    @property
    def assert_that(self) -> HomePageAssertions:
        """Interface to invoking assertions on the page."""
        return HomePageAssertions(self)


class HomePageAssertions:
    def __init__(self, home_page: HomePage) -> None:
        self.home_page = home_page

    def all_nav_bar_items_are_visible(self) -> None:
        """Asserts that the logo and every section tab of the nav bar are visible."""
        nav_bar = self.home_page.nav_bar
        timeout = self.home_page.expect_timeout_ms
        expect(self.home_page.locator(nav_bar.logo)).to_be_visible(timeout=timeout)
        for tab in nav_bar.tabs.values():
            expect(self.home_page.locator(tab.element)).to_be_visible(timeout=timeout)
