"""Page object for the Map page."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from playwright.sync_api import expect

from map_ui_sync.controllers import ControllerError, ZoomLevelError, wait_until
from map_ui_sync.core.utils import logger
from map_ui_sync.core.utils.displayed_values import DisplayedValueError, read_displayed_int
from map_ui_sync.interface import without_key
from map_ui_sync.types import ElementDescriptor

from .base import PageComponent
from .categories import DATASET_CATEGORIES
from .config_popups import HDOTAssetsConfig, MoreLayersConfig
from .sidebar import MapPageSideBar

if TYPE_CHECKING:
    from map_ui_sync.session import InterfaceSession
    from map_ui_sync.types import QuiescenceResult

# Key of each dataset in the datasets response -> category it feeds
DATASET_RESPONSE_KEYS: dict[str, str] = {
    "assets": "assets",
    "hazards": "hazards",
    "index": "indices",
    "others": "others",
}


class MapPage(PageComponent):
    """Abstraction of the Map page."""

    def __init__(self, session: InterfaceSession) -> None:
        super().__init__(session)
        self.map_area = ElementDescriptor(name="Map canvas", selector="canvas[aria-label='Map']")
        self.zoom_in_btn = ElementDescriptor(name="Zoom in button", selector="button[aria-label='Zoom in']")
        self.zoom_out_btn = ElementDescriptor(name="Zoom out button", selector="button[aria-label='Zoom out']")
        self.zoom_level = ElementDescriptor(name="Zoom level label", selector="[aria-label='Zoom level']")
        self.tooltip = ElementDescriptor(name="Map tooltip", selector="div[role='tooltip']")
        self.sidebar = MapPageSideBar(session)
        self.more_layers_config = MoreLayersConfig(session)
        self.hdot_assets_config = HDOTAssetsConfig(session)

    def wait_until_map_has_loaded(self, **timeouts: float) -> QuiescenceResult:
        """Wait for the map data requests to start and then stop.

        Args:
            **timeouts: Optional ``load_timeout_sec``, ``per_request_timeout_sec``
                and ``settle_delay_sec`` overrides.

        Raises:
            NeverStartedError: If the map never requested any data.
            QuiescenceTimeoutError: If map requests did not settle in time.
        """
        return self.session.quiescence.wait_until_loaded(self.settings.map_tiles_pattern, **timeouts)

    def modify_datasets_response(self, dataset_name: str) -> None:
        """Serve the datasets endpoint without ``dataset_name``.

        Must be called before the Map page is opened.

        Args:
            dataset_name: Top-level key of the datasets response
                (one of ``DATASET_RESPONSE_KEYS``).
        """
        if dataset_name not in DATASET_RESPONSE_KEYS:
            raise ValueError(f"Unknown dataset {dataset_name!r}, expected one of {sorted(DATASET_RESPONSE_KEYS)}")
        logger.info(f"Removing dataset {dataset_name!r} from the datasets response")
        self.handle.route_json(self.settings.datasets_route, without_key(dataset_name))

    def zoom_level_value(self) -> int:
        """Displayed zoom level."""
        return read_displayed_int(self.handle, self.zoom_level)

    def _zoom(self, button: ElementDescriptor, delta: int) -> int:
        before = self.zoom_level_value()
        expected = before + delta
        logger.info(f"Zooming from level {before} to {expected}")
        self.handle.click(button)

        observed: list[int | str | None] = [before]

        def _reached() -> bool:
            try:
                observed.append(self.zoom_level_value())
            except DisplayedValueError as e:
                observed.append(e.text)
            return observed[-1] == expected

        if not wait_until(
            self.handle,
            _reached,
            timeout_sec=self.settings.ui_timeout_sec,
            interval_sec=self.settings.poll_interval_sec,
        ):
            raise ZoomLevelError(
                f"Zoom level did not change from {before} to {expected}",
                target=button.name,
                last_observed=observed[-1],
            )
        return expected

    def zoom_in(self) -> int:
        """Zoom in by exactly one level and return the new level."""
        return self._zoom(self.zoom_in_btn, 1)

    def zoom_out(self) -> int:
        """Zoom out by exactly one level and return the new level."""
        return self._zoom(self.zoom_out_btn, -1)

    def _tooltip_text(self) -> str:
        return (self.handle.text_content(self.tooltip) or "").strip()

    def hover_map_at(self, x: float, y: float) -> str:
        """Move the pointer to ``(x, y)`` relative to the map canvas and read the tooltip.

        A tooltip left over from a previous hover is not accepted: the tooltip
        must either hide and show again, or change its text.

        Returns:
            Text of the tooltip shown for that point.

        Raises:
            ControllerError: If the map is not rendered, no tooltip shows up or
                the previous tooltip is still displayed.
        """
        box = self.handle.bounding_box(self.map_area)
        if box is None:
            raise ControllerError("Map canvas is not rendered", target=self.map_area.name)
        if not (0 <= x <= box["width"] and 0 <= y <= box["height"]):
            raise ValueError(f"Point ({x}, {y}) is outside the map ({box['width']}x{box['height']})")

        previous = self._tooltip_text() if self.handle.is_visible(self.tooltip) else None
        self.handle.move_pointer(box["x"] + x, box["y"] + y)
        if previous is None:
            self.wait_for_visibility(self.tooltip)
            return self._tooltip_text()

        observed: dict[str, object] = {"hidden": False, "text": previous}

        def _refreshed() -> bool:
            if not self.handle.is_visible(self.tooltip):
                observed["hidden"] = True
                return False
            observed["text"] = self._tooltip_text()
            return observed["hidden"] is True or observed["text"] != previous

        if not wait_until(
            self.handle,
            _refreshed,
            timeout_sec=self.settings.ui_timeout_sec,
            interval_sec=self.settings.poll_interval_sec,
        ):
            raise ControllerError(
                "Tooltip still shows the previous point",
                target=self.tooltip.name,
                last_observed=observed["text"],
            )
        return str(observed["text"])

    @property
    def assert_that(self) -> MapPageAssertions:
        """Interface to invoking assertions on the page."""
        return MapPageAssertions(self)


class MapPageAssertions:
    def __init__(self, map_page: MapPage) -> None:
        self.map_page = map_page

    def _expect(self, element: ElementDescriptor):
        return expect(self.map_page.locator(element))

    @property
    def _timeout(self) -> float:
        return self.map_page.expect_timeout_ms

    def map_is_visible(self) -> None:
        """Asserts that the map is visible."""
        self._expect(self.map_page.map_area).to_be_visible(timeout=self._timeout)

    def hdot_assets_by_type_widget_is_visible(self) -> None:
        """Asserts that the HDOT Assets By Type widget in the sidebar is visible."""
        widget = self.map_page.sidebar.hdot_assets_by_type_widget
        for element in [widget.title, *widget.types.values()]:
            self._expect(element).to_be_visible(timeout=self._timeout)

    def title_section_is_correct(self, title: str) -> None:
        """Asserts that the title of the section in the sidebar is the expected one."""
        self._expect(self.map_page.sidebar.title).to_have_text(title, timeout=self._timeout)

    def paragraph_text_contains(self, *, paragraph_index: int, text: str) -> None:
        """Asserts that a sidebar paragraph (1-based index) contains ``text``."""
        paragraph = self.map_page.sidebar.text_paragraphs.at(paragraph_index - 1)
        self._expect(paragraph).to_contain_text(text, timeout=self._timeout)

    def dataset_btns_are_visible(self, **visible: bool) -> None:
        """Asserts the visibility of each dataset category button.

        Example:
            ``dataset_btns_are_visible(assets=False, hazards=True, indices=True, others=True)``
        """
        unknown = set(visible) - set(DATASET_CATEGORIES)
        if unknown:
            raise ValueError(f"Unknown dataset categories: {sorted(unknown)}")
        categories = self.map_page.sidebar.categories_vertical_bar.categories
        for key, is_visible in visible.items():
            assertion = self._expect(categories[key].element)
            if is_visible:
                assertion.to_be_visible(timeout=self._timeout)
            else:
                assertion.to_be_hidden(timeout=self._timeout)

    def facilities_and_structures_widget_is_visible_with_values(self) -> None:
        """Asserts that every facility type is shown with a numeric count."""
        widget = self.map_page.sidebar.facilities_and_structures_widget
        for element in (widget.pre_school_type, widget.fire_station_type, widget.police_station_type):
            self._expect(element).to_be_visible(timeout=self._timeout)
            self._expect(element).to_contain_text(re.compile(r"\d"), timeout=self._timeout)
