"""Per-category widgets shown in the Map page sidebar."""

from __future__ import annotations

from typing import TYPE_CHECKING

from map_ui_sync.controllers import WidgetLoadError, wait_until
from map_ui_sync.core.utils import logger
from map_ui_sync.core.utils.displayed_values import DisplayedValueError, read_displayed_int
from map_ui_sync.types import ElementDescriptor, SelectionWidget

from .base import PageComponent

if TYPE_CHECKING:
    from map_ui_sync.session import InterfaceSession

_TYPE_ROW = "div.MuiGrid-item > div.MuiGrid-spacing-xs-1"


class HDOTAssetsByTypeWidget(PageComponent):
    """Asset counts per type, shown when the HDOT Projects category is selected."""

    def __init__(self, session: InterfaceSession) -> None:
        super().__init__(session)
        rows = f"[aria-label='HDOT Assets by Type'] {_TYPE_ROW}"
        self.title = ElementDescriptor(name="HDOT Assets by Type title", selector="h6[title='HDOT Assets by Type']")
        self.types: dict[str, ElementDescriptor] = {
            "bridge": ElementDescriptor(name="Bridge type", selector=f"{rows}:first-child"),
            "roadway": ElementDescriptor(name="Roadway type", selector=f"{rows}:nth-child(2)"),
            "culvert": ElementDescriptor(name="Culvert type", selector=f"{rows}:nth-child(3)"),
            "tunnel": ElementDescriptor(name="Tunnel type", selector=f"{rows}:last-child"),
        }
        self.loader = ElementDescriptor(name="Loading placeholder", selector=".MuiSkeleton-wave")

    def type_count(self, asset_type: str) -> int:
        """Displayed number of assets of ``asset_type``."""
        row = self.types[asset_type]
        return read_displayed_int(self.handle, row.child("span", name=f"{row.name} count"))

    def _try_counts(self) -> dict[str, int] | None:
        try:
            return {asset_type: self.type_count(asset_type) for asset_type in self.types}
        except DisplayedValueError:
            return None

    def wait_until_types_have_loaded(self, timeout_sec: float = 30.0) -> dict[str, int]:
        """Wait for the loading placeholders to go away and every type to have assets.

        The placeholders may not be rendered yet when this is called, so their
        absence alone does not mean loading is over: the wait also requires
        every count label to hold a number.

        Returns:
            Asset count per type.

        Raises:
            WidgetLoadError: If placeholders remain after ``timeout_sec`` or a
                type reports one asset or fewer.
            DisplayedValueError: If a count label is still not numeric after
                ``timeout_sec``.
        """
        observed: dict[str, int] = {}

        def _loaded() -> bool:
            if self.handle.count(self.loader) > 0:
                return False
            counts = self._try_counts()
            if counts is None:
                return False
            observed.update(counts)
            return True

        loaded = wait_until(
            self.handle,
            _loaded,
            timeout_sec=timeout_sec,
            interval_sec=self.settings.poll_interval_sec,
        )
        if not loaded:
            placeholders = self.handle.count(self.loader)
            if placeholders > 0:
                raise WidgetLoadError(
                    "Loading placeholders still displayed",
                    target="HDOT Assets by Type",
                    last_observed=f"{placeholders} placeholder(s)",
                )
            # Surfaces the DisplayedValueError of the first unreadable label
            observed.update({asset_type: self.type_count(asset_type) for asset_type in self.types})

        counts = observed
        for asset_type, count in counts.items():
            if count <= 1:
                raise WidgetLoadError(
                    f"Expected more than one {asset_type} asset",
                    target="HDOT Assets by Type",
                    last_observed=counts,
                )
        logger.info(f"HDOT asset types loaded: {counts}")
        return counts


class FacilitiesAndStructuresWidget(PageComponent):
    """Facility types, shown on the Insights tab of the Thematic Indices category."""

    def __init__(self, session: InterfaceSession) -> None:
        super().__init__(session)
        parent = ElementDescriptor(
            name="Facilities and Structures", selector="section[aria-label='Facilities and Structures']"
        )
        self.selected_msg = parent.child("span.MuiTypography-caption", name="Facilities selected caption")
        self.pre_school_type = parent.child(f"{_TYPE_ROW}:first-child", name="Pre-school type")
        self.fire_station_type = parent.child(f"{_TYPE_ROW}:nth-child(2)", name="Fire station type")
        self.police_station_type = parent.child(f"{_TYPE_ROW}:last-child", name="Police station type")
        self.selection = SelectionWidget(
            name="Facilities and Structures",
            count_label=self.selected_msg,
            items={
                "pre_school": self.pre_school_type,
                "fire_station": self.fire_station_type,
                "police_station": self.police_station_type,
            },
        )

    def select_type(self, facility_type: str) -> int:
        """Add ``facility_type`` to the selection and return the new count."""
        return self.session.selections.select_item(self.selection, facility_type)

    def select_pre_school_type(self) -> int:
        """Selects the Pre-school type in the widget."""
        return self.select_type("pre_school")
