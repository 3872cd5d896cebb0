"""Vertical category bar of the Map page sidebar."""

from __future__ import annotations

from typing import TYPE_CHECKING

from map_ui_sync.types import ElementDescriptor, Toggle

from .base import SELECTED_TOKEN, PageComponent

if TYPE_CHECKING:
    from map_ui_sync.session import InterfaceSession

# Category key -> aria-label of its button
DATASET_CATEGORIES: dict[str, str] = {
    "assets": "HDOT Assets",
    "hazards": "Climate Hazards",
    "indices": "Thematic Indices",
    "others": "Other Layers",
}


def _category_toggle(label: str) -> Toggle:
    return Toggle(
        name=f"{label} category",
        element=ElementDescriptor(name=f"{label} category button", selector=f"a[aria-label='{label}']"),
        on_token=SELECTED_TOKEN,
        dismiss_first=True,
    )


class CategoriesVerticalBar(PageComponent):
    """One button per dataset category; the selected one drives the sidebar content."""

    def __init__(self, session: InterfaceSession) -> None:
        super().__init__(session)
        self.categories: dict[str, Toggle] = {key: _category_toggle(label) for key, label in DATASET_CATEGORIES.items()}

    @property
    def thematic_indices_btn(self) -> ElementDescriptor:
        return self.categories["indices"].element

    def open_category(self, category: str) -> None:
        """Select the category button for ``category`` (a key of ``DATASET_CATEGORIES``)."""
        self.session.toggles.ensure_selected(self.categories[category])

    def open_thematic_indices(self) -> None:
        """Opens the Thematic Indices category."""
        self.open_category("indices")
