"""Multi-item selection widget controller."""

from __future__ import annotations

from typing import TYPE_CHECKING

from map_ui_sync.core.utils import logger
from map_ui_sync.core.utils.displayed_values import DisplayedValueError, read_displayed_int
from map_ui_sync.types import ElementDescriptor, SelectionWidget, SyncSettings, get_settings

from .disclosure import DisclosureController
from .errors import SelectionError
from .polling import wait_until

if TYPE_CHECKING:
    from map_ui_sync.interface.protocol import InterfaceHandle


class SelectionController:
    """Drives selection widgets and confirms them through their count caption.

    Args:
        handle: Session to drive.
        disclosures: Controller used to open a widget's owning disclosure.
        settings: Timeouts. If None, loaded from the environment.
    """

    def __init__(
        self,
        handle: InterfaceHandle,
        disclosures: DisclosureController,
        settings: SyncSettings | None = None,
    ) -> None:
        self.handle = handle
        self.disclosures = disclosures
        self.settings = settings or get_settings()

    def _open(self, widget: SelectionWidget) -> None:
        if widget.disclosure is not None:
            self.disclosures.ensure_open(widget.disclosure)

    def selected_count(self, widget: SelectionWidget) -> int:
        """Read the selection count from the widget's caption.

        Raises:
            DisplayedValueError: If the caption holds no count.
        """
        return read_displayed_int(self.handle, widget.count_label, widget.count_pattern)

    def _try_count(self, widget: SelectionWidget) -> int | None:
        try:
            return self.selected_count(widget)
        except DisplayedValueError:
            return None

    def _clear_disabled(self, widget: SelectionWidget, clear_action: ElementDescriptor) -> bool:
        value = self.handle.get_attribute(clear_action, "class") or ""
        return widget.disabled_token in value.split()

    def clear_selection(self, widget: SelectionWidget) -> int:
        """Unselect every item of ``widget``.

        The clear action is clicked only if it is enabled. Emptiness is then
        confirmed twice: the clear action is disabled AND the caption reports
        zero. Either alone could be a stale render.

        Returns:
            0

        Raises:
            SelectionError: If the two confirmations do not agree on an empty
                selection within the bounded wait.
            ValueError: If the widget has no clear action.
        """
        clear_action = widget.clear_action
        if clear_action is None:
            raise ValueError(f"Selection widget {widget.name!r} has no clear action")

        self._open(widget)
        if self._clear_disabled(widget, clear_action):
            logger.debug(f"Selection {widget.name!r} already empty, not clicking")
        else:
            logger.info(f"Clearing selection {widget.name!r}")
            self.handle.click(clear_action)

        observed: dict[str, object] = {}

        def _empty() -> bool:
            observed["disabled"] = self._clear_disabled(widget, clear_action)
            observed["count"] = self._try_count(widget)
            return observed["disabled"] is True and observed["count"] == 0

        if not wait_until(
            self.handle,
            _empty,
            timeout_sec=self.settings.ui_timeout_sec,
            interval_sec=self.settings.poll_interval_sec,
        ):
            raise SelectionError("Selection did not become empty", target=widget.name, last_observed=observed)
        return 0

    def select_item(self, widget: SelectionWidget, item_name: str) -> int:
        """Add one item to the selection.

        Returns:
            The new selection count (previous count plus one).

        Raises:
            SelectionError: If the caption does not report the incremented count.
            KeyError: If the widget has no item called ``item_name``.
        """
        item = widget.items[item_name]
        self._open(widget)

        before = self.selected_count(widget)
        expected = before + 1
        logger.info(f"Selecting {item_name!r} in {widget.name!r} ({before} -> {expected} selected)")
        self.handle.click(item)

        observed: list[int | None] = [before]

        def _incremented() -> bool:
            observed.append(self._try_count(widget))
            return observed[-1] == expected

        if not wait_until(
            self.handle,
            _incremented,
            timeout_sec=self.settings.ui_timeout_sec,
            interval_sec=self.settings.poll_interval_sec,
        ):
            raise SelectionError(
                f"Selection count did not reach {expected}",
                target=f"{widget.name}/{item_name}",
                last_observed=observed[-1],
            )
        return expected


__all__ = ["SelectionController"]
