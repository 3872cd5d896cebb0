"""Idempotent two-state control (switch, checkbox, tab) controller."""

from __future__ import annotations

from typing import TYPE_CHECKING

from map_ui_sync.core.utils import logger
from map_ui_sync.types import SyncSettings, Toggle, ToggleState, get_settings

from .disclosure import DisclosureController
from .errors import ToggleError
from .polling import wait_until

if TYPE_CHECKING:
    from map_ui_sync.interface.protocol import InterfaceHandle


class ToggleController:
    """Drives toggles to a target state with at most one click.

    A click on a control already in the target state would flip it back, so
    the state is always read first and the click is skipped when it matches.

    Args:
        handle: Session to drive.
        disclosures: Controller used to open a toggle's owning disclosure.
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

    def state(self, toggle: Toggle) -> ToggleState:
        """Read the toggle's state from its state attribute."""
        value = self.handle.get_attribute(toggle.element, toggle.state_attribute) or ""
        return ToggleState.from_bool(toggle.on_token in value.split())

    def set_toggle(self, toggle: Toggle, target: ToggleState) -> ToggleState:
        """Bring ``toggle`` to ``target``.

        Args:
            toggle: Toggle to drive.
            target: Requested state.

        Returns:
            The observed state, equal to ``target``.

        Raises:
            ToggleError: If the state does not match ``target`` after the click.
            DisclosureError: If the owning disclosure cannot be opened.
        """
        if toggle.disclosure is not None:
            self.disclosures.ensure_open(toggle.disclosure)
        elif toggle.dismiss_first:
            self.disclosures.dismiss()

        current = self.state(toggle)
        if current == target:
            logger.debug(f"Toggle {toggle.name!r} already {target.value}, not clicking")
            return current

        logger.info(f"Switching toggle {toggle.name!r} {current.value} -> {target.value}")
        self.handle.click(toggle.element)

        observed = [current]

        def _reached() -> bool:
            observed.append(self.state(toggle))
            return observed[-1] == target

        if not wait_until(
            self.handle,
            _reached,
            timeout_sec=self.settings.ui_timeout_sec,
            interval_sec=self.settings.poll_interval_sec,
        ):
            raise ToggleError(
                f"Toggle did not switch to {target.value}",
                target=toggle.name,
                last_observed=observed[-1],
            )
        return target

    def ensure_selected(self, toggle: Toggle) -> ToggleState:
        """Select a tab-like control (``set_toggle(toggle, ToggleState.ON)``)."""
        return self.set_toggle(toggle, ToggleState.ON)


__all__ = ["ToggleController"]
