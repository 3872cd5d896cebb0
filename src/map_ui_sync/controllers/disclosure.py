"""Idempotent disclosure (popup/menu) controller.

A disclosure's state is the visibility of its sentinel element, there is no
separate "open" flag to read. The session remembers which disclosure the
controller opened last, so asking for the same one again is free, and anything
else is dismissed before acting so the wrong panel is never driven.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from map_ui_sync.core.utils import logger
from map_ui_sync.types import Disclosure, DisclosureState, SyncSettings, get_settings

from .errors import DisclosureError
from .polling import wait_until

if TYPE_CHECKING:
    from map_ui_sync.interface.protocol import InterfaceHandle

DISMISS_KEY = "Escape"


class DisclosureController:
    """Opens and closes disclosures of one session.

    Args:
        handle: Session to drive.
        settings: Timeouts. If None, loaded from the environment.
    """

    def __init__(self, handle: InterfaceHandle, settings: SyncSettings | None = None) -> None:
        self.handle = handle
        self.settings = settings or get_settings()
        self._known: dict[str, Disclosure] = {}

    def state(self, disclosure: Disclosure) -> DisclosureState:
        """Read the disclosure's current state from its sentinel."""
        if self.handle.is_visible(disclosure.sentinel):
            return DisclosureState.OPEN
        return DisclosureState.CLOSED

    def _wait_hidden(self, disclosure: Disclosure) -> bool:
        return wait_until(
            self.handle,
            lambda: not self.handle.is_visible(disclosure.sentinel),
            timeout_sec=self.settings.ui_timeout_sec,
            interval_sec=self.settings.poll_interval_sec,
        )

    def dismiss(self) -> None:
        """Send the neutral dismissal and confirm the previously opened disclosure closed.

        Raises:
            DisclosureError: If the disclosure recorded as open stays visible.
        """
        previous = self.handle.open_disclosure
        self.handle.press_key(DISMISS_KEY)
        self.handle.open_disclosure = None

        if previous is not None and previous in self._known:
            if not self._wait_hidden(self._known[previous]):
                raise DisclosureError(
                    "Disclosure still open after dismissal",
                    target=previous,
                    last_observed=DisclosureState.OPEN,
                )

    def ensure_open(self, disclosure: Disclosure) -> DisclosureState:
        """Open ``disclosure`` unless it is already the open one.

        Steps: dismiss any open disclosure, confirm no disclosure content is
        visible, return if the sentinel is already visible, otherwise click
        the trigger once and wait for the sentinel (and for the busy indicator
        to clear, if the disclosure has one).

        Side effect: any other open disclosure is closed.

        Returns:
            DisclosureState.OPEN

        Raises:
            DisclosureError: If the disclosure does not open (or finish loading)
                within the bounded wait, or stray content cannot be dismissed.
        """
        handle = self.handle
        settings = self.settings
        self._known[disclosure.name] = disclosure

        if handle.open_disclosure == disclosure.name and handle.is_visible(disclosure.sentinel):
            logger.debug(f"Disclosure {disclosure.name!r} already open, nothing to do")
            return DisclosureState.OPEN

        self.dismiss()
        content_hidden = wait_until(
            handle,
            lambda: not handle.is_visible(disclosure.content),
            timeout_sec=settings.ui_timeout_sec,
            interval_sec=settings.poll_interval_sec,
        )
        if not content_hidden:
            raise DisclosureError(
                "Disclosure content still visible after dismissal",
                target=disclosure.name,
                last_observed=f"{disclosure.content.name} visible",
            )

        if handle.is_visible(disclosure.sentinel):
            # Not dismissible by the neutral action, so it already is the open one
            logger.debug(f"Disclosure {disclosure.name!r} found open after dismissal")
            handle.open_disclosure = disclosure.name
            return DisclosureState.OPEN

        logger.info(f"Opening disclosure {disclosure.name!r}")
        handle.click(disclosure.trigger)
        opened = wait_until(
            handle,
            lambda: handle.is_visible(disclosure.sentinel),
            timeout_sec=settings.ui_timeout_sec,
            interval_sec=settings.poll_interval_sec,
        )
        if not opened:
            raise DisclosureError(
                "Disclosure did not open",
                target=disclosure.name,
                last_observed=DisclosureState.CLOSED,
            )
        handle.open_disclosure = disclosure.name

        if disclosure.busy_indicator is not None:
            busy = disclosure.busy_indicator
            ready_timeout = disclosure.ready_timeout_sec or settings.popup_ready_timeout_sec
            ready = wait_until(
                handle,
                lambda: handle.count(busy) == 0,
                timeout_sec=ready_timeout,
                interval_sec=settings.poll_interval_sec,
            )
            if not ready:
                raise DisclosureError(
                    f"Disclosure did not finish loading within {ready_timeout}s",
                    target=disclosure.name,
                    last_observed=f"{handle.count(busy)} x {busy.name}",
                )

        return DisclosureState.OPEN

    def close(self, disclosure: Disclosure) -> DisclosureState:
        """Close ``disclosure`` if it is open.

        Returns:
            DisclosureState.CLOSED

        Raises:
            DisclosureError: If the sentinel stays visible after dismissal.
        """
        self._known[disclosure.name] = disclosure
        if self.state(disclosure) == DisclosureState.CLOSED:
            if self.handle.open_disclosure == disclosure.name:
                self.handle.open_disclosure = None
            return DisclosureState.CLOSED

        logger.info(f"Closing disclosure {disclosure.name!r}")
        self.handle.press_key(DISMISS_KEY)
        self.handle.open_disclosure = None
        if not self._wait_hidden(disclosure):
            raise DisclosureError(
                "Disclosure did not close",
                target=disclosure.name,
                last_observed=DisclosureState.OPEN,
            )
        return DisclosureState.CLOSED


__all__ = [
    "DISMISS_KEY",
    "DisclosureController",
]
