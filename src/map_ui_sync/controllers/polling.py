"""Bounded polling on top of an InterfaceHandle's clock."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from map_ui_sync.interface.protocol import InterfaceHandle


def wait_until(
    handle: InterfaceHandle,
    predicate: Callable[[], bool],
    *,
    timeout_sec: float,
    interval_sec: float,
) -> bool:
    """Poll ``predicate`` until it holds or the timeout elapses.

    The predicate is always evaluated at least once, and once more at the
    deadline, so a state reached during the last interval is not missed.

    Args:
        handle: Session whose clock and wait are used.
        predicate: State check, evaluated between waits.
        timeout_sec: Maximum time to poll.
        interval_sec: Time between two evaluations.

    Returns:
        True if the predicate held, False on timeout.
    """
    deadline = handle.monotonic() + timeout_sec
    while True:
        if predicate():
            return True
        remaining = deadline - handle.monotonic()
        if remaining <= 0:
            return False
        handle.wait(min(interval_sec, remaining))
