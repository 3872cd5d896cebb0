"""Capability protocol required from the hosting automation runtime.

Controllers depend only on this protocol, so they can be driven by Playwright
in end-to-end runs and by a scripted fake in unit tests.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from map_ui_sync.core.utils.url_utils import UrlPattern
from map_ui_sync.types import ElementDescriptor, RequestEvent


@runtime_checkable
class InterfaceHandle(Protocol):
    """One automated session (one browser page) for one scenario.

    Owns all element queries, actions and the request-event stream. A handle is
    driven by a single flow and is never shared between scenarios.

    Attributes:
        open_disclosure: Name of the disclosure the controllers last opened in
            this session, or None. Reset when the session starts and whenever
            a dismissal is sent.
    """

    open_disclosure: str | None

    # --- Queries ---

    def is_visible(self, element: ElementDescriptor) -> bool:
        """Check if the element is currently visible (no waiting)."""
        ...

    def text_content(self, element: ElementDescriptor) -> str | None:
        """Get the element's text content."""
        ...

    def get_attribute(self, element: ElementDescriptor, name: str) -> str | None:
        """Get an attribute value, or None if the attribute is absent."""
        ...

    def count(self, element: ElementDescriptor) -> int:
        """Count elements currently matching the descriptor."""
        ...

    def bounding_box(self, element: ElementDescriptor) -> dict[str, float] | None:
        """Get the element's box as ``{"x", "y", "width", "height"}``, or None if not rendered."""
        ...

    @property
    def url(self) -> str:
        """Current page URL."""
        ...

    # --- Actions ---

    def goto(self, url: str) -> None:
        """Navigate to a URL."""
        ...

    def click(self, element: ElementDescriptor) -> None:
        """Click the element."""
        ...

    def hover(self, element: ElementDescriptor) -> None:
        """Hover the element."""
        ...

    def press_key(self, key: str) -> None:
        """Press a keyboard key on the page (e.g. ``"Escape"``)."""
        ...

    def move_pointer(self, x: float, y: float) -> None:
        """Move the virtual pointer to page coordinates."""
        ...

    # --- Network ---

    def next_request(self, pattern: UrlPattern, timeout_sec: float) -> RequestEvent | None:
        """Wait for the next not-yet-consumed request matching ``pattern``.

        Args:
            pattern: URL glob or compiled regex.
            timeout_sec: Maximum time to wait.

        Returns:
            The next matching event, or None if none arrived within the timeout.
        """
        ...

    def route_json(self, pattern: UrlPattern, transform: Callable[[Any], Any]) -> None:
        """Rewrite JSON response bodies of matching requests before the page sees them."""
        ...

    # --- Time ---

    def wait(self, seconds: float) -> None:
        """Pause the driving flow while the page keeps running."""
        ...

    def monotonic(self) -> float:
        """Monotonic clock in seconds, consistent with request timestamps."""
        ...


__all__ = ["InterfaceHandle"]
