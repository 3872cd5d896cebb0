"""Playwright implementation of the InterfaceHandle protocol."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from map_ui_sync.core.utils import logger
from map_ui_sync.core.utils.url_utils import UrlPattern, describe_pattern, url_matches
from map_ui_sync.types import ElementDescriptor, RequestEvent

if TYPE_CHECKING:
    from playwright.sync_api import Locator, Page, Request, Route


class PlaywrightInterfaceHandle:
    """InterfaceHandle over a ``playwright.sync_api.Page``.

    Every request the page dispatches is recorded from the moment the handle
    is created. ``next_request`` consumes that append-only record through one
    cursor per pattern, so requests fired between two waits are never lost.

    Args:
        page: Page owned by the current scenario.
        action_timeout_sec: Timeout for element reads and actions.
        pump_interval_sec: Slice used to let Playwright dispatch events while
            waiting for a request.

    Example:
        >>> handle = PlaywrightInterfaceHandle(page)
        >>> handle.goto("http://localhost:3000")
        >>> event = handle.next_request("**/tiles/**", timeout_sec=10)
    """

    def __init__(
        self,
        page: Page,
        *,
        action_timeout_sec: float = 5.0,
        pump_interval_sec: float = 0.05,
    ) -> None:
        self.page = page
        self.open_disclosure: str | None = None
        self._action_timeout_ms = action_timeout_sec * 1000
        self._pump_interval_sec = pump_interval_sec
        self._requests: list[RequestEvent] = []
        self._cursors: dict[str, int] = {}
        page.on("request", self._on_request)

    def _on_request(self, request: Request) -> None:
        self._requests.append(RequestEvent(url=request.url, timestamp=time.monotonic()))

    @property
    def requests(self) -> tuple[RequestEvent, ...]:
        """All requests recorded so far, oldest first."""
        return tuple(self._requests)

    def locator(self, element: ElementDescriptor) -> Locator:
        """Resolve a descriptor to a Playwright locator."""
        if element.has_text is not None:
            loc = self.page.locator(element.selector, has_text=element.has_text)
        else:
            loc = self.page.locator(element.selector)
        if element.nth is not None:
            loc = loc.nth(element.nth)
        return loc

    # --- Queries ---

    def is_visible(self, element: ElementDescriptor) -> bool:
        return self.locator(element).is_visible()

    def text_content(self, element: ElementDescriptor) -> str | None:
        return self.locator(element).text_content(timeout=self._action_timeout_ms)

    def get_attribute(self, element: ElementDescriptor, name: str) -> str | None:
        return self.locator(element).get_attribute(name, timeout=self._action_timeout_ms)

    def count(self, element: ElementDescriptor) -> int:
        return self.locator(element).count()

    def bounding_box(self, element: ElementDescriptor) -> dict[str, float] | None:
        box = self.locator(element).bounding_box(timeout=self._action_timeout_ms)
        return dict(box) if box is not None else None

    @property
    def url(self) -> str:
        return self.page.url

    # --- Actions ---

    def goto(self, url: str) -> None:
        logger.debug(f"Navigating to {url}")
        self.page.goto(url)

    def click(self, element: ElementDescriptor) -> None:
        self.locator(element).click(timeout=self._action_timeout_ms)

    def hover(self, element: ElementDescriptor) -> None:
        self.locator(element).hover(timeout=self._action_timeout_ms)

    def press_key(self, key: str) -> None:
        self.page.keyboard.press(key)

    def move_pointer(self, x: float, y: float) -> None:
        self.page.mouse.move(x, y)

    # --- Network ---

    def _take_next(self, pattern: UrlPattern, key: str) -> RequestEvent | None:
        start = self._cursors.get(key, 0)
        for idx in range(start, len(self._requests)):
            event = self._requests[idx]
            if url_matches(event.url, pattern):
                self._cursors[key] = idx + 1
                return event
        self._cursors[key] = len(self._requests)
        return None

    def next_request(self, pattern: UrlPattern, timeout_sec: float) -> RequestEvent | None:
        key = describe_pattern(pattern)
        deadline = time.monotonic() + timeout_sec
        while True:
            event = self._take_next(pattern, key)
            if event is not None:
                return event
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return None
            # Sync Playwright only dispatches page events while it is waiting
            self.page.wait_for_timeout(min(self._pump_interval_sec, remaining) * 1000)

    def route_json(self, pattern: UrlPattern, transform: Callable[[Any], Any]) -> None:
        def _handler(route: Route) -> None:
            response = route.fetch()
            body = transform(response.json())
            logger.info(f"Fulfilling {route.request.url} with a rewritten JSON body")
            route.fulfill(response=response, json=body)

        logger.info(f"Routing responses matching {describe_pattern(pattern)} through a JSON transform")
        self.page.route(pattern, _handler)

    # --- Time ---

    def wait(self, seconds: float) -> None:
        self.page.wait_for_timeout(seconds * 1000)

    def monotonic(self) -> float:
        return time.monotonic()


__all__ = ["PlaywrightInterfaceHandle"]
