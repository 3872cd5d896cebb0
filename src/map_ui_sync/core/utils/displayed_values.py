"""Typed access to numbers displayed as text in the interface.

Zoom levels, asset counts and "N selected" captions are all rendered as text.
Parsing them in one place means a non-numeric label fails loudly with the raw
text attached instead of turning into a silent ``NaN`` or ``0`` at a call site.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from map_ui_sync.interface.protocol import InterfaceHandle
    from map_ui_sync.types import ElementDescriptor

_DEFAULT_NUMBER_PATTERN = re.compile(r"-?\d[\d,]*")


class DisplayedValueError(ValueError):
    """Raised when a displayed label does not contain the expected number."""

    def __init__(self, message: str, *, text: str | None) -> None:
        super().__init__(message)
        self.text = text


def parse_displayed_int(text: str | None, pattern: str | re.Pattern[str] | None = None) -> int:
    """Parse an integer out of displayed text.

    Args:
        text: Raw text content of the element (None if the element had none).
        pattern: Optional regex with one capturing group around the number,
            e.g. ``r"(\\d+) selected"``. Without it, the first integer in the
            text is used.

    Returns:
        The parsed integer. Thousand separators are accepted.

    Raises:
        DisplayedValueError: If the text is empty or holds no matching number.
    """
    if text is None or not text.strip():
        raise DisplayedValueError("Expected a number but the label is empty", text=text)

    if pattern is None:
        match = _DEFAULT_NUMBER_PATTERN.search(text)
        raw = match.group(0) if match else None
    else:
        match = re.search(pattern, text)
        raw = match.group(1) if match else None

    if raw is None:
        raise DisplayedValueError(f"Expected a number in label {text!r}", text=text)

    try:
        return int(raw.replace(",", ""))
    except ValueError as e:
        raise DisplayedValueError(f"Label {text!r} holds a non-numeric value {raw!r}", text=text) from e


def read_displayed_int(
    handle: InterfaceHandle,
    element: ElementDescriptor,
    pattern: str | re.Pattern[str] | None = None,
) -> int:
    """Read an element's text content and parse it with ``parse_displayed_int``."""
    text = handle.text_content(element)
    try:
        return parse_displayed_int(text, pattern)
    except DisplayedValueError as e:
        raise DisplayedValueError(f"{element.name}: {e}", text=text) from e
