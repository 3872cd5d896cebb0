"""Unit tests for typed parsing of displayed numbers."""

import pytest

from map_ui_sync.core.utils.displayed_values import DisplayedValueError, parse_displayed_int, read_displayed_int
from map_ui_sync.types import ElementDescriptor


@pytest.mark.parametrize(
    "text, pattern, expected",
    [
        ("5", None, 5),
        (" 12 ", None, 12),
        ("1,234", None, 1234),
        ("Zoom 6", None, 6),
        ("-1", None, -1),
        ("0 selected", r"(\d+) selected", 0),
        ("Showing 3 of 10 | 4 selected", r"(\d+) selected", 4),
    ],
)
def test_parse_displayed_int(text, pattern, expected):
    assert parse_displayed_int(text, pattern) == expected


@pytest.mark.parametrize("text", [None, "", "   ", "N/A", "--"])
def test_non_numeric_text_fails(text):
    with pytest.raises(DisplayedValueError) as exc_info:
        parse_displayed_int(text)

    assert exc_info.value.text == text


def test_pattern_without_match_fails():
    with pytest.raises(DisplayedValueError, match="Expected a number in label"):
        parse_displayed_int("none selected", r"(\d+) selected")


def test_displayed_value_error_is_value_error():
    with pytest.raises(ValueError):
        parse_displayed_int("abc")


def test_read_displayed_int_names_the_element(fake):
    label = ElementDescriptor(name="Zoom level label", selector="[aria-label='Zoom level']")
    fake.add(label, text="loading")

    with pytest.raises(DisplayedValueError, match="Zoom level label"):
        read_displayed_int(fake, label)

    fake.element(label).text = "7"
    assert read_displayed_int(fake, label) == 7
