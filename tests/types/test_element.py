"""Tests for element and widget descriptors."""

import pytest
from pydantic import ValidationError

from map_ui_sync.types import ElementDescriptor, QuiescenceResult, QuiescenceVerdict, ToggleState

POPOVER = ElementDescriptor(name="Popover", selector=".MuiPopover-paper")


def test_child_joins_selectors():
    child = POPOVER.child("button.MuiButton-disableElevation", name="Unselect All")

    assert child.selector == ".MuiPopover-paper button.MuiButton-disableElevation"
    assert child.name == "Unselect All"
    assert str(child) == "Unselect All"


def test_child_of_filtered_descriptor_rejected():
    with pytest.raises(ValueError, match="filtered descriptor"):
        POPOVER.at(0).child("p")


def test_at_picks_index():
    paragraphs = ElementDescriptor(name="Paragraphs", selector="p.MuiTypography-paragraph")

    second = paragraphs.at(1)

    assert second.nth == 1
    assert second.selector == paragraphs.selector
    assert second.name == "Paragraphs[1]"
    assert paragraphs.nth is None


def test_descriptors_are_frozen():
    with pytest.raises(ValidationError):
        POPOVER.selector = "div"


def test_empty_selector_rejected():
    with pytest.raises(ValidationError):
        ElementDescriptor(name="Nothing", selector="")


def test_quiescence_result_success_only_when_loaded():
    loaded = QuiescenceResult(pattern="**", verdict=QuiescenceVerdict.LOADED, request_count=2, elapsed_sec=1)
    never = QuiescenceResult(pattern="**", verdict=QuiescenceVerdict.NEVER_STARTED, request_count=0, elapsed_sec=1)

    assert loaded.success is True
    assert never.success is False


def test_toggle_state_from_bool():
    assert ToggleState.from_bool(True) == ToggleState.ON
    assert ToggleState.from_bool(False) == ToggleState.OFF
