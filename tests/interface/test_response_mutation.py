"""Tests for JSON response mutation."""

import pytest

from map_ui_sync.interface import remove_top_level_key, without_key


def test_remove_top_level_key_keeps_other_keys():
    body = {"assets": [1, 2], "hazards": [3], "index": {"a": 1}, "others": []}

    result = remove_top_level_key(body, "hazards")

    assert result == {"assets": [1, 2], "index": {"a": 1}, "others": []}
    # Original body is untouched
    assert "hazards" in body


def test_remove_missing_key_is_noop():
    body = {"assets": []}

    assert remove_top_level_key(body, "others") == {"assets": []}


def test_remove_from_non_object_rejected():
    with pytest.raises(ValueError, match="Expected a JSON object"):
        remove_top_level_key([{"assets": []}], "assets")


def test_without_key_builds_transform():
    transform = without_key("index")

    assert transform({"index": 1, "others": 2}) == {"others": 2}
