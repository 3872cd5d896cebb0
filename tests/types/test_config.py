"""Tests for SyncSettings."""

import pytest
from pydantic import ValidationError

from map_ui_sync.types import SyncSettings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    monkeypatch.delenv("MAP_UI_SYNC_LOAD_TIMEOUT_SEC", raising=False)

    settings = SyncSettings(_env_file=None)

    assert settings.load_timeout_sec == 30
    assert settings.per_request_timeout_sec == 10
    assert 0 < settings.settle_delay_sec < 1


def test_env_override(monkeypatch):
    monkeypatch.setenv("MAP_UI_SYNC_PER_REQUEST_TIMEOUT_SEC", "4")
    monkeypatch.setenv("MAP_UI_SYNC_BASE_URL", "http://map.test:8080/")

    settings = SyncSettings(_env_file=None)

    assert settings.per_request_timeout_sec == 4
    assert settings.base_url == "http://map.test:8080"


def test_window_larger_than_budget_rejected():
    with pytest.raises(ValidationError, match="must not exceed load_timeout_sec"):
        SyncSettings(_env_file=None, load_timeout_sec=5, per_request_timeout_sec=10)


def test_non_positive_timeout_rejected():
    with pytest.raises(ValidationError):
        SyncSettings(_env_file=None, ui_timeout_sec=0)


def test_get_settings_wraps_validation_error(monkeypatch):
    monkeypatch.setenv("MAP_UI_SYNC_POLL_INTERVAL_SEC", "-1")

    with pytest.raises(RuntimeError, match="Invalid map-ui-sync settings"):
        get_settings()


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.delenv("MAP_UI_SYNC_POLL_INTERVAL_SEC", raising=False)

    assert get_settings() is get_settings()
