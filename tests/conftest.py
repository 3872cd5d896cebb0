"""Pytest configuration for all tests."""

import pytest

from map_ui_sync.session import InterfaceSession
from map_ui_sync.types import SyncSettings
from tests.helpers.fake_interface import FakeInterface


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests that drive a real browser (map_app/ also needs the running application)")


def pytest_addoption(parser):
    """Add custom CLI options.

    Integration options are defined here because pytest parses arguments
    before discovering subdirectory conftest files.
    """
    parser.addoption(
        "--app_url",
        action="store",
        default=None,
        help="Base URL of the map application (e.g., http://localhost:3000)",
    )
    parser.addoption(
        "--playwright-timeout-sec",
        action="store",
        type=int,
        default=30,
        help="Playwright timeout in seconds (default: 30)",
    )


@pytest.fixture
def settings() -> SyncSettings:
    """Short, deterministic timeouts for tests driven by the fake interface."""
    return SyncSettings(
        base_url="http://localhost:3000",
        load_timeout_sec=30,
        per_request_timeout_sec=10,
        settle_delay_sec=0.5,
        ui_timeout_sec=2,
        popup_ready_timeout_sec=10,
        poll_interval_sec=0.1,
        map_tiles_pattern="**/tiles/**",
        datasets_route="**/api/datasets**",
    )


@pytest.fixture
def fake() -> FakeInterface:
    """Fresh fake interface at virtual time 0."""
    return FakeInterface()


@pytest.fixture
def session(fake: FakeInterface, settings: SyncSettings) -> InterfaceSession:
    """Interface session over the fake interface."""
    return InterfaceSession.create(fake, settings)
