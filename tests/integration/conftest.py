"""Pytest configuration for integration tests.

These tests drive a real browser through pytest-playwright. Tests under
``map_app/`` also assume the map application is already running.

Example:
    pytest tests/integration/ -m integration --app_url=http://localhost:3000
"""

import pytest

from map_ui_sync.interface import PlaywrightInterfaceHandle


@pytest.fixture(scope="session")
def pw_timeout(request):
    """Get playwright timeout in milliseconds from CLI option (specified in seconds)."""
    return request.config.getoption("--playwright-timeout-sec") * 1000


@pytest.fixture
def handle(page, pw_timeout):
    """InterfaceHandle over the pytest-playwright page of the test."""
    page.set_default_timeout(pw_timeout)
    return PlaywrightInterfaceHandle(page)
