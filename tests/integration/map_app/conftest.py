"""Map application fixtures."""

import pytest

from map_ui_sync import AppUI
from map_ui_sync.types import SyncSettings


@pytest.fixture(scope="session")
def app_url(request):
    """Base URL of the map application from CLI arg."""
    url = request.config.getoption("--app_url")
    if url is None:
        pytest.skip("--app_url is required")
    return url


@pytest.fixture
def app_ui(handle, app_url):
    """AppUI on the Home page of the running application."""
    app_ui = AppUI(handle, SyncSettings(base_url=app_url))
    app_ui.open()
    yield app_ui
    app_ui.close()
