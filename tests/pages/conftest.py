"""Page object fixtures over the fake interface."""

import pytest

from map_ui_sync.pages import HomePage, MapPage


@pytest.fixture
def map_page(session) -> MapPage:
    return MapPage(session)


@pytest.fixture
def home_page(session) -> HomePage:
    return HomePage(session)
