"""Page objects of the map application, built on the synchronization controllers."""

from .app import AppUI
from .categories import DATASET_CATEGORIES, CategoriesVerticalBar
from .config_popups import HDOTAssetsConfig, MoreLayersConfig
from .home import HomePage, HomePageNavBar
from .map_page import DATASET_RESPONSE_KEYS, MapPage
from .side_widgets import FacilitiesAndStructuresWidget, HDOTAssetsByTypeWidget
from .sidebar import MapPageSideBar

__all__ = [
    "DATASET_CATEGORIES",
    "DATASET_RESPONSE_KEYS",
    "AppUI",
    "CategoriesVerticalBar",
    "FacilitiesAndStructuresWidget",
    "HDOTAssetsByTypeWidget",
    "HDOTAssetsConfig",
    "HomePage",
    "HomePageNavBar",
    "MapPage",
    "MapPageSideBar",
    "MoreLayersConfig",
]
