from .displayed_values import DisplayedValueError, parse_displayed_int, read_displayed_int
from .logging import logger, setup_map_ui_sync_logging
from .url_utils import url_matches

__all__ = [
    "DisplayedValueError",
    "logger",
    "parse_displayed_int",
    "read_displayed_int",
    "setup_map_ui_sync_logging",
    "url_matches",
]
