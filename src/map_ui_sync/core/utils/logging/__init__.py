"""Package logger for map_ui_sync.

Controllers log the actions they take at info level and the actions they skip
(already open, already selected) at debug level.
"""

import logging
import sys

logger = logging.getLogger("Map-UI-Sync")

LOG_FORMAT = "[Map UI Sync] [%(levelname)s] %(message)s"


def setup_map_ui_sync_logging(level: int = logging.INFO) -> None:
    """Send package logs to stdout, where pytest captures them per test.

    Calling it again replaces the handler rather than adding a second one.

    Args:
        level: Logging level (default: INFO)
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.handlers = [handler]
    logger.setLevel(level)
    logger.propagate = False


__all__ = [
    "LOG_FORMAT",
    "logger",
    "setup_map_ui_sync_logging",
]
