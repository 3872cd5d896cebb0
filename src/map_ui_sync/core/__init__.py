"""Core modules for map-ui-sync."""

from .utils.logging import setup_map_ui_sync_logging

__all__ = [
    "setup_map_ui_sync_logging",
]
