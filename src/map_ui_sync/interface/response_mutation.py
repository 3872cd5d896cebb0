"""JSON response mutation used to simulate partial backend data."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from map_ui_sync.core.utils import logger


def remove_top_level_key(body: Any, key: str) -> dict[str, Any]:
    """Return a copy of a JSON object without one top-level key.

    Args:
        body: Parsed JSON response body.
        key: Top-level key to drop.

    Returns:
        A shallow copy of ``body`` without ``key``.

    Raises:
        ValueError: If the body is not a JSON object.
    """
    if not isinstance(body, dict):
        raise ValueError(f"Expected a JSON object response body, got {type(body).__name__}")

    if key not in body:
        logger.warning(f"Key {key!r} not found in response body (keys: {sorted(body)}), leaving it unchanged")
        return dict(body)

    return {k: v for k, v in body.items() if k != key}


def without_key(key: str) -> Callable[[Any], dict[str, Any]]:
    """Build a transform for ``InterfaceHandle.route_json`` that drops ``key``."""

    def _transform(body: Any) -> dict[str, Any]:
        return remove_top_level_key(body, key)

    return _transform


__all__ = [
    "remove_top_level_key",
    "without_key",
]
