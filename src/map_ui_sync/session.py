"""One automated scenario: a handle plus the controllers bound to it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from map_ui_sync.controllers import DisclosureController, QuiescenceDetector, SelectionController, ToggleController
from map_ui_sync.core.utils import logger
from map_ui_sync.types import SyncSettings, get_settings

if TYPE_CHECKING:
    from map_ui_sync.interface.protocol import InterfaceHandle


@dataclass
class InterfaceSession:
    """Controllers sharing one InterfaceHandle for the lifetime of a scenario.

    Use ``InterfaceSession.create`` rather than the constructor: it resets the
    handle's open-disclosure slot and builds every controller against the same
    settings.
    """

    handle: InterfaceHandle
    settings: SyncSettings
    quiescence: QuiescenceDetector
    disclosures: DisclosureController
    toggles: ToggleController
    selections: SelectionController

    @classmethod
    def create(cls, handle: InterfaceHandle, settings: SyncSettings | None = None) -> InterfaceSession:
        """Start a session on ``handle``."""
        cfg = settings or get_settings()
        handle.open_disclosure = None
        disclosures = DisclosureController(handle, cfg)
        logger.debug("Interface session started")
        return cls(
            handle=handle,
            settings=cfg,
            quiescence=QuiescenceDetector(handle, cfg),
            disclosures=disclosures,
            toggles=ToggleController(handle, disclosures, cfg),
            selections=SelectionController(handle, disclosures, cfg),
        )

    def close(self) -> None:
        """End the session. The handle must not be reused by another scenario."""
        self.handle.open_disclosure = None
        logger.debug("Interface session closed")


__all__ = ["InterfaceSession"]
