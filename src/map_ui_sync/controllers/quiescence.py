"""Network quiescence detection.

The map streams its data over many background requests and never signals
that it is done. The only observable proxy for "loaded" is: matching requests
started, and then none arrived for a whole per-request window. That has to be
told apart from "nothing ever started" and from "requests never stopped".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from map_ui_sync.core.utils import logger
from map_ui_sync.core.utils.url_utils import UrlPattern, describe_pattern
from map_ui_sync.types import QuiescenceResult, QuiescenceVerdict, SyncSettings, get_settings

from .errors import NeverStartedError, QuiescenceTimeoutError

if TYPE_CHECKING:
    from map_ui_sync.interface.protocol import InterfaceHandle


class QuiescenceDetector:
    """Infers "loading finished" from the request stream of one session.

    Args:
        handle: Session whose request stream is observed.
        settings: Default timeouts. If None, loaded from the environment.

    Example:
        >>> detector = QuiescenceDetector(handle)
        >>> result = detector.await_quiescence("**/tiles/**")
        >>> result.verdict
        <QuiescenceVerdict.LOADED: 'loaded'>
    """

    def __init__(self, handle: InterfaceHandle, settings: SyncSettings | None = None) -> None:
        self.handle = handle
        self.settings = settings or get_settings()

    def await_quiescence(
        self,
        pattern: UrlPattern,
        *,
        load_timeout_sec: float | None = None,
        per_request_timeout_sec: float | None = None,
        settle_delay_sec: float | None = None,
    ) -> QuiescenceResult:
        """Wait for matching traffic to start and then stop.

        Args:
            pattern: URL glob or regex of the tracked requests.
            load_timeout_sec: Overall budget. Defaults to settings.
            per_request_timeout_sec: Silence that counts as quiescence.
                Defaults to settings.
            settle_delay_sec: Pause after each observed request so a short gap
                inside a burst is not taken for the end. Defaults to settings.

        Returns:
            QuiescenceResult with the verdict and the number of requests seen.
        """
        load_timeout = self.settings.load_timeout_sec if load_timeout_sec is None else load_timeout_sec
        per_request_timeout = (
            self.settings.per_request_timeout_sec if per_request_timeout_sec is None else per_request_timeout_sec
        )
        settle_delay = self.settings.settle_delay_sec if settle_delay_sec is None else settle_delay_sec
        if per_request_timeout > load_timeout:
            raise ValueError(
                f"per_request_timeout_sec ({per_request_timeout}) must not exceed load_timeout_sec ({load_timeout})"
            )
        description = describe_pattern(pattern)

        logger.info(
            f"Waiting for requests matching {description} to settle "
            f"(budget: {load_timeout}s, silence window: {per_request_timeout}s)"
        )
        start = self.handle.monotonic()
        deadline = start + load_timeout
        request_count = 0

        while True:
            remaining = deadline - self.handle.monotonic()
            if remaining <= 0:
                verdict = QuiescenceVerdict.TIMED_OUT if request_count else QuiescenceVerdict.NEVER_STARTED
                break

            window = min(per_request_timeout, remaining)
            event = self.handle.next_request(pattern, window)
            if event is None:
                if request_count == 0:
                    verdict = QuiescenceVerdict.NEVER_STARTED
                elif window < per_request_timeout:
                    # Silence was cut short by the budget, so it proves nothing
                    verdict = QuiescenceVerdict.TIMED_OUT
                else:
                    verdict = QuiescenceVerdict.LOADED
                break

            request_count += 1
            logger.debug(f"Request #{request_count} matching {description}: {event.url}")
            if settle_delay > 0:
                self.handle.wait(settle_delay)

        result = QuiescenceResult(
            pattern=description,
            verdict=verdict,
            request_count=request_count,
            elapsed_sec=max(self.handle.monotonic() - start, 0.0),
        )
        logger.info(
            f"Quiescence for {description}: {result.verdict.value} "
            f"after {result.request_count} request(s) in {result.elapsed_sec:.1f}s"
        )
        return result

    def wait_until_loaded(
        self,
        pattern: UrlPattern,
        *,
        load_timeout_sec: float | None = None,
        per_request_timeout_sec: float | None = None,
        settle_delay_sec: float | None = None,
    ) -> QuiescenceResult:
        """Like ``await_quiescence`` but raises unless the verdict is LOADED.

        Raises:
            NeverStartedError: If no matching request was observed.
            QuiescenceTimeoutError: If requests kept arriving past the budget.
        """
        result = self.await_quiescence(
            pattern,
            load_timeout_sec=load_timeout_sec,
            per_request_timeout_sec=per_request_timeout_sec,
            settle_delay_sec=settle_delay_sec,
        )
        if result.verdict == QuiescenceVerdict.NEVER_STARTED:
            raise NeverStartedError(f"No request matching {result.pattern} was ever made", result=result)
        if result.verdict == QuiescenceVerdict.TIMED_OUT:
            raise QuiescenceTimeoutError(
                f"Requests matching {result.pattern} did not settle within {result.elapsed_sec:.1f}s "
                f"({result.request_count} request(s) observed)",
                result=result,
            )
        return result


__all__ = ["QuiescenceDetector"]
