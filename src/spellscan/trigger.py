"""Debounced scan trigger.

Holds at most one outstanding timer. Each interaction cancels it and
schedules a new one, so only the last event in a burst scans. Manual
requests cancel the timer and scan immediately. Scans are synchronous,
so two can never overlap.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from spellscan.constants import DEBOUNCE_SECONDS, ScanCause, TriggerState

logger = logging.getLogger(__name__)

type ScanCallback = Callable[[ScanCause], object]


class ScanTrigger:
    """Decides when the pipeline scans: on load, on demand, after interaction."""

    def __init__(
        self,
        run_scan: ScanCallback,
        delay: float = DEBOUNCE_SECONDS,
    ) -> None:
        self._run_scan = run_scan
        self._delay = delay
        self._handle: asyncio.TimerHandle | None = None
        self._state = TriggerState.IDLE
        self._scan_count = 0

    @property
    def state(self) -> TriggerState:
        return self._state

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def scan_count(self) -> int:
        """Number of scans started through this trigger."""
        return self._scan_count

    def initial(self) -> None:
        """Dictionary became ready — scan once, right away."""
        self._cancel_pending()
        self._fire(ScanCause.INITIAL)

    def interaction(self) -> None:
        """User interacted — (re)arm the debounce timer.

        Must be called from inside a running event loop.
        """
        loop = asyncio.get_running_loop()
        restarted = self._cancel_pending()
        self._handle = loop.call_later(self._delay, self._on_timer)
        self._state = TriggerState.PENDING_SCAN
        logger.debug(
            "event=scan_scheduled delay=%.3f restarted=%s",
            self._delay,
            restarted,
        )

    def request_rescan(self) -> None:
        """Explicit rescan — drop any pending timer and scan now."""
        if self._cancel_pending():
            logger.debug("event=pending_scan_cancelled reason=manual")
        self._fire(ScanCause.MANUAL)

    def cancel(self) -> None:
        """Drop a scheduled scan without running it (shutdown)."""
        self._cancel_pending()

    def _cancel_pending(self) -> bool:
        if self._handle is None:
            return False
        self._handle.cancel()
        self._handle = None
        if self._state == TriggerState.PENDING_SCAN:
            self._state = TriggerState.IDLE
        return True

    def _on_timer(self) -> None:
        self._handle = None
        try:
            self._fire(ScanCause.INTERACTION)
        except Exception:
            # Nothing awaits a timer callback; record the failure here
            logger.exception("event=debounced_scan_failed")

    def _fire(self, cause: ScanCause) -> None:
        self._state = TriggerState.SCANNING
        self._scan_count += 1
        try:
            self._run_scan(cause)
        finally:
            # The scan may have re-armed the timer (e.g. from a reporter)
            self._state = (
                TriggerState.PENDING_SCAN
                if self._handle is not None
                else TriggerState.IDLE
            )
