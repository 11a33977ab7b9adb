"""Fan-out dispatcher for scan reports."""

from __future__ import annotations

import logging

from spellscan.reporting.base import Reporter
from spellscan.scanning.schemas import ScanResult

logger = logging.getLogger(__name__)


class ReportDispatcher:
    """Fan-out dispatcher -- delivers results to all registered reporters.

    Best-effort delivery: reporter errors are logged, never raised.
    """

    def __init__(self, *reporters: Reporter) -> None:
        self._reporters: list[Reporter] = []
        for reporter in reporters:
            self.register(reporter)

    @property
    def name(self) -> str:
        return "dispatcher"

    def register(self, reporter: Reporter) -> None:
        """Register a reporter. Duplicates (by name) are ignored."""
        if not any(r.name == reporter.name for r in self._reporters):
            self._reporters.append(reporter)

    def report(self, result: ScanResult) -> None:
        for reporter in self._reporters:
            try:
                reporter.report(result)
            except Exception:
                logger.warning(
                    "event=reporter_error reporter=%s",
                    reporter.name,
                    exc_info=True,
                )

    def advise(self, message: str) -> None:
        for reporter in self._reporters:
            try:
                reporter.advise(message)
            except Exception:
                logger.warning(
                    "event=reporter_error reporter=%s",
                    reporter.name,
                    exc_info=True,
                )

    @property
    def reporter_count(self) -> int:
        return len(self._reporters)
