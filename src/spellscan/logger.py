"""Structured JSON logger for scan and error tracking."""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from spellscan.constants import ERROR_TRUNCATION_CHARS
from spellscan.logging_config import LOG_DATEFMT, LOG_FORMAT

__all__ = ["ScanLogger", "LOG_FORMAT", "LOG_DATEFMT"]


class ScanLogger:
    """Structured JSON-lines logger with scan_id correlation."""

    def __init__(self, log_dir: Path, level: str = "INFO") -> None:
        self._log_dir = log_dir
        self._log_dir.mkdir(parents=True, exist_ok=True)
        self._logger = logging.getLogger("spellscan.scans")
        self._logger.setLevel(getattr(logging, level.upper()))
        self._logger.propagate = False

        if not self._logger.handlers:
            handler = logging.FileHandler(log_dir / "scans.log")
            handler.setFormatter(logging.Formatter("%(message)s"))
            self._logger.addHandler(handler)

    def log_scan(
        self,
        scan_id: str,
        cause: str,
        tokens_scanned: int,
        distinct_mistakes: int,
        total_mistakes: int,
        duration_ms: float,
    ) -> None:
        self._logger.info(
            json.dumps({
                "type": "scan",
                "timestamp": datetime.now(UTC).isoformat(),
                "scan_id": scan_id,
                "cause": cause,
                "tokens_scanned": tokens_scanned,
                "distinct_mistakes": distinct_mistakes,
                "total_mistakes": total_mistakes,
                "duration_ms": duration_ms,
            })
        )

    def log_error(
        self,
        component: str,
        error: str,
    ) -> None:
        self._logger.error(
            json.dumps({
                "type": "error",
                "timestamp": datetime.now(UTC).isoformat(),
                "component": component,
                "error": error[:ERROR_TRUNCATION_CHARS],
            })
        )

    def close(self) -> None:
        """Detach and close file handlers (tests reuse the logger name)."""
        for handler in list(self._logger.handlers):
            handler.close()
            self._logger.removeHandler(handler)
