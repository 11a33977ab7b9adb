"""JSON-lines reporter for machine consumers."""

from __future__ import annotations

import json
import sys
from datetime import UTC, datetime
from typing import TextIO

from spellscan.scanning.schemas import ScanResult


class JsonReporter:
    """One JSON object per line: scan snapshots and advisories."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def name(self) -> str:
        return "json"

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def report(self, result: ScanResult) -> None:
        self._write({
            "type": "scan",
            "timestamp": datetime.now(UTC).isoformat(),
            **result.model_dump(),
        })

    def advise(self, message: str) -> None:
        self._write({
            "type": "advisory",
            "timestamp": datetime.now(UTC).isoformat(),
            "message": message,
        })

    def _write(self, payload: dict[str, object]) -> None:
        self.stream.write(json.dumps(payload) + "\n")
        self.stream.flush()
