"""Plain-text reporter — the mistakes panel as terminal output."""

from __future__ import annotations

import sys
from typing import TextIO

from spellscan.constants import REPORT_TITLE
from spellscan.scanning.schemas import ScanResult


def render_text(result: ScanResult) -> str:
    """Render a result as a header, the scanned count, then ``word (count)`` lines."""
    lines = [
        REPORT_TITLE,
        f"Words Scanned: {result.total_tokens_scanned}",
    ]
    lines.extend(
        f"{word} ({count})" for word, count in result.mistakes.items()
    )
    return "\n".join(lines) + "\n"


class ConsoleReporter:
    """Writes each scan snapshot to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def name(self) -> str:
        return "console"

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def report(self, result: ScanResult) -> None:
        self.stream.write(render_text(result))
        self.stream.flush()

    def advise(self, message: str) -> None:
        self.stream.write(f"! {message}\n")
        self.stream.flush()
