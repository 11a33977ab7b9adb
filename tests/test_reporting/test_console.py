"""Tests for text and JSON reporters."""

from __future__ import annotations

import io
import json

from spellscan.reporting.console import ConsoleReporter, render_text
from spellscan.reporting.json_report import JsonReporter
from spellscan.scanning.schemas import ScanResult

RESULT = ScanResult(total_tokens_scanned=5, mistakes={"helo": 2, "wrld": 1})


def test_render_text_layout() -> None:
    assert render_text(RESULT) == (
        "Spelling Mistakes\n"
        "Words Scanned: 5\n"
        "helo (2)\n"
        "wrld (1)\n"
    )


def test_render_text_without_mistakes() -> None:
    text = render_text(ScanResult(total_tokens_scanned=3))
    assert text == "Spelling Mistakes\nWords Scanned: 3\n"


def test_console_reporter_writes_stream() -> None:
    stream = io.StringIO()
    reporter = ConsoleReporter(stream)
    reporter.report(RESULT)
    reporter.advise("Dictionary unavailable")
    out = stream.getvalue()
    assert "Words Scanned: 5" in out
    assert out.endswith("! Dictionary unavailable\n")
    assert reporter.name == "console"


def test_json_reporter_lines() -> None:
    stream = io.StringIO()
    reporter = JsonReporter(stream)
    reporter.report(RESULT)
    reporter.advise("heads up")

    lines = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert lines[0]["type"] == "scan"
    assert lines[0]["total_tokens_scanned"] == 5
    assert lines[0]["mistakes"] == {"helo": 2, "wrld": 1}
    assert lines[1] == {
        "type": "advisory",
        "timestamp": lines[1]["timestamp"],
        "message": "heads up",
    }
