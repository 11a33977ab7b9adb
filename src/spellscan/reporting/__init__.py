"""Reporters and progress signals — the pipeline's output side."""

from spellscan.reporting.base import ProgressSignal, Reporter
from spellscan.reporting.console import ConsoleReporter, render_text
from spellscan.reporting.dispatcher import ReportDispatcher
from spellscan.reporting.json_report import JsonReporter
from spellscan.reporting.progress import ConsoleProgress, LoggingProgress

__all__ = [
    "ConsoleProgress",
    "ConsoleReporter",
    "JsonReporter",
    "LoggingProgress",
    "ProgressSignal",
    "ReportDispatcher",
    "Reporter",
    "render_text",
]
