"""CLI entry point — ``spellscan scan``."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import AsyncIterator
from pathlib import Path
from typing import TextIO

from spellscan import __version__
from spellscan.config import Settings
from spellscan.constants import InteractionKind, OutputFormat
from spellscan.dictionary.loader import loader_for
from spellscan.dictionary.state import DictionaryState
from spellscan.documents import FileDocumentSource
from spellscan.logger import ScanLogger
from spellscan.logging_config import setup_logging
from spellscan.reporting import (
    ConsoleProgress,
    ConsoleReporter,
    JsonReporter,
    LoggingProgress,
    ReportDispatcher,
)
from spellscan.services.spellcheck_service import SpellCheckPipeline


def main() -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args()

    if args.version:
        print(f"spellscan {__version__}")
        return

    if args.command == "scan":
        _run_scan(args)
    else:
        parser.print_help()


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="spellscan",
        description=(
            "Report words in a document that are missing "
            "from a reference word list."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    scan = sub.add_parser(
        "scan",
        help="Scan a text or HTML document",
    )
    scan.add_argument(
        "path",
        type=str,
        help="Path to the document",
    )
    scan.add_argument(
        "--dictionary",
        "-d",
        default=None,
        help=(
            "Word list URL or file, one word per line "
            "(default: from settings)"
        ),
    )
    scan.add_argument(
        "--format",
        "-f",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Report format (default: text)",
    )
    scan.add_argument(
        "--output",
        "-o",
        default=None,
        help="Also append JSON-lines reports to this file",
    )
    scan.add_argument(
        "--watch",
        "-w",
        action="store_true",
        help="Rescan when the document changes (Ctrl-C to stop)",
    )
    scan.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )

    return parser


def _run_scan(args: argparse.Namespace) -> None:
    """Execute the scan command."""
    path = Path(args.path).resolve()
    if not path.exists():
        print(f"Error: {path} does not exist", file=sys.stderr)
        sys.exit(1)

    settings = Settings()
    setup_logging("DEBUG" if args.verbose else settings.log_level)

    output: TextIO | None = None
    if args.output:
        output = Path(args.output).open("a", encoding="utf-8")
    try:
        state = asyncio.run(_scan_document(args, path, settings, output))
    except KeyboardInterrupt:
        print("\nStopped.", file=sys.stderr)
        return
    finally:
        if output is not None:
            output.close()

    if args.verbose:
        print(f"Dictionary: {type(state).__name__}", file=sys.stderr)


def _build_reporter(
    fmt: str, output: TextIO | None
) -> ReportDispatcher:
    dispatcher = ReportDispatcher()
    if fmt == OutputFormat.JSON:
        dispatcher.register(JsonReporter())
    else:
        dispatcher.register(ConsoleReporter())
    if output is not None:
        dispatcher.register(_FileJsonReporter(output))
    return dispatcher


class _FileJsonReporter(JsonReporter):
    """JSON reporter registered under its own name for --output."""

    @property
    def name(self) -> str:
        return "json_file"


async def _scan_document(
    args: argparse.Namespace,
    path: Path,
    settings: Settings,
    output: TextIO | None,
) -> DictionaryState:
    document = FileDocumentSource(path)
    scan_logger = (
        ScanLogger(settings.log_dir, settings.log_level)
        if settings.debug_mode
        else None
    )
    pipeline = SpellCheckPipeline(
        loader_for(args.dictionary, settings),
        document,
        _build_reporter(args.format, output),
        progress=ConsoleProgress() if args.verbose else LoggingProgress(),
        settings=settings,
        scan_logger=scan_logger,
    )
    async with pipeline:
        if args.watch:
            await pipeline.consume(
                _watch_events(document, settings.watch_poll_seconds)
            )
    return pipeline.state


async def _watch_events(
    document: FileDocumentSource, poll_seconds: float
) -> AsyncIterator[InteractionKind]:
    """Yield an interaction each time the document's mtime changes."""
    last = document.mtime_ns()
    while True:
        await asyncio.sleep(poll_seconds)
        try:
            current = document.mtime_ns()
        except FileNotFoundError:
            continue
        if current != last:
            last = current
            yield InteractionKind.INTERACTED


if __name__ == "__main__":
    main()
