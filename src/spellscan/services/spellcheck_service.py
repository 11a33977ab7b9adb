"""Pipeline controller — owns dictionary state and drives scans.

Loader → builder → (ready) → trigger → tokenizer → classifier →
aggregator → reporter. All mutable state lives on one
``SpellCheckPipeline`` instance; the scan itself is a pure function.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from collections.abc import AsyncIterable
from types import TracebackType

from spellscan.config import Settings
from spellscan.constants import InteractionKind, ScanCause, TriggerState
from spellscan.dictionary.builder import build_dictionary
from spellscan.dictionary.loader import DictionaryLoader
from spellscan.dictionary.state import (
    DictionaryState,
    Failed,
    NotReady,
    Ready,
    is_scannable,
)
from spellscan.documents import DocumentSource
from spellscan.logger import ScanLogger
from spellscan.reporting.base import ProgressSignal, Reporter
from spellscan.resilience.errors import (
    DictionaryNotReadyError,
    DictionaryUnavailableError,
    ErrorClass,
    classify_error,
)
from spellscan.scanning.aggregator import scan_text
from spellscan.scanning.schemas import ScanResult
from spellscan.trigger import ScanTrigger

logger = logging.getLogger(__name__)


class SpellCheckPipeline:
    """Loads the dictionary once, then scans on load, interaction and demand.

    Usage::

        pipeline = SpellCheckPipeline(loader, document, reporter)
        await pipeline.initialize()   # fetch, build, first scan
        pipeline.interact()           # debounced rescan
        pipeline.request_rescan()     # immediate rescan
    """

    def __init__(
        self,
        loader: DictionaryLoader,
        document: DocumentSource,
        reporter: Reporter,
        *,
        progress: ProgressSignal | None = None,
        settings: Settings | None = None,
        scan_logger: ScanLogger | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._loader = loader
        self._document = document
        self._reporter = reporter
        self._progress = progress
        self._scan_logger = scan_logger
        self._state: DictionaryState = NotReady()
        self._init_task: asyncio.Task[DictionaryState] | None = None
        self._trigger = ScanTrigger(
            self.scan, delay=self._settings.debounce_seconds
        )

    @property
    def state(self) -> DictionaryState:
        return self._state

    @property
    def ready(self) -> bool:
        return is_scannable(self._state)

    @property
    def trigger_state(self) -> TriggerState:
        return self._trigger.state

    @property
    def scan_count(self) -> int:
        return self._trigger.scan_count

    async def initialize(self) -> DictionaryState:
        """Load the dictionary, then run the first scan.

        A failed load never raises: the pipeline moves to ``Failed``
        with an empty dictionary and the reporter is advised.
        Overlapping calls share one load and one first scan.
        """
        if self._init_task is None:
            self._init_task = asyncio.create_task(self._initialize())
        return await self._init_task

    async def _initialize(self) -> DictionaryState:
        if self._progress is not None:
            self._progress.loading_started()
        try:
            self._state = await self._load()
        finally:
            if self._progress is not None:
                self._progress.loading_finished()
        self._advise_if_degraded()
        self._trigger.initial()
        return self._state

    def scan(self, cause: ScanCause = ScanCause.MANUAL) -> ScanResult:
        """Scan the current document text and hand the result to the reporter."""
        state = self._state
        if isinstance(state, NotReady):
            raise DictionaryNotReadyError(
                "dictionary is still loading; scan refused"
            )
        scan_id = uuid.uuid4().hex[:12]
        start = time.perf_counter()
        result = scan_text(
            self._document(),
            state.dictionary,
            ascii_only=self._settings.ascii_word_chars,
        )
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "event=scan_complete scan_id=%s cause=%s tokens=%d "
            "distinct_mistakes=%d duration_ms=%.1f",
            scan_id,
            cause,
            result.total_tokens_scanned,
            result.distinct_mistakes,
            duration_ms,
        )
        if self._scan_logger is not None:
            self._scan_logger.log_scan(
                scan_id=scan_id,
                cause=cause,
                tokens_scanned=result.total_tokens_scanned,
                distinct_mistakes=result.distinct_mistakes,
                total_mistakes=result.total_mistakes,
                duration_ms=duration_ms,
            )
        self._deliver(result)
        return result

    def interact(self) -> None:
        """User interacted with the document — schedule a debounced scan."""
        if not is_scannable(self._state):
            logger.debug("event=interaction_dropped reason=not_ready")
            return
        self._trigger.interaction()

    def request_rescan(self) -> None:
        """Explicit rescan command — cancels any pending scan and runs now."""
        logger.info("event=rescan_requested")
        if not is_scannable(self._state):
            logger.warning("event=rescan_dropped reason=not_ready")
            return
        self._trigger.request_rescan()

    async def consume(
        self, events: AsyncIterable[InteractionKind]
    ) -> None:
        """Feed an interaction stream into the trigger until it ends."""
        async for event in events:
            if event == InteractionKind.RESCAN_REQUESTED:
                self.request_rescan()
            else:
                self.interact()

    def close(self) -> None:
        """Cancel any scheduled scan. Idempotent."""
        self._trigger.cancel()

    async def __aenter__(self) -> SpellCheckPipeline:
        await self.initialize()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    async def _load(self) -> Ready | Failed:
        source = self._loader.source
        try:
            raw = await self._loader.fetch_raw_dictionary_text()
        except Exception as exc:
            return self._failed(source, exc)
        dictionary = build_dictionary(raw)
        if not dictionary:
            return self._failed(
                source,
                DictionaryUnavailableError(
                    "dictionary source contained no words",
                    ErrorClass.EMPTY,
                ),
            )
        logger.info(
            "event=dictionary_ready source=%s words=%d",
            source,
            len(dictionary),
        )
        return Ready(dictionary=dictionary)

    def _failed(self, source: str, exc: Exception) -> Failed:
        error_class = classify_error(exc)
        reason = str(exc) or type(exc).__name__
        logger.warning(
            "event=dictionary_unavailable source=%s error_class=%s reason=%s",
            source,
            error_class.value,
            reason,
        )
        if self._scan_logger is not None:
            self._scan_logger.log_error("dictionary_loader", reason)
        return Failed(reason=reason, error_class=error_class)

    def _advise_if_degraded(self) -> None:
        state = self._state
        if isinstance(state, Failed):
            self._advise(
                f"Dictionary unavailable ({state.reason}); "
                "every word will be reported as a mistake."
            )
        elif (
            isinstance(state, Ready)
            and state.word_count < self._settings.near_empty_dictionary_threshold
        ):
            self._advise(
                f"Dictionary has only {state.word_count} words; "
                "it may not have loaded correctly."
            )

    def _advise(self, message: str) -> None:
        try:
            self._reporter.advise(message)
        except Exception:
            logger.warning("event=reporter_error action=advise", exc_info=True)

    def _deliver(self, result: ScanResult) -> None:
        try:
            self._reporter.report(result)
        except Exception:
            logger.warning("event=reporter_error action=report", exc_info=True)
