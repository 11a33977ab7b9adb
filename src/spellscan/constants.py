"""Shared constants — single source of truth for cross-module values.

StrEnum members are str-compatible, so log lines and JSON payloads
work unchanged.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class TriggerState(StrEnum):
    """Scan trigger lifecycle state."""

    IDLE = "idle"
    PENDING_SCAN = "pending_scan"
    SCANNING = "scanning"


class ScanCause(StrEnum):
    """Why a scan ran."""

    INITIAL = "initial"
    INTERACTION = "interaction"
    MANUAL = "manual"


class InteractionKind(StrEnum):
    """Discrete events fed to the pipeline by an interaction source."""

    INTERACTED = "interacted"
    RESCAN_REQUESTED = "rescan_requested"


class OutputFormat(StrEnum):
    """Supported report formats for the CLI."""

    TEXT = "text"
    JSON = "json"


# ── Dictionary ───────────────────────────────────────────

DEFAULT_DICTIONARY_URL = (
    "https://raw.githubusercontent.com/dwyl/english-words/"
    "master/words_alpha.txt"
)

# Below this many words the Reporter is told the load probably failed
NEAR_EMPTY_DICTIONARY_THRESHOLD = 1000

# ── Tokenization ─────────────────────────────────────────

PART_SEPARATOR = "_"

# ── Timing ───────────────────────────────────────────────

DEBOUNCE_SECONDS = 1.0
FETCH_TIMEOUT_SECONDS = 30
WATCH_POLL_SECONDS = 0.5

# ── Retry ────────────────────────────────────────────────

RETRY_MAX_ATTEMPTS = 3
RETRY_INITIAL_WAIT = 0.5
RETRY_MAX_WAIT = 4.0

# ── Reporting ────────────────────────────────────────────

REPORT_TITLE = "Spelling Mistakes"
ERROR_TRUNCATION_CHARS = 500
