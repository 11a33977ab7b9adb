"""Error classification and pipeline error types.

Classifies dictionary-fetch exceptions by category to enable:
- Structured logging (which failures are transient vs permanent)
- Retry decisions in the HTTP loader (only transient/server/timeout)
"""

from __future__ import annotations

import asyncio
from enum import Enum

import httpx


class ErrorClass(Enum):
    TRANSIENT = "transient"  # 429, network errors — retryable
    SERVER = "server"  # 500, 502, 503 — retryable
    TIMEOUT = "timeout"  # deadline exceeded — retryable with backoff
    CLIENT = "client"  # 400, 401, 403, 404 — do NOT retry
    EMPTY = "empty"  # fetched but no usable words — do NOT retry
    UNKNOWN = "unknown"  # unclassified — do NOT retry


class DictionaryUnavailableError(Exception):
    """The word list could not be fetched or contained no words."""

    def __init__(
        self,
        reason: str,
        error_class: ErrorClass = ErrorClass.UNKNOWN,
    ) -> None:
        super().__init__(reason)
        self.reason = reason
        self.error_class = error_class


class DictionaryNotReadyError(RuntimeError):
    """A scan was requested before the dictionary finished loading."""


def _status_code(error: Exception) -> int | None:
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code
    status_code = getattr(error, "status_code", None)
    if isinstance(status_code, int):
        return status_code
    return None


def classify_error(error: Exception) -> ErrorClass:
    """Classify an error to determine handling strategy.

    Checks structured attributes first (status_code), then exception
    types, and falls back to string matching for untyped exceptions.
    """
    if isinstance(error, DictionaryUnavailableError):
        return error.error_class

    # 1. Structured status code (httpx.HTTPStatusError or attribute)
    status_code = _status_code(error)
    if status_code is not None:
        if status_code == 429:
            return ErrorClass.TRANSIENT
        if 400 <= status_code < 500:
            return ErrorClass.CLIENT
        if 500 <= status_code < 600:
            return ErrorClass.SERVER

    # 2. Typed timeouts and transport failures
    if isinstance(
        error, (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException)
    ):
        return ErrorClass.TIMEOUT
    if isinstance(error, httpx.TransportError):
        return ErrorClass.TRANSIENT

    # 3. Fall back to string matching for untyped exceptions
    msg = str(error).lower()

    if "timeout" in msg or "timed out" in msg:
        return ErrorClass.TIMEOUT
    if "429" in msg or "rate limit" in msg or "rate_limit" in msg:
        return ErrorClass.TRANSIENT
    if any(code in msg for code in ("500", "502", "503", "504")):
        return ErrorClass.SERVER
    if "econnrefused" in msg or "connection" in msg:
        return ErrorClass.TRANSIENT
    if any(code in msg for code in ("400", "401", "403", "404")):
        return ErrorClass.CLIENT

    return ErrorClass.UNKNOWN


_RETRYABLE = frozenset({
    ErrorClass.TRANSIENT,
    ErrorClass.SERVER,
    ErrorClass.TIMEOUT,
})


def is_retryable(error: BaseException) -> bool:
    """Return True if the error category supports retry."""
    if not isinstance(error, Exception):
        return False
    return classify_error(error) in _RETRYABLE
