"""Dictionary loaders — supply the raw word-list text.

The pipeline only depends on ``fetch_raw_dictionary_text()`` returning a
string. Transport, timeouts and retries live here.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Protocol

import httpx
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
    wait_random,
)

from spellscan.config import Settings
from spellscan.constants import (
    FETCH_TIMEOUT_SECONDS,
    RETRY_INITIAL_WAIT,
    RETRY_MAX_ATTEMPTS,
    RETRY_MAX_WAIT,
)
from spellscan.resilience.errors import is_retryable

logger = logging.getLogger(__name__)


class DictionaryLoader(Protocol):
    @property
    def source(self) -> str: ...

    async def fetch_raw_dictionary_text(self) -> str: ...


@retry(
    stop=stop_after_attempt(RETRY_MAX_ATTEMPTS),
    wait=(
        wait_exponential(multiplier=RETRY_INITIAL_WAIT, max=RETRY_MAX_WAIT)
        + wait_random(0, RETRY_INITIAL_WAIT)
    ),
    retry=retry_if_exception(is_retryable),
    reraise=True,
)
async def _get_text(
    client: httpx.AsyncClient, url: str, timeout: float
) -> str:
    """GET *url* and return the body text; retries transient failures.

    Tenacity retries network errors, timeouts, 429 and 5xx with
    jittered exponential backoff. Other 4xx responses fail at once.
    """
    response = await client.get(url, timeout=timeout)
    response.raise_for_status()
    return response.text


class HttpDictionaryLoader:
    """Fetch the word list over HTTP(S)."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = FETCH_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport

    @property
    def source(self) -> str:
        return self._url

    async def fetch_raw_dictionary_text(self) -> str:
        async with httpx.AsyncClient(
            transport=self._transport, follow_redirects=True
        ) as client:
            text = await _get_text(client, self._url, self._timeout)
        logger.info(
            "event=dictionary_fetched source=%s bytes=%d",
            self._url,
            len(text),
        )
        return text


class FileDictionaryLoader:
    """Read the word list from a local file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def source(self) -> str:
        return str(self._path)

    async def fetch_raw_dictionary_text(self) -> str:
        return await asyncio.to_thread(
            self._path.read_text, encoding="utf-8", errors="replace"
        )


class StaticDictionaryLoader:
    """Serve an in-memory word list (embedding and tests)."""

    def __init__(self, text: str) -> None:
        self._text = text

    @property
    def source(self) -> str:
        return "<static>"

    async def fetch_raw_dictionary_text(self) -> str:
        return self._text


def loader_for(
    source: str | None = None,
    settings: Settings | None = None,
) -> DictionaryLoader:
    """Pick a loader for *source* (URL or path), falling back to settings."""
    cfg = settings or Settings()
    if source is None:
        if cfg.dictionary_path is not None:
            return FileDictionaryLoader(cfg.dictionary_path)
        source = cfg.dictionary_url
    if source.startswith(("http://", "https://")):
        return HttpDictionaryLoader(
            source, timeout=cfg.fetch_timeout_seconds
        )
    return FileDictionaryLoader(Path(source))
