"""Document text sources — what a scan reads.

A source is any zero-argument callable returning the current text; it
is called at scan time, so a debounced scan sees the latest content.
"""

from __future__ import annotations

from collections.abc import Callable
from html.parser import HTMLParser
from pathlib import Path

type DocumentSource = Callable[[], str]

_HTML_SUFFIXES = frozenset({".html", ".htm", ".xhtml"})

# Elements whose content is never rendered as text
_INVISIBLE_TAGS = frozenset({
    "head", "script", "style", "noscript", "template",
})


class _VisibleTextParser(HTMLParser):
    """Collects text outside invisible elements."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._skip_depth = 0
        self._parts: list[str] = []

    def handle_starttag(
        self, tag: str, attrs: list[tuple[str, str | None]]
    ) -> None:
        if tag in _INVISIBLE_TAGS:
            self._skip_depth += 1

    def handle_endtag(self, tag: str) -> None:
        if tag in _INVISIBLE_TAGS and self._skip_depth:
            self._skip_depth -= 1

    def handle_data(self, data: str) -> None:
        if not self._skip_depth:
            self._parts.append(data)

    @property
    def text(self) -> str:
        return " ".join(self._parts)


def visible_text(html: str) -> str:
    """Text a browser would render for *html*, separated by spaces."""
    parser = _VisibleTextParser()
    parser.feed(html)
    parser.close()
    return parser.text


class FileDocumentSource:
    """Reads a document from disk; HTML files yield their visible text."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_html(self) -> bool:
        return self._path.suffix.lower() in _HTML_SUFFIXES

    def mtime_ns(self) -> int:
        return self._path.stat().st_mtime_ns

    def __call__(self) -> str:
        raw = self._path.read_text(encoding="utf-8", errors="replace")
        return visible_text(raw) if self.is_html else raw


class TextDocumentSource:
    """Mutable in-memory document (embedding and tests)."""

    def __init__(self, text: str = "") -> None:
        self.text = text

    def __call__(self) -> str:
        return self.text
