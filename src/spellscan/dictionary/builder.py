"""Normalize a raw word-list blob into a membership-testable dictionary."""

from __future__ import annotations

type Dictionary = frozenset[str]

EMPTY_DICTIONARY: Dictionary = frozenset()


def _is_hidden(ch: str) -> bool:
    """Whitespace or a non-printable character (BOM, zero-width space)."""
    return ch.isspace() or not ch.isprintable()


def _clean(line: str) -> str:
    start, end = 0, len(line)
    while start < end and _is_hidden(line[start]):
        start += 1
    while end > start and _is_hidden(line[end - 1]):
        end -= 1
    return line[start:end].lower()


def build_dictionary(raw_text: str | None) -> Dictionary:
    """Build a lowercase word set from one-word-per-line text.

    Lines are trimmed of whitespace and hidden characters and
    lowercased; blank lines are dropped and duplicates collapse.
    Missing or empty input yields an empty dictionary, never an error.
    """
    if not raw_text:
        return EMPTY_DICTIONARY
    words = (_clean(line) for line in raw_text.splitlines())
    return frozenset(w for w in words if w)
