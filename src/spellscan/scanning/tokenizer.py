"""Extract word tokens from document text."""

from __future__ import annotations

import re

_ASCII_WORD_RE = re.compile(r"\w+", re.ASCII)
_UNICODE_WORD_RE = re.compile(r"\w+")


def tokenize(document_text: str, *, ascii_only: bool = True) -> list[str]:
    """Return maximal word-character runs in document order.

    Word characters are ``[A-Za-z0-9_]`` by default, so "café" yields
    "caf". With ``ascii_only=False`` accented and non-Latin letters and
    digits count as word characters too.
    """
    pattern = _ASCII_WORD_RE if ascii_only else _UNICODE_WORD_RE
    return pattern.findall(document_text)
