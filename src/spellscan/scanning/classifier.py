"""Decide which parts of a token are unknown words."""

from __future__ import annotations

import re

from spellscan.constants import PART_SEPARATOR
from spellscan.dictionary.builder import Dictionary

# Whole-token numeric literals: integers, exponent form, hex/octal/binary,
# and the literal "Infinity"
_NUMERIC_RE = re.compile(
    r"\d+(?:[eE]\d+)?|0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+|Infinity",
    re.ASCII,
)


def is_numeric(token: str) -> bool:
    """True when the whole token reads as a number.

    Decimal digits from any script count (``"١٢٣"``), since Unicode
    tokenization can produce them.
    """
    return token.isdecimal() or _NUMERIC_RE.fullmatch(token) is not None


def split_parts(token: str) -> list[str]:
    """Lowercase, non-empty underscore-separated parts, first occurrence order."""
    parts = (p.lower() for p in token.split(PART_SEPARATOR))
    return list(dict.fromkeys(p for p in parts if p))


def classify(token: str, dictionary: Dictionary) -> set[str]:
    """Return the lowercase parts of *token* missing from *dictionary*.

    Numeric tokens yield nothing. Compound identifiers are split on
    underscores and each non-empty part is checked on its own.
    """
    if is_numeric(token):
        return set()
    return {part for part in split_parts(token) if part not in dictionary}
