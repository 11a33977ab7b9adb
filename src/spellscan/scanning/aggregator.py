"""Count unknown words across a token stream."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from spellscan.dictionary.builder import Dictionary
from spellscan.scanning.classifier import classify, split_parts
from spellscan.scanning.schemas import ScanResult
from spellscan.scanning.tokenizer import tokenize


def aggregate(tokens: Sequence[str], dictionary: Dictionary) -> ScanResult:
    """Classify every token and tally unknown parts.

    ``total_tokens_scanned`` counts raw tokens, not split parts. Parts
    are tallied in the order they appear, so ``mistakes`` keeps
    first-seen order. Pure: no state outside the result is touched.
    """
    counts: Counter[str] = Counter()
    for token in tokens:
        unknown = classify(token, dictionary)
        if not unknown:
            continue
        for part in split_parts(token):
            if part in unknown:
                counts[part] += 1
    return ScanResult(
        total_tokens_scanned=len(tokens),
        mistakes=dict(counts),
    )


def scan_text(
    document_text: str,
    dictionary: Dictionary,
    *,
    ascii_only: bool = True,
) -> ScanResult:
    """Tokenize *document_text* and aggregate it in one step."""
    return aggregate(tokenize(document_text, ascii_only=ascii_only), dictionary)
