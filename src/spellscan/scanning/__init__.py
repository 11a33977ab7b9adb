"""Scan pipeline core — tokenize, classify, aggregate."""

from spellscan.scanning.aggregator import aggregate, scan_text
from spellscan.scanning.classifier import classify, is_numeric
from spellscan.scanning.schemas import ScanResult
from spellscan.scanning.tokenizer import tokenize

__all__ = [
    "ScanResult",
    "aggregate",
    "classify",
    "is_numeric",
    "scan_text",
    "tokenize",
]
