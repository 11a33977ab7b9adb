"""Word-list loading, normalization and readiness state."""

from spellscan.dictionary.builder import (
    EMPTY_DICTIONARY,
    Dictionary,
    build_dictionary,
)
from spellscan.dictionary.loader import (
    DictionaryLoader,
    FileDictionaryLoader,
    HttpDictionaryLoader,
    StaticDictionaryLoader,
    loader_for,
)
from spellscan.dictionary.state import (
    DictionaryState,
    Failed,
    NotReady,
    Ready,
    is_scannable,
)

__all__ = [
    "EMPTY_DICTIONARY",
    "Dictionary",
    "DictionaryLoader",
    "DictionaryState",
    "Failed",
    "FileDictionaryLoader",
    "HttpDictionaryLoader",
    "NotReady",
    "Ready",
    "StaticDictionaryLoader",
    "build_dictionary",
    "is_scannable",
    "loader_for",
]
