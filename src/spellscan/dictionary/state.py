"""Dictionary readiness — an explicit tagged state instead of a bare await.

Scans may only run once the state is ``Ready`` or ``Failed``; a failed
load degrades to an empty dictionary rather than blocking forever.
"""

from __future__ import annotations

from dataclasses import dataclass

from spellscan.dictionary.builder import EMPTY_DICTIONARY, Dictionary
from spellscan.resilience.errors import ErrorClass


@dataclass(frozen=True)
class NotReady:
    """Loading has not finished; scans are refused."""

    @property
    def dictionary(self) -> None:
        return None


@dataclass(frozen=True)
class Ready:
    """Dictionary built from a successful load."""

    dictionary: Dictionary

    @property
    def word_count(self) -> int:
        return len(self.dictionary)


@dataclass(frozen=True)
class Failed:
    """Load failed; scanning proceeds against an empty dictionary."""

    reason: str
    error_class: ErrorClass = ErrorClass.UNKNOWN
    dictionary: Dictionary = EMPTY_DICTIONARY


type DictionaryState = NotReady | Ready | Failed


def is_scannable(state: DictionaryState) -> bool:
    """True once loading has finished, successfully or not."""
    return not isinstance(state, NotReady)
