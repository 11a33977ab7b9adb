"""Shared test fixtures — recording collaborators, fast settings."""

import os

# Keep a developer's .env/environment from leaking into Settings()
for _name in ("DICTIONARY_URL", "DICTIONARY_PATH", "DEBOUNCE_SECONDS"):
    os.environ.pop(_name, None)

import pytest

from spellscan.config import Settings
from spellscan.scanning.schemas import ScanResult


class RecordingReporter:
    """Reporter double that keeps everything it is handed."""

    def __init__(self, name: str = "recording") -> None:
        self._name = name
        self.results: list[ScanResult] = []
        self.advisories: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    def report(self, result: ScanResult) -> None:
        self.results.append(result)

    def advise(self, message: str) -> None:
        self.advisories.append(message)


class RecordingProgress:
    """Progress double recording the call order."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def loading_started(self) -> None:
        self.calls.append("started")

    def loading_finished(self) -> None:
        self.calls.append("finished")


WORD_LIST = "hello\nworld\nthe\nquick\nbrown\nfox\nword\n"


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def progress() -> RecordingProgress:
    return RecordingProgress()


@pytest.fixture
def settings() -> Settings:
    """Short debounce and no near-empty advisory for small word lists."""
    return Settings(
        debounce_seconds=0.05,
        near_empty_dictionary_threshold=0,
    )
