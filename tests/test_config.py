"""Tests for Settings validators."""

from __future__ import annotations

from pathlib import Path

import pytest

from spellscan.config import Settings
from spellscan.constants import DEBOUNCE_SECONDS, DEFAULT_DICTIONARY_URL


class TestDefaults:
    def test_defaults(self) -> None:
        s = Settings()
        assert s.dictionary_url == DEFAULT_DICTIONARY_URL
        assert s.dictionary_path is None
        assert s.debounce_seconds == DEBOUNCE_SECONDS
        assert s.ascii_word_chars is True

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEBOUNCE_SECONDS", "0.25")
        monkeypatch.setenv("ASCII_WORD_CHARS", "false")
        s = Settings()
        assert s.debounce_seconds == 0.25
        assert s.ascii_word_chars is False


class TestValidation:
    @pytest.mark.parametrize(
        "field", ["debounce_seconds", "fetch_timeout_seconds", "watch_poll_seconds"]
    )
    def test_non_positive_rejected(self, field: str) -> None:
        with pytest.raises(ValueError, match="greater than zero"):
            Settings(**{field: 0})

    def test_log_level_normalised(self) -> None:
        assert Settings(log_level=" debug ").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValueError, match="log_level must be one of"):
            Settings(log_level="chatty")


class TestDictionarySource:
    def test_url_by_default(self) -> None:
        assert Settings().dictionary_source == DEFAULT_DICTIONARY_URL

    def test_path_when_set(self, tmp_path: Path) -> None:
        path = tmp_path / "words.txt"
        assert Settings(dictionary_path=path).dictionary_source == str(path)
