"""Tests for dictionary normalization."""

from __future__ import annotations

from spellscan.dictionary.builder import EMPTY_DICTIONARY, build_dictionary


def test_case_and_whitespace_collapse() -> None:
    """Same word in different case/padding → one entry."""
    assert build_dictionary("Hello\nHELLO \n") == frozenset({"hello"})


def test_crlf_line_endings() -> None:
    assert build_dictionary("apple\r\nbanana\r\n") == {"apple", "banana"}


def test_hidden_characters_trimmed() -> None:
    """BOM, zero-width space and control chars are stripped from edges."""
    raw = "\ufeffalpha\nbeta\u200b\n\x00gamma\t\n"
    assert build_dictionary(raw) == {"alpha", "beta", "gamma"}


def test_blank_lines_discarded() -> None:
    assert build_dictionary("\n\n  \none\n\t\n") == {"one"}


def test_inner_characters_preserved() -> None:
    """Only the edges are trimmed."""
    assert build_dictionary(" ice cream \n") == {"ice cream"}


def test_empty_input_yields_empty_dictionary() -> None:
    assert build_dictionary("") == EMPTY_DICTIONARY
    assert build_dictionary(None) == EMPTY_DICTIONARY


def test_result_is_immutable() -> None:
    assert isinstance(build_dictionary("a\nb"), frozenset)
