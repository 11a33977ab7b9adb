"""Spell scanning pipeline — tokenize text, flag words missing from a word list."""

__version__ = "0.1.0"
