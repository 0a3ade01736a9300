from __future__ import annotations

WORD_PUNCTUATION = frozenset("-'_")


def is_word_character(char: str) -> bool:
    """Return True when ``char`` can be part of a word token."""
    return char.isalnum() or char in WORD_PUNCTUATION


def normalize_word(word: str) -> str:
    """Lowercase a token and drop every character that is not a word character."""
    # Lowercasing may expand a code point (e.g. "İ"), so filter afterwards.
    return "".join(char for char in word.lower() if is_word_character(char))
