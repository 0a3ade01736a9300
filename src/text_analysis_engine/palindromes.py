from __future__ import annotations

from typing import Iterable, List, Tuple

from .models import PalindromeScan
from .word_store import Word

MIN_PALINDROME_LENGTH = 3


def is_palindrome(text: str) -> bool:
    """Compare the alphanumeric, lowercased form of ``text`` with its reverse."""
    cleaned = "".join(char for char in text.lower() if char.isalnum())
    if not cleaned:
        return False
    return cleaned == cleaned[::-1]


def scan_palindromes(words: Iterable[Word]) -> PalindromeScan:
    """Collect ``(text, frequency)`` for every palindromic word of length 3 or more."""
    matches: List[Tuple[str, int]] = []
    for word in words:
        if word.length >= MIN_PALINDROME_LENGTH and is_palindrome(word.text):
            matches.append((word.text, word.frequency))
    return PalindromeScan(matches=matches)
