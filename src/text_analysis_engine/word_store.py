from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

DEFAULT_TABLE_CAPACITY = 10007
VERB_ENDINGS = ("er", "ir")
LONG_VERB_ENDING = "re"

_HASH_SEED = 5381
_HASH_MASK = 0xFFFFFFFF


@dataclass(slots=True)
class Word:
    """Statistics for one normalized token."""

    text: str
    frequency: int
    length: int
    is_verb: bool
    is_proper_noun: bool


def bucket_index(text: str, capacity: int) -> int:
    """Return the DJB2 hash of ``text`` reduced to a bucket in ``[0, capacity)``."""
    value = _HASH_SEED
    for char in text:
        value = ((value << 5) + value + ord(char)) & _HASH_MASK
    return value % capacity


def detect_verb(normalized: str) -> bool:
    """Suffix check for French infinitives (-er, -ir, -re)."""
    length = len(normalized)
    if length > 2 and normalized[-2:] in VERB_ENDINGS:
        return True
    return length > 3 and normalized.endswith(LONG_VERB_ENDING)


def detect_proper_noun(original: str) -> bool:
    """Return True when the token, as written in the text, starts uppercase."""
    return bool(original) and original[0].isupper()


class WordStore:
    """Chained hash table mapping normalized words to their :class:`Word` record."""

    def __init__(self, capacity: int = DEFAULT_TABLE_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("WordStore capacity must be positive.")
        self._capacity = capacity
        self._buckets: List[List[Word]] = [[] for _ in range(capacity)]
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def insert_or_increment(
        self, normalized: str, original: str | None = None
    ) -> tuple[Word, bool]:
        """
        Count one occurrence of ``normalized``.

        Returns the stored record and whether it was created by this call. The
        proper-noun flag is derived from ``original`` (the token before
        normalization); without it the normalized text is used, which is
        always lowercase.
        """
        if not normalized:
            raise ValueError("Cannot store an empty word.")
        bucket = self._buckets[bucket_index(normalized, self._capacity)]
        for word in bucket:
            if word.text == normalized:
                word.frequency += 1
                return word, False

        word = Word(
            text=normalized,
            frequency=1,
            length=len(normalized),
            is_verb=detect_verb(normalized),
            is_proper_noun=detect_proper_noun(
                original if original is not None else normalized
            ),
        )
        bucket.append(word)
        self._size += 1
        return word, True

    def get(self, text: str) -> Word | None:
        if not text:
            return None
        for word in self._buckets[bucket_index(text, self._capacity)]:
            if word.text == text:
                return word
        return None

    def iterate(self) -> Iterator[Word]:
        """Yield every stored word in bucket order."""
        for bucket in self._buckets:
            yield from bucket

    def clear(self) -> None:
        """Drop every entry, keeping the table capacity."""
        for bucket in self._buckets:
            bucket.clear()
        self._size = 0

    def __iter__(self) -> Iterator[Word]:
        return self.iterate()

    def __len__(self) -> int:
        return self._size

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and self.get(text) is not None
