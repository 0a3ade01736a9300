from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from .word_store import Word, WordStore


class AnalysisStage(str, Enum):
    """Lifecycle of a :class:`TextAnalysis`."""

    EMPTY = "empty"
    SEGMENTED = "segmented"
    FINALIZED = "finalized"


@dataclass(slots=True)
class TextAnalysis:
    """Aggregate statistics for one analyzed document."""

    words: WordStore = field(default_factory=WordStore)
    stage: AnalysisStage = AnalysisStage.EMPTY

    total_words: int = 0
    unique_words: int = 0
    sentence_count: int = 0
    paragraph_count: int = 0
    verb_count: int = 0
    proper_noun_count: int = 0
    character_count: int = 0
    characters_without_spaces: int = 0
    space_count: int = 0
    line_count: int = 0

    sentence_word_sum: int = 0

    longest_sentence: str = ""
    longest_sentence_length: int = 0
    shortest_sentence: str = ""
    # None until a sentence with at least one word has been seen.
    shortest_sentence_candidate: int | None = None

    average_sentence_length: float = 0.0
    average_word_length: float = 0.0
    lexical_diversity: float = 0.0
    complexity_score: float = 0.0

    @property
    def shortest_sentence_length(self) -> int:
        if self.shortest_sentence_candidate is None:
            return 0
        return self.shortest_sentence_candidate

    @property
    def is_finalized(self) -> bool:
        return self.stage is AnalysisStage.FINALIZED

    def record_word(self, normalized: str, original: str | None = None) -> Word:
        """Count one occurrence of a normalized word and update the vocabulary counters."""
        word, created = self.words.insert_or_increment(normalized, original)
        if created:
            self.unique_words += 1
            if word.is_verb:
                self.verb_count += 1
            if word.is_proper_noun:
                self.proper_noun_count += 1
        return word

    def record_sentence(self, text: str, word_count: int) -> None:
        """Close a sentence and update the longest/shortest trackers."""
        self.sentence_count += 1
        self.sentence_word_sum += word_count
        if word_count <= 0:
            return
        length = len(text)
        if length > self.longest_sentence_length:
            self.longest_sentence_length = length
            self.longest_sentence = text
        if (
            self.shortest_sentence_candidate is None
            or length < self.shortest_sentence_candidate
        ):
            self.shortest_sentence_candidate = length
            self.shortest_sentence = text

    def dispose(self) -> None:
        """Release the word entries held by this analysis."""
        self.words.clear()


@dataclass(slots=True)
class PalindromeScan:
    """Palindromic words found in a word store, in table order."""

    matches: List[Tuple[str, int]]

    @property
    def count(self) -> int:
        return len(self.matches)


@dataclass(slots=True)
class MetricDifferences:
    """Absolute differences between the summary metrics of two analyses."""

    total_words: int
    unique_words: int
    sentences: int
    average_sentence_length: float
    lexical_diversity: float
    complexity_score: float
    verbs: int
    proper_nouns: int
