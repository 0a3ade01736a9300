from __future__ import annotations

import logging
from typing import Dict, Iterable

from .errors import AnalysisStateError
from .models import AnalysisStage, TextAnalysis
from .word_store import Word

LOGGER = logging.getLogger(__name__)

# Ratios enter the score as percentages, lengths in raw units.
COMPLEXITY_WEIGHTS: Dict[str, float] = {
    "average_sentence_length": 0.30,
    "lexical_diversity": 0.20,
    "verb_ratio": 0.20,
    "unique_ratio": 0.15,
    "average_word_length": 0.15,
}


def compute_average_sentence_length(word_sum: int, sentence_count: int) -> float:
    """Words per sentence, 0.0 when no sentence was closed."""
    if sentence_count <= 0:
        return 0.0
    return word_sum / sentence_count


def compute_average_word_length(words: Iterable[Word]) -> float:
    """Mean length of the distinct words, not weighted by frequency."""
    total = 0
    count = 0
    for word in words:
        total += word.length
        count += 1
    return total / count if count else 0.0


def compute_lexical_diversity(unique_words: int, total_words: int) -> float:
    """Ratio of distinct words to word occurrences."""
    if total_words <= 0:
        raise ZeroDivisionError("Lexical diversity is undefined for zero words.")
    return unique_words / total_words


def compute_complexity_score(
    average_sentence_length: float,
    lexical_diversity: float,
    verb_count: int,
    unique_words: int,
    total_words: int,
    average_word_length: float,
) -> float:
    """Weighted sum of the five complexity inputs."""
    if total_words <= 0:
        raise ZeroDivisionError("Complexity score is undefined for zero words.")
    weights = COMPLEXITY_WEIGHTS
    return (
        weights["average_sentence_length"] * average_sentence_length
        + weights["lexical_diversity"] * (lexical_diversity * 100)
        + weights["verb_ratio"] * (verb_count / total_words * 100)
        + weights["unique_ratio"] * (unique_words / total_words * 100)
        + weights["average_word_length"] * average_word_length
    )


def finalize(analysis: TextAnalysis) -> TextAnalysis:
    """
    Compute the derived fields of a segmented analysis.

    Documents without any word keep every ratio-based field at 0.0 instead of
    dividing by zero.
    """
    if analysis.stage is not AnalysisStage.SEGMENTED:
        raise AnalysisStateError(
            f"Only a segmented analysis can be finalized, got stage '{analysis.stage.value}'."
        )

    analysis.average_sentence_length = compute_average_sentence_length(
        analysis.sentence_word_sum, analysis.sentence_count
    )
    analysis.average_word_length = compute_average_word_length(analysis.words)

    if analysis.total_words == 0:
        LOGGER.warning(
            "Document contains no words; lexical diversity and complexity left at 0."
        )
    else:
        analysis.lexical_diversity = compute_lexical_diversity(
            analysis.unique_words, analysis.total_words
        )
        analysis.complexity_score = compute_complexity_score(
            analysis.average_sentence_length,
            analysis.lexical_diversity,
            analysis.verb_count,
            analysis.unique_words,
            analysis.total_words,
            analysis.average_word_length,
        )

    analysis.stage = AnalysisStage.FINALIZED
    return analysis
