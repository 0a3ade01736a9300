from __future__ import annotations

from .errors import AnalysisStateError
from .models import MetricDifferences, TextAnalysis


def diff_analyses(first: TextAnalysis, second: TextAnalysis) -> MetricDifferences:
    """Absolute differences between the summary metrics of two finalized analyses."""
    for label, analysis in (("first", first), ("second", second)):
        if not analysis.is_finalized:
            raise AnalysisStateError(
                f"The {label} analysis must be finalized before comparison."
            )

    return MetricDifferences(
        total_words=abs(first.total_words - second.total_words),
        unique_words=abs(first.unique_words - second.unique_words),
        sentences=abs(first.sentence_count - second.sentence_count),
        average_sentence_length=abs(
            first.average_sentence_length - second.average_sentence_length
        ),
        lexical_diversity=abs(first.lexical_diversity - second.lexical_diversity),
        complexity_score=abs(first.complexity_score - second.complexity_score),
        verbs=abs(first.verb_count - second.verb_count),
        proper_nouns=abs(first.proper_noun_count - second.proper_noun_count),
    )
