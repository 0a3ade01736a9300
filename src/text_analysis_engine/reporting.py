from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Callable, Dict, List, TypedDict

from .models import MetricDifferences, PalindromeScan, TextAnalysis
from .palindromes import scan_palindromes
from .word_store import Word

LOGGER = logging.getLogger(__name__)

SECTION_RULE = "-----------------------------------"
FREQUENCY_TSV_FIELDS = [
    "word",
    "frequency",
    "length",
    "is_verb",
    "is_proper_noun",
    "rank",
]


# The export file lists the metrics in this order.
METRIC_FORMATTERS: Dict[str, Callable[[TextAnalysis], str]] = {
    "total_words": lambda a: f"Total Words: {a.total_words}",
    "unique_words": lambda a: f"Unique Words: {a.unique_words}",
    "sentences": lambda a: f"Sentences: {a.sentence_count}",
    "paragraphs": lambda a: f"Paragraphs: {a.paragraph_count}",
    "average_sentence_length": lambda a: (
        f"Average Sentence Length: {a.average_sentence_length:.2f} words"
    ),
    "lexical_diversity": lambda a: f"Lexical Diversity: {a.lexical_diversity * 100:.2f}%",
    "complexity_score": lambda a: f"Text Complexity: {a.complexity_score:.2f}",
    "verbs": lambda a: f"Verbs: {a.verb_count}",
    "proper_nouns": lambda a: f"Proper Nouns: {a.proper_noun_count}",
}
METRIC_NAMES = tuple(METRIC_FORMATTERS)


class SentencePayload(TypedDict):
    text: str
    length: int


class WordPayload(TypedDict):
    word: str
    frequency: int
    is_verb: bool
    is_proper_noun: bool


class AnalysisSummary(TypedDict):
    total_words: int
    unique_words: int
    sentences: int
    paragraphs: int
    lines: int
    characters: int
    characters_without_spaces: int
    spaces: int
    average_sentence_length: float
    average_word_length: float
    lexical_diversity: float
    complexity_score: float
    verbs: int
    proper_nouns: int
    longest_sentence: SentencePayload
    shortest_sentence: SentencePayload
    top_words: List[WordPayload]


def format_metric(analysis: TextAnalysis, name: str) -> str:
    """Render a single named metric as one line of text."""
    try:
        formatter = METRIC_FORMATTERS[name]
    except KeyError as exc:
        raise ValueError(
            f"Unknown metric '{name}'. Expected one of: {', '.join(METRIC_NAMES)}."
        ) from exc
    return formatter(analysis)


def _frequency_key(word: Word) -> tuple[int, str]:
    return (-word.frequency, word.text)


def frequency_listing(analysis: TextAnalysis, sort: bool = True) -> List[Word]:
    """
    Snapshot every stored word.

    Sorted listings are ordered by descending frequency with ties broken
    alphabetically; ``sort=False`` keeps the table's iteration order.
    """
    words = list(analysis.words)
    if sort:
        words.sort(key=_frequency_key)
    return words


def top_words(analysis: TextAnalysis, n: int = 10) -> List[Word]:
    """Return the ``n`` most frequent words."""
    if n <= 0:
        return []
    return frequency_listing(analysis)[:n]


def _word_line(word: Word) -> str:
    plural = "s" if word.frequency > 1 else ""
    line = f"{word.text}: {word.frequency} occurrence{plural}"
    if word.is_verb:
        line += " (verb)"
    if word.is_proper_noun:
        line += " (proper noun)"
    return line


def format_top_words(analysis: TextAnalysis, n: int = 10) -> str:
    """Numbered listing of the most frequent words."""
    words = top_words(analysis, n)
    if not words:
        return "No words to display.\n"
    lines = ["Top words by frequency:", ""]
    lines.extend(f"{rank}. {_word_line(word)}" for rank, word in enumerate(words, 1))
    return "\n".join(lines) + "\n"


def format_word_frequency(analysis: TextAnalysis, sort: bool = True) -> str:
    """Listing of every word with its occurrence count."""
    lines = ["Complete word frequency:", ""]
    lines.extend(_word_line(word) for word in frequency_listing(analysis, sort=sort))
    return "\n".join(lines) + "\n"


def format_palindromes(scan: PalindromeScan) -> str:
    lines = ["Palindromes found in text:", ""]
    if not scan.matches:
        lines.append("No palindromes found in text.")
        return "\n".join(lines) + "\n"
    lines.extend(f"{text} (frequency: {frequency})" for text, frequency in scan.matches)
    lines.extend(["", f"Total palindromes found: {scan.count}"])
    return "\n".join(lines) + "\n"


def format_detailed_statistics(analysis: TextAnalysis) -> str:
    """Character, structure and extremal-sentence statistics."""
    lines = [
        "Detailed text statistics:",
        SECTION_RULE,
        "Characters:",
        f"  - Total with spaces: {analysis.character_count}",
        f"  - Total without spaces: {analysis.characters_without_spaces}",
        f"  - Spaces: {analysis.space_count}",
        "",
        "Structure:",
        f"  - Words: {analysis.total_words}",
        f"  - Sentences: {analysis.sentence_count}",
        f"  - Paragraphs: {analysis.paragraph_count}",
        f"  - Lines: {analysis.line_count}",
        "",
        "Extreme sentences:",
        f"Longest sentence ({analysis.longest_sentence_length} characters):",
        analysis.longest_sentence,
        "",
        f"Shortest sentence ({analysis.shortest_sentence_length} characters):",
        analysis.shortest_sentence,
    ]
    return "\n".join(lines) + "\n"


def format_comparison(
    first: TextAnalysis,
    second: TextAnalysis,
    differences: MetricDifferences,
    first_label: str = "File 1",
    second_label: str = "File 2",
) -> str:
    """Side-by-side comparison report of two analyses."""
    lines = [
        "Comparison of metrics between files:",
        "",
        f"Total Words difference: {differences.total_words}",
        f"Unique Words difference: {differences.unique_words}",
        f"Sentences difference: {differences.sentences}",
        f"Average Sentence Length difference: {differences.average_sentence_length:.2f}",
        f"Lexical Diversity difference: {differences.lexical_diversity * 100:.2f}%",
        f"Text Complexity difference: {differences.complexity_score:.2f}",
        f"Verbs difference: {differences.verbs}",
        f"Proper Nouns difference: {differences.proper_nouns}",
        "",
        "Individual Statistics:",
    ]
    for label, analysis in ((first_label, first), (second_label, second)):
        lines.extend(
            [
                f"{label}:",
                f"- Total Words: {analysis.total_words}",
                f"- Unique Words: {analysis.unique_words}",
                f"- Text Complexity: {analysis.complexity_score:.2f}",
                "",
            ]
        )
    return "\n".join(lines).rstrip("\n") + "\n"


def render_export(analysis: TextAnalysis) -> str:
    """Plain-text export: scalar metrics, detailed statistics, full frequency list."""
    lines = [format_metric(analysis, name) for name in METRIC_NAMES]
    lines.append("")
    lines.append(format_detailed_statistics(analysis))
    lines.append("Complete Word Frequency:")
    lines.append(SECTION_RULE)
    lines.extend(_word_line(word) for word in frequency_listing(analysis))
    return "\n".join(lines) + "\n"


def export_analysis(analysis: TextAnalysis, path: str | Path) -> Path:
    """Write :func:`render_export` output to ``path`` and return it."""
    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(render_export(analysis), encoding="utf-8")
    LOGGER.info("Wrote analysis export to %s", destination)
    return destination


def write_frequency_tsv(analysis: TextAnalysis, path: str | Path) -> Path:
    """Write the sorted frequency listing as a TSV table."""
    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    with destination.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle, delimiter="\t")
        writer.writerow(FREQUENCY_TSV_FIELDS)
        for rank, word in enumerate(frequency_listing(analysis), start=1):
            writer.writerow(
                [
                    word.text,
                    word.frequency,
                    word.length,
                    int(word.is_verb),
                    int(word.is_proper_noun),
                    rank,
                ]
            )
    LOGGER.info("Wrote %d word frequencies to %s", len(analysis.words), destination)
    return destination


def palindrome_report(analysis: TextAnalysis) -> str:
    """Scan the analysis vocabulary and render the palindrome listing."""
    return format_palindromes(scan_palindromes(analysis.words))


def _word_payload(word: Word) -> WordPayload:
    return {
        "word": word.text,
        "frequency": word.frequency,
        "is_verb": word.is_verb,
        "is_proper_noun": word.is_proper_noun,
    }


def analysis_to_dict(analysis: TextAnalysis, top_n: int = 10) -> AnalysisSummary:
    """Convert an analysis into a JSON-serializable summary."""
    return {
        "total_words": analysis.total_words,
        "unique_words": analysis.unique_words,
        "sentences": analysis.sentence_count,
        "paragraphs": analysis.paragraph_count,
        "lines": analysis.line_count,
        "characters": analysis.character_count,
        "characters_without_spaces": analysis.characters_without_spaces,
        "spaces": analysis.space_count,
        "average_sentence_length": analysis.average_sentence_length,
        "average_word_length": analysis.average_word_length,
        "lexical_diversity": analysis.lexical_diversity,
        "complexity_score": analysis.complexity_score,
        "verbs": analysis.verb_count,
        "proper_nouns": analysis.proper_noun_count,
        "longest_sentence": {
            "text": analysis.longest_sentence,
            "length": analysis.longest_sentence_length,
        },
        "shortest_sentence": {
            "text": analysis.shortest_sentence,
            "length": analysis.shortest_sentence_length,
        },
        "top_words": [_word_payload(word) for word in top_words(analysis, top_n)],
    }
