from __future__ import annotations

import logging
from typing import Iterable, List

from .errors import AnalysisStateError
from .models import AnalysisStage, TextAnalysis
from .textutils import is_word_character, normalize_word

LOGGER = logging.getLogger(__name__)

SENTENCE_TERMINATORS = frozenset(".!?")
LINE_TERMINATORS = frozenset("\n\r")
DEFAULT_MAX_WORD_LENGTH = 49
DEFAULT_MAX_SENTENCE_LENGTH = 999


class Segmenter:
    """
    Single-pass word, sentence and paragraph segmentation over a character stream.

    Parameters
    ----------
    max_word_length:
        Characters kept per word; the rest of an over-long word is dropped.
        ``None`` keeps everything.
    max_sentence_length:
        Characters kept per sentence buffer, same semantics as above.
    """

    def __init__(
        self,
        max_word_length: int | None = DEFAULT_MAX_WORD_LENGTH,
        max_sentence_length: int | None = DEFAULT_MAX_SENTENCE_LENGTH,
    ) -> None:
        self.max_word_length = max_word_length
        self.max_sentence_length = max_sentence_length

    def run(self, stream: Iterable[str], analysis: TextAnalysis) -> TextAnalysis:
        """Populate ``analysis`` from ``stream`` and mark it segmented."""
        if analysis.stage is not AnalysisStage.EMPTY:
            raise AnalysisStateError(
                f"Segmentation needs a fresh analysis, got stage '{analysis.stage.value}'."
            )

        word_chars: List[str] = []
        sentence_chars: List[str] = []
        in_word = False
        in_paragraph_break = False
        words_in_sentence = 0
        analysis.line_count = 1

        for char in stream:
            if char == " ":
                analysis.space_count += 1
                analysis.character_count += 1
            elif char not in LINE_TERMINATORS:
                analysis.characters_without_spaces += 1
                analysis.character_count += 1

            if char == "\n":
                analysis.line_count += 1
                if not in_paragraph_break:
                    analysis.paragraph_count += 1
                    in_paragraph_break = True
            elif char != "\r":
                in_paragraph_break = False

            if is_word_character(char):
                if not in_word:
                    in_word = True
                    analysis.total_words += 1
                    words_in_sentence += 1
                if self._has_room(word_chars, self.max_word_length):
                    word_chars.append(char)
                if self._has_room(sentence_chars, self.max_sentence_length):
                    sentence_chars.append(char)
                continue

            if in_word:
                self._flush_word(word_chars, analysis)
                word_chars = []
                in_word = False

            if char not in LINE_TERMINATORS and self._has_room(
                sentence_chars, self.max_sentence_length
            ):
                sentence_chars.append(char)

            if char in SENTENCE_TERMINATORS:
                analysis.record_sentence(
                    "".join(sentence_chars).strip(), words_in_sentence
                )
                sentence_chars = []
                words_in_sentence = 0

        if in_word:
            self._flush_word(word_chars, analysis)
        if words_in_sentence > 0:
            analysis.record_sentence("".join(sentence_chars).strip(), words_in_sentence)

        analysis.stage = AnalysisStage.SEGMENTED
        LOGGER.debug(
            "Segmented %d words (%d unique) into %d sentences and %d paragraphs",
            analysis.total_words,
            analysis.unique_words,
            analysis.sentence_count,
            analysis.paragraph_count,
        )
        return analysis

    @staticmethod
    def _has_room(buffer: List[str], limit: int | None) -> bool:
        return limit is None or len(buffer) < limit

    @staticmethod
    def _flush_word(word_chars: List[str], analysis: TextAnalysis) -> None:
        original = "".join(word_chars)
        normalized = normalize_word(original)
        if normalized:
            analysis.record_word(normalized, original)
