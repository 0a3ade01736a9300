from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Tuple

from .comparison import diff_analyses
from .config import AnalysisConfig
from .metrics import finalize
from .models import MetricDifferences, TextAnalysis
from .reader import open_code_points
from .segmenter import Segmenter
from .word_store import WordStore

LOGGER = logging.getLogger(__name__)


def build_segmenter(config: AnalysisConfig) -> Segmenter:
    """Create a segmenter honouring the configured truncation limits."""
    return Segmenter(
        max_word_length=config.max_word_length,
        max_sentence_length=config.max_sentence_length,
    )


def new_analysis(config: AnalysisConfig) -> TextAnalysis:
    """Return an empty analysis whose word store uses the configured capacity."""
    return TextAnalysis(words=WordStore(config.table_capacity))


def analyze_stream(
    stream: Iterable[str], config: AnalysisConfig | None = None
) -> TextAnalysis:
    """Segment and finalize a character stream into a fresh analysis."""
    cfg = config or AnalysisConfig()
    analysis = new_analysis(cfg)
    build_segmenter(cfg).run(stream, analysis)
    return finalize(analysis)


def analyze_text(text: str, config: AnalysisConfig | None = None) -> TextAnalysis:
    """Analyze an in-memory string."""
    return analyze_stream(iter(text), config)


def analyze_file(path: str | Path, config: AnalysisConfig | None = None) -> TextAnalysis:
    """Analyze a text file; open failures surface before any analysis is built."""
    cfg = config or AnalysisConfig()
    with open_code_points(path, encoding=cfg.encoding) as stream:
        LOGGER.info("Analyzing %s", path)
        analysis = analyze_stream(stream, cfg)
    LOGGER.info(
        "Finished %s: %d words, %d sentences",
        path,
        analysis.total_words,
        analysis.sentence_count,
    )
    return analysis


def compare_files(
    first_path: str | Path,
    second_path: str | Path,
    config: AnalysisConfig | None = None,
) -> Tuple[TextAnalysis, TextAnalysis, MetricDifferences]:
    """Analyze two files independently and diff their summary metrics."""
    first = analyze_file(first_path, config)
    second = analyze_file(second_path, config)
    return first, second, diff_analyses(first, second)
