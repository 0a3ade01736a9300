"""
text_analysis_engine package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .comparison import diff_analyses
from .config import AnalysisConfig, config_from_dict, config_from_yaml, load_config
from .errors import (
    AnalysisStateError,
    DocumentOpenError,
    DocumentReadError,
    TextAnalysisError,
)
from .metrics import finalize
from .models import AnalysisStage, MetricDifferences, PalindromeScan, TextAnalysis
from .palindromes import is_palindrome, scan_palindromes
from .pipeline import analyze_file, analyze_stream, analyze_text, compare_files
from .segmenter import Segmenter
from .textutils import is_word_character, normalize_word
from .word_store import Word, WordStore

__all__ = [
    "AnalysisConfig",
    "AnalysisStage",
    "AnalysisStateError",
    "DocumentOpenError",
    "DocumentReadError",
    "MetricDifferences",
    "PalindromeScan",
    "Segmenter",
    "TextAnalysis",
    "TextAnalysisError",
    "Word",
    "WordStore",
    "analyze_file",
    "analyze_stream",
    "analyze_text",
    "compare_files",
    "config_from_dict",
    "config_from_yaml",
    "diff_analyses",
    "finalize",
    "is_palindrome",
    "is_word_character",
    "load_config",
    "normalize_word",
    "scan_palindromes",
]

__version__ = "0.1.0"
