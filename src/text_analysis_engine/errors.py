from __future__ import annotations


class TextAnalysisError(RuntimeError):
    """Base class for errors raised by the analysis engine."""


class DocumentOpenError(TextAnalysisError):
    """Raised when an input document cannot be opened for reading."""


class DocumentReadError(TextAnalysisError):
    """Raised when an opened document fails while being read or decoded."""


class AnalysisStateError(TextAnalysisError):
    """Raised when an analysis is used out of its lifecycle order."""
