from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .word_store import DEFAULT_TABLE_CAPACITY


@dataclass(slots=True)
class AnalysisConfig:
    """Configuration options for the text analysis engine."""

    max_word_length: int | None = 49
    max_sentence_length: int | None = 999
    table_capacity: int = DEFAULT_TABLE_CAPACITY
    top_n: int = 10
    encoding: str = "utf-8"
    export_path: str = "analyse.txt"

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))

    def validate(self) -> None:
        """Raise ValueError when a limit cannot be honoured."""
        if self.table_capacity <= 0:
            raise ValueError("table_capacity must be a positive integer.")
        for name in ("max_word_length", "max_sentence_length"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ValueError(f"{name} must be at least 1 or null to disable it.")
        if self.top_n < 0:
            raise ValueError("top_n cannot be negative.")


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(AnalysisConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> AnalysisConfig:
    """Build an AnalysisConfig from a dictionary-like input."""
    if data is None:
        return AnalysisConfig()
    config = AnalysisConfig(**_build_kwargs(data))
    config.validate()
    return config


def config_from_yaml(path: str | Path) -> AnalysisConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> AnalysisConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return AnalysisConfig()
    return config_from_yaml(path)
