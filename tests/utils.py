from __future__ import annotations

from pathlib import Path

FRENCH_SAMPLE = (
    "Paris est une ville. Les gens aiment parler et finir le repas!\n"
    "\n"
    "Il faut prendre le temps de lire? Oui, le radar voit tout."
)

ENGLISH_SAMPLE = "The cat sat on the mat. The dog barked!\nA level road leads home."


def write_document(path: Path, text: str) -> Path:
    """Write ``text`` as UTF-8 without newline translation and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))
    return path
