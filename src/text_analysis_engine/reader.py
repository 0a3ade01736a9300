from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator

from .errors import DocumentOpenError, DocumentReadError

LOGGER = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 8192


@contextmanager
def open_code_points(
    path: str | Path,
    encoding: str = "utf-8",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[Iterator[str]]:
    """
    Open ``path`` and yield an iterator over its decoded characters.

    The file is opened before the ``with`` body runs, so an unreadable path
    raises :class:`DocumentOpenError` before any analysis is created. Newline
    translation is disabled so carriage returns reach the caller unchanged.
    """
    source = Path(path)
    try:
        handle = source.open("r", encoding=encoding, newline="")
    except (OSError, LookupError) as exc:
        raise DocumentOpenError(f"Unable to open {source}: {exc}") from exc

    LOGGER.debug("Opened %s with encoding %s", source, encoding)
    with handle:
        yield _iter_characters(handle, source, max(1, chunk_size))


def _iter_characters(handle: IO[str], source: Path, chunk_size: int) -> Iterator[str]:
    while True:
        try:
            chunk = handle.read(chunk_size)
        except UnicodeDecodeError as exc:
            raise DocumentReadError(f"Unable to decode {source}: {exc}") from exc
        except OSError as exc:
            raise DocumentReadError(f"Unable to read {source}: {exc}") from exc
        if not chunk:
            return
        yield from chunk
