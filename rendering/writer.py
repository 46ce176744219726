"""Chunked file writes that report progress after every chunk."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator, Optional

from .models import DEFAULT_CHUNK_SIZE, WriteProgress

ProgressCallback = Callable[[WriteProgress], None]


def iter_chunks(content: bytes, chunk_size: int) -> Iterator[bytes]:
    """Yield sequential ``chunk_size`` slices of ``content``."""

    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    view = memoryview(content)
    for cursor in range(0, len(content), chunk_size):
        yield view[cursor:cursor + chunk_size].tobytes()


def write_with_progress(
    path: Path | str,
    content: bytes,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    on_progress: Optional[ProgressCallback] = None,
) -> int:
    """Write ``content`` to ``path`` and return the number of bytes written.

    Existing files are truncated. ``on_progress`` receives a
    ``WriteProgress`` after each chunk; its percentage never decreases and
    reaches 100 only once the final chunk is on disk. Empty content reports
    completion once. ``OSError`` propagates as soon as a write fails and the
    bytes already written are left in place.
    """

    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    path = Path(path)
    chunks = iter_chunks(content, chunk_size)
    total = len(content)
    path.parent.mkdir(parents=True, exist_ok=True)

    written = 0
    with path.open("wb") as handle:
        for chunk in chunks:
            handle.write(chunk)
            written += len(chunk)
            if on_progress is not None:
                on_progress(WriteProgress(written=written, total=total))
    if total == 0 and on_progress is not None:
        on_progress(WriteProgress(written=0, total=0))
    return written


__all__ = ["ProgressCallback", "iter_chunks", "write_with_progress"]
