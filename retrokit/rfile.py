"""fopen-style helpers on top of :class:`FileStream`."""

from __future__ import annotations

import os

from .filestream import Access, FileStream, Hint, SeekPosition

__all__ = ["parse_mode", "rfopen", "rfseek", "rfread", "rfwrite"]

_ORIGINS = {
    os.SEEK_SET: SeekPosition.START,
    os.SEEK_CUR: SeekPosition.CURRENT,
    os.SEEK_END: SeekPosition.END,
}


def parse_mode(mode: str) -> tuple[Access, bool]:
    """Translate an fopen mode into an access mode and whether to start at the end."""
    if "r" in mode:
        if "+" in mode:
            return Access.READ_WRITE | Access.UPDATE_EXISTING, False
        return Access.READ, False
    if "w" in mode:
        return (Access.READ_WRITE if "+" in mode else Access.WRITE), False
    if "a" in mode:
        if "+" in mode:
            return Access.READ_WRITE | Access.UPDATE_EXISTING, True
        return Access.WRITE | Access.UPDATE_EXISTING, True
    return Access.READ, False


def rfopen(path: str, mode: str) -> FileStream:
    """Open ``path`` with an fopen mode string; append modes start at the end."""
    access, to_end = parse_mode(mode)
    stream = FileStream.open(path, access, Hint.NONE)
    if to_end:
        stream.seek(0, SeekPosition.END)
    return stream


def rfseek(stream: FileStream, offset: int, origin: int) -> int:
    """Seek using an ``os.SEEK_*`` origin."""
    try:
        position = _ORIGINS[origin]
    except KeyError:
        raise ValueError(f"invalid seek origin: {origin!r}") from None
    return stream.seek(offset, position)


def rfread(stream: FileStream, elem_size: int, elem_count: int) -> bytes:
    """Read up to ``elem_count`` elements of ``elem_size`` bytes.

    The number of whole elements read is ``len(result) // elem_size``.
    """
    if elem_size <= 0:
        raise ValueError("element size must be positive")
    return stream.read(elem_size * elem_count)


def rfwrite(stream: FileStream, data: bytes, elem_size: int, elem_count: int) -> int:
    """Write ``elem_count`` elements of ``elem_size`` bytes from ``data``.

    Returns the number of bytes written.
    """
    total = elem_size * elem_count
    if len(data) < total:
        raise ValueError("data is shorter than elem_size * elem_count")
    return stream.write(data[:total])