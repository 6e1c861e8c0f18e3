"""Bounded string copying and case-insensitive search."""

from __future__ import annotations

import string
from typing import TypeVar

__all__ = ["strlcpy", "strlcat", "strldup", "strcasestr"]

S = TypeVar("S", str, bytes)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def strlcpy(source: S, size: int) -> S:
    """Return ``source`` cut to fit a buffer of ``size`` including its NUL."""
    if size <= 0:
        return source[:0]
    return source[: size - 1]


def strlcat(dest: S, source: S, size: int) -> S:
    """Append ``source`` to ``dest`` within a buffer of ``size``.

    If ``dest`` already fills the buffer it is returned unchanged.
    """
    if len(dest) >= size:
        return dest
    return (dest + source)[: size - 1]


def strldup(text: S, n: int) -> S:
    """Return a new copy of ``text`` fitting a buffer of ``n``."""
    return strlcpy(text, n)


def strcasestr(haystack: str, needle: str) -> str | None:
    """Return the tail of ``haystack`` from the first ASCII case-insensitive
    match of ``needle``, or None."""
    index = haystack.translate(_ASCII_LOWER).find(needle.translate(_ASCII_LOWER))
    if index < 0:
        return None
    return haystack[index:]