"""UTF-8, UTF-16 and UTF-32 conversion helpers working on raw code units."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator, Sequence

from .text import strlcpy

__all__ = [
    "utf8_conv_utf32",
    "utf16_conv_utf8",
    "utf8cpy",
    "utf8skip",
    "utf8len",
    "utf8_walk",
    "utf16_to_char_string",
    "utf8_to_local_string",
    "local_to_utf8_string",
    "utf8_to_utf16",
    "utf16_to_utf8",
]


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _until_nul(data: bytes) -> bytes:
    end = data.find(b"\0")
    return data if end < 0 else data[:end]


def _is_continuation(byte: int) -> bool:
    return byte & 0xC0 == 0x80


def _leading_ones(byte: int) -> int:
    ones = 0
    while byte & 0x80:
        ones += 1
        byte = (byte << 1) & 0xFF
    return ones


def utf8_conv_utf32(data, max_chars=None) -> list[int]:
    """Decode UTF-8 bytes into code points, assuming synchronised input.

    Decoding stops silently at a stray continuation byte, an invalid lead
    byte, a sequence that runs past the end, or after ``max_chars`` values.
    """
    data = _as_bytes(data)
    out: list[int] = []
    pos = 0
    while pos < len(data) and (max_chars is None or len(out) < max_chars):
        first = data[pos]
        ones = _leading_ones(first)
        if ones > 6 or ones == 1:
            break
        extra = ones - 1 if ones else 0
        if pos + 1 + extra > len(data):
            break
        value = (first & ((1 << (7 - ones)) - 1)) << (6 * extra)
        shift = (extra - 1) * 6
        for byte in data[pos + 1 : pos + 1 + extra]:
            value |= (byte & 0x3F) << shift
            shift -= 6
        out.append(value & 0xFFFFFFFF)
        pos += 1 + extra
    return out


def _utf16_code_points(units: Iterable[int]) -> Iterator[int]:
    it = iter(units)
    for unit in it:
        if not 0 <= unit <= 0xFFFF:
            raise ValueError(f"not a UTF-16 code unit: {unit!r}")
        if 0xD800 <= unit < 0xE000:
            if unit >= 0xDC00:
                raise ValueError("unpaired low surrogate")
            low = next(it, None)
            if low is None:
                raise ValueError("high surrogate at end of input")
            if not 0xDC00 <= low < 0xE000:
                raise ValueError("high surrogate not followed by low surrogate")
            unit = (((unit - 0xD800) << 10) | (low - 0xDC00)) + 0x10000
        yield unit


def utf16_conv_utf8(units: Iterable[int]) -> bytes:
    """Encode a sequence of UTF-16 code units as UTF-8.

    Raises ValueError on a malformed surrogate pair.
    """
    return "".join(chr(cp) for cp in _utf16_code_points(units)).encode("utf-8")


def utf8cpy(data, chars: int, size: int) -> bytes:
    """Copy up to ``chars`` characters of UTF-8, in at most ``size - 1`` bytes.

    Never splits a character; stops at a NUL byte.
    """
    if size < 1:
        raise ValueError("size must be at least 1")
    data = _until_nul(_as_bytes(data))
    pos = 0
    while pos < len(data) and chars > 0:
        chars -= 1
        pos += 1
        while pos < len(data) and _is_continuation(data[pos]):
            pos += 1
    if pos > size - 1:
        pos = size - 1
        while pos > 0 and _is_continuation(data[pos]):
            pos -= 1
    return data[:pos]


def utf8skip(data, chars: int) -> bytes:
    """Return what follows the first ``chars`` UTF-8 characters of ``data``."""
    data = _as_bytes(data)
    pos = 0
    for _ in range(chars):
        if pos >= len(data):
            break
        pos += 1
        while pos < len(data) and _is_continuation(data[pos]):
            pos += 1
    return data[pos:]


def utf8len(data) -> int:
    """Count the UTF-8 characters before the first NUL byte."""
    if data is None:
        return 0
    return sum(1 for byte in _until_nul(_as_bytes(data)) if not _is_continuation(byte))


def utf8_walk(data) -> Iterator[int]:
    """Yield the code points of UTF-8 ``data`` without validating them.

    Raises ValueError if a lead byte announces more bytes than remain.
    """
    data = _as_bytes(data)
    pos = 0
    while pos < len(data):
        first = data[pos]
        pos += 1
        if first < 0x80:
            yield first
            continue
        needed = 1 + (first >= 0xE0) + (first >= 0xF0)
        if pos + needed > len(data):
            raise ValueError("truncated UTF-8 sequence")
        value = 0
        for byte in data[pos : pos + needed]:
            value = (value << 6) | (byte & 0x3F)
        pos += needed
        if first >= 0xF0:
            yield value | (first & 7) << 18
        elif first >= 0xE0:
            yield value | (first & 15) << 12
        else:
            yield value | (first & 31) << 6


def utf16_to_char_string(units: Iterable[int], size: int) -> bytes:
    """Convert NUL-terminated UTF-16 to UTF-8 bytes fitting a ``size`` buffer."""
    terminated: list[int] = []
    for unit in units:
        if unit == 0:
            break
        terminated.append(unit)
    return strlcpy(utf16_conv_utf8(terminated), size)


def utf8_to_local_string(text: str | None) -> str | None:
    """Convert UTF-8 text to the local encoding; None for empty input."""
    return text if text else None


def local_to_utf8_string(text: str | None) -> str | None:
    """Convert locally encoded text to UTF-8; None for empty input."""
    return text if text else None


def utf8_to_utf16(text: str | None) -> list[int] | None:
    """Return the UTF-16 code units of ``text``, or None if it is empty."""
    if not text:
        return None
    raw = text.encode("utf-16-le")
    return list(struct.unpack(f"<{len(raw) // 2}H", raw))


def utf16_to_utf8(units: Sequence[int] | None) -> str | None:
    """Decode NUL-terminated UTF-16 code units; None if empty.

    Raises ValueError on malformed input.
    """
    if not units or units[0] == 0:
        return None
    terminated: list[int] = []
    for unit in units:
        if unit == 0:
            break
        terminated.append(unit)
    return "".join(chr(cp) for cp in _utf16_code_points(terminated))