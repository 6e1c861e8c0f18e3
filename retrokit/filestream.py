"""Byte-oriented file streams with sticky end-of-file and error flags."""

from __future__ import annotations

import enum
import os
import re
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO

__all__ = [
    "Access",
    "Hint",
    "SeekPosition",
    "FileStream",
    "exists",
    "delete",
    "rename",
    "read_file",
    "write_file",
]

_SCAN_CHUNK = 4095
_WHITESPACE = b" \t\n\v\f\r"


class Access(enum.IntFlag):
    """How a file is opened."""

    READ = 1 << 0
    WRITE = 1 << 1
    READ_WRITE = READ | WRITE
    UPDATE_EXISTING = 1 << 2


class Hint(enum.IntFlag):
    """Access hints; accepted for compatibility, they change nothing."""

    NONE = 0
    FREQUENT_ACCESS = 1 << 0


class SeekPosition(enum.IntEnum):
    """Reference point of a seek."""

    START = 0
    CURRENT = 1
    END = 2


_WHENCE = {
    SeekPosition.START: os.SEEK_SET,
    SeekPosition.CURRENT: os.SEEK_CUR,
    SeekPosition.END: os.SEEK_END,
}


def _python_mode(mode: Access) -> str:
    mode = Access(mode)
    update = bool(mode & Access.UPDATE_EXISTING)
    readable = bool(mode & Access.READ)
    writable = bool(mode & Access.WRITE)
    if writable:
        if update:
            return "r+b"
        return "w+b" if readable else "wb"
    if readable:
        return "rb"
    raise ValueError(f"invalid access mode: {mode!r}")


_INT_SPECS = {
    ord("d"): (re.compile(rb"[+-]?[0-9]+"), 10),
    ord("u"): (re.compile(rb"[+-]?[0-9]+"), 10),
    ord("o"): (re.compile(rb"[+-]?[0-7]+"), 8),
    ord("x"): (re.compile(rb"[+-]?(?:0[xX])?[0-9a-fA-F]+"), 16),
    ord("X"): (re.compile(rb"[+-]?(?:0[xX])?[0-9a-fA-F]+"), 16),
    ord("p"): (re.compile(rb"[+-]?(?:0[xX])?[0-9a-fA-F]+"), 16),
}
_AUTO_INT = re.compile(rb"[+-]?(?:0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_FLOAT = re.compile(
    rb"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_STRING = re.compile(rb"\S+")
_FLOAT_SPECS = frozenset(b"fFeEgGaA")
_LENGTHS = frozenset(b"jztL")


def _parse_auto_int(token: bytes) -> int:
    sign = -1 if token[:1] == b"-" else 1
    digits = token.lstrip(b"+-")
    if digits[:2].lower() == b"0x":
        return sign * int(digits[2:], 16)
    if digits.startswith(b"0"):
        return sign * int(digits, 8)
    return sign * int(digits, 10)


def _scanset(spec: bytes) -> re.Pattern[bytes]:
    negate = spec.startswith(b"^")
    if negate:
        spec = spec[1:]
    members: set[int] = set()
    pos = 0
    while pos < len(spec):
        if pos + 2 < len(spec) and spec[pos + 1] == ord("-"):
            members.update(range(spec[pos], spec[pos + 2] + 1))
            pos += 3
        else:
            members.add(spec[pos])
            pos += 1
    body = b"".join(re.escape(bytes([b])) for b in sorted(members))
    return re.compile(b"[" + (b"^" if negate else b"") + body + b"]+")


class FileStream:
    """An open file tracking end-of-file and error conditions."""

    def __init__(self, file: BinaryIO, path: str) -> None:
        self._file = file
        self._path = path
        self._error = False
        self._eof = False

    @classmethod
    def open(cls, path: str, mode: Access = Access.READ, hints: Hint = Hint.NONE) -> FileStream:
        """Open ``path``; raises OSError if it cannot be opened."""
        return cls(open(path, _python_mode(mode)), path)

    def __enter__(self) -> FileStream:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @contextmanager
    def _guard(self) -> Iterator[None]:
        try:
            yield
        except OSError:
            self._error = True
            raise

    def size(self) -> int:
        """Return the size of the file in bytes."""
        with self._guard():
            here = self._file.tell()
            end = self._file.seek(0, os.SEEK_END)
            self._file.seek(here)
            return end

    def truncate(self, length: int) -> int:
        """Cut or extend the file to ``length`` bytes."""
        with self._guard():
            return self._file.truncate(length)

    def seek(self, offset: int, position: SeekPosition = SeekPosition.START) -> int:
        """Move to ``offset`` from ``position``; clears the end-of-file flag."""
        try:
            whence = _WHENCE[SeekPosition(position)]
        except ValueError:
            self._error = True
            raise
        with self._guard():
            result = self._file.seek(offset, whence)
        self._eof = False
        return result

    def tell(self) -> int:
        """Return the current position."""
        with self._guard():
            return self._file.tell()

    def rewind(self) -> None:
        """Go back to the start and clear both flags."""
        self.seek(0, SeekPosition.START)
        self._error = False
        self._eof = False

    def read(self, length: int) -> bytes:
        """Read up to ``length`` bytes; a short read sets end-of-file."""
        with self._guard():
            data = self._file.read(length)
        if len(data) < length:
            self._eof = True
        return data

    def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes written."""
        with self._guard():
            return self._file.write(data)

    def getc(self) -> int | None:
        """Return the next byte, or None at end of file."""
        data = self.read(1)
        return data[0] if data else None

    def gets(self, limit: int) -> bytes | None:
        """Read at most ``limit - 1`` bytes, up to and including a newline.

        Returns None if end of file is hit before anything was read.
        """
        out = bytearray()
        hit_eof = False
        for _ in range(limit - 1):
            byte = self.getc()
            if byte is None:
                hit_eof = True
                break
            out.append(byte)
            if byte == ord("\n"):
                break
        if not out and hit_eof:
            return None
        return bytes(out)

    def getline(self) -> bytes:
        """Read up to a newline or end of file; the newline is dropped."""
        out = bytearray()
        byte = self.getc()
        while byte is not None and byte != ord("\n"):
            out.append(byte)
            byte = self.getc()
        return bytes(out)

    def putc(self, char: int) -> int:
        """Write one byte (``char`` modulo 256) and return it."""
        value = char & 0xFF
        self.write(bytes([value]))
        return value

    def printf(self, fmt: str, *args: object) -> int:
        """Write ``fmt % args`` encoded as UTF-8; returns the bytes written."""
        data = (fmt % args if args else fmt).encode("utf-8")
        if not data:
            return 0
        return self.write(data)

    def scanf(self, fmt: str) -> list[int | float | bytes]:
        """Parse values from the stream as C ``scanf`` would.

        Returns the converted values (suppressed ones left out); stops at the
        first mismatch and leaves the stream just after what was consumed.
        Raises EOFError when input runs out before a conversion.
        """
        start = self.tell()
        buf = self.read(_SCAN_CHUNK)
        if not buf:
            raise EOFError("end of file")
        spec = fmt.encode("utf-8")
        values: list[int | float | bytes] = []
        pos = 0
        i = 0
        while i < len(spec):
            ch = spec[i]
            if ch == ord("%"):
                i += 1
                if spec[i : i + 1] == b"%":
                    i += 1
                    while pos < len(buf) and buf[pos] in _WHITESPACE:
                        pos += 1
                    if buf[pos : pos + 1] != b"%":
                        break
                    pos += 1
                    continue
                suppress = spec[i : i + 1] == b"*"
                if suppress:
                    i += 1
                width_start = i
                while i < len(spec) and spec[i : i + 1].isdigit():
                    i += 1
                width = int(spec[width_start:i]) if i > width_start else None
                if spec[i : i + 1] in (b"h", b"l"):
                    i += 2 if spec[i + 1 : i + 2] == spec[i : i + 1] else 1
                elif i < len(spec) and spec[i] in _LENGTHS:
                    i += 1
                if i >= len(spec):
                    raise ValueError(f"incomplete conversion in {fmt!r}")
                conv = spec[i]
                pattern: re.Pattern[bytes] | None = None
                if conv == ord("["):
                    close = spec.find(b"]", i)
                    if close < 0:
                        raise ValueError(f"unterminated scan set in {fmt!r}")
                    pattern = _scanset(spec[i + 1 : close])
                    i = close + 1
                else:
                    i += 1
                if conv not in (ord("c"), ord("[")):
                    while pos < len(buf) and buf[pos] in _WHITESPACE:
                        pos += 1
                if pos >= len(buf):
                    raise EOFError("end of input before conversion")
                window = buf[pos:] if width is None else buf[pos : pos + width]
                value: int | float | bytes
                if conv == ord("c"):
                    token = buf[pos : pos + (width or 1)]
                    value = token
                else:
                    if conv in _INT_SPECS:
                        regex, base = _INT_SPECS[conv]
                    elif conv == ord("i"):
                        regex, base = _AUTO_INT, 0
                    elif conv in _FLOAT_SPECS:
                        regex, base = _FLOAT, -1
                    elif conv == ord("s"):
                        regex, base = _STRING, -2
                    elif pattern is not None:
                        regex, base = pattern, -2
                    else:
                        raise ValueError(f"unsupported conversion %{chr(conv)}")
                    match = regex.match(window)
                    if not match:
                        break
                    token = match.group(0)
                    if base == 0:
                        value = _parse_auto_int(token)
                    elif base > 0:
                        value = int(token, base)
                    elif base == -1:
                        value = float(token)
                    else:
                        value = token
                if not suppress:
                    values.append(value)
                pos += len(token)
            elif ch in _WHITESPACE:
                while pos < len(buf) and buf[pos] in _WHITESPACE:
                    pos += 1
                i += 1
            else:
                if pos >= len(buf) or buf[pos] != ch:
                    break
                pos += 1
                i += 1
        self.seek(start + pos, SeekPosition.START)
        return values

    def flush(self) -> None:
        """Push buffered writes to the operating system."""
        with self._guard():
            self._file.flush()

    def close(self) -> None:
        """Close the stream; closing twice is harmless."""
        self._file.close()

    def eof(self) -> bool:
        """Tell whether a read has come up short since the last seek."""
        return self._eof

    def error(self) -> bool:
        """Tell whether an operation has failed since the last rewind."""
        return self._error

    def path(self) -> str:
        """Return the path the stream was opened with."""
        return self._path


def exists(path: str) -> bool:
    """Tell whether ``path`` can be opened for reading."""
    if not path:
        return False
    try:
        with FileStream.open(path, Access.READ):
            return True
    except OSError:
        return False


def delete(path: str) -> None:
    """Remove the file at ``path``."""
    os.remove(path)


def rename(old_path: str, new_path: str) -> None:
    """Rename ``old_path`` to ``new_path``."""
    os.rename(old_path, new_path)


def read_file(path: str) -> bytes:
    """Return the whole contents of ``path``."""
    with FileStream.open(path, Access.READ) as stream:
        return stream.read(stream.size())


def write_file(path: str, data: bytes) -> None:
    """Replace the contents of ``path`` with ``data``."""
    with FileStream.open(path, Access.WRITE) as stream:
        written = stream.write(data)
    if written != len(data):
        raise OSError(f"short write to {path!r}")