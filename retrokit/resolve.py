"""Resolving, relativising and joining of file paths."""

from __future__ import annotations

import os

from .paths import (
    DEFAULT_SLASH,
    basedir,
    is_absolute,
    remove_extension,
    with_trailing_slash,
)

__all__ = [
    "resolve_realpath",
    "relative_to",
    "resolve_relative",
    "join",
    "join_special_ext",
    "join_concat_noext",
    "join_concat",
    "join_noext",
    "join_delim",
    "join_delim_concat",
]

_WINDOWS = os.name == "nt"


def _normalise(path: str) -> str:
    if not is_absolute(path):
        out = os.getcwd()
        if not out.endswith("/"):
            out += "/"
        if not path:
            return out
        pos = 0
    else:
        pos = len(path) - len(path.lstrip("/"))
        out = path[:pos]

    end = len(path)
    while True:
        nxt = path.find("/", pos)
        if nxt < 0:
            nxt = end
        segment = path[pos:nxt]
        if segment == "..":
            pos += 3
            if len(out) == 1 or out[-2] == "/":
                raise ValueError(f"path climbs above the root: {path!r}")
            cut = out.rfind("/", 0, len(out) - 1)
            out = out[: cut + 1]
        elif segment == ".":
            pos += 2
        elif segment == "":
            pos += 1
        else:
            out += path[pos : nxt + 1]
            pos = nxt + 1
        if nxt >= end:
            break
    return out


def resolve_realpath(path: str, resolve_symlinks: bool = False) -> str:
    """Resolve '.', '..' and repeated slashes; relative paths are rebased on
    the working directory.

    With ``resolve_symlinks`` the path must exist and symlinks are followed
    (OSError otherwise). Raises ValueError for a '..' above the root.
    """
    if _WINDOWS:
        return os.path.abspath(path)
    if resolve_symlinks:
        return os.path.realpath(path, strict=True)
    return _normalise(path)


def relative_to(path: str, base: str) -> str:
    """Express absolute ``path`` relative to the directory ``base``.

    ``base`` is expected to end with a separator; neither path may hold
    '.' or '..' segments.
    """
    if (
        _WINDOWS
        and len(path) >= 2
        and len(base) >= 2
        and path[1] == ":"
        and base[1] == ":"
        and path[0] != base[0]
    ):
        return path

    common = 0
    cut = 0
    for a, b in zip(path, base):
        if a != b:
            break
        common += 1
        if a == DEFAULT_SLASH:
            cut = common

    ups = base[common:].count(DEFAULT_SLASH)
    return (".." + DEFAULT_SLASH) * ups + path[cut:]


def resolve_relative(refpath: str, path: str) -> str:
    """Join the base directory of ``refpath`` with ``path`` and normalise it.

    An absolute ``path`` is returned as it is.
    """
    if is_absolute(path):
        return path
    joined = basedir(refpath) + path
    try:
        return resolve_realpath(joined, False)
    except ValueError:
        return joined


def join(directory: str, path: str) -> str:
    """Join ``directory`` and ``path`` with exactly one separator between."""
    out = with_trailing_slash(directory) if directory else directory
    return out + path


def join_special_ext(directory: str, path: str, last: str, ext: str) -> str:
    """Join ``directory`` and ``path`` as a directory, then add ``last`` and ``ext``."""
    out = join(directory, path)
    if out:
        out = with_trailing_slash(out)
    return out + last + ext


def join_concat_noext(directory: str, path: str, concat: str) -> str:
    """Concatenate the three parts with no separator added."""
    return directory + path + concat


def join_concat(directory: str, path: str, concat: str) -> str:
    """Join ``directory`` and ``path``, then append ``concat``."""
    return join(directory, path) + concat


def join_noext(directory: str, path: str) -> str:
    """Join ``directory`` and ``path`` and drop the extension of the result."""
    joined = join(directory, path)
    stripped = remove_extension(joined)
    return joined if stripped is None else stripped


def join_delim(directory: str, path: str | None, delim: str) -> str:
    """Join ``directory`` and ``path`` with the single character ``delim``."""
    return directory + delim + (path or "")


def join_delim_concat(
    directory: str, path: str | None, delim: str, concat: str
) -> str:
    """Like :func:`join_delim`, then append ``concat``."""
    return join_delim(directory, path, delim) + concat