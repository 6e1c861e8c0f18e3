"""File system queries and recursive directory creation."""

from __future__ import annotations

import enum
import os
import stat as _stat

from .paths import parent_dir

__all__ = [
    "StatFlags",
    "stat",
    "is_directory",
    "is_character_special",
    "is_valid",
    "get_size",
    "mkdir",
]


class StatFlags(enum.IntFlag):
    """What a path refers to."""

    NONE = 0
    IS_VALID = 1 << 0
    IS_DIRECTORY = 1 << 1
    IS_CHARACTER_SPECIAL = 1 << 2


def stat(path: str) -> StatFlags:
    """Return the flags describing ``path``; NONE if it does not exist."""
    if not path:
        return StatFlags.NONE
    try:
        info = os.stat(path)
    except (OSError, ValueError):
        return StatFlags.NONE
    flags = StatFlags.IS_VALID
    if _stat.S_ISDIR(info.st_mode):
        flags |= StatFlags.IS_DIRECTORY
    if _stat.S_ISCHR(info.st_mode):
        flags |= StatFlags.IS_CHARACTER_SPECIAL
    return flags


def is_directory(path: str) -> bool:
    """Tell whether ``path`` is a directory."""
    return bool(stat(path) & StatFlags.IS_DIRECTORY)


def is_character_special(path: str) -> bool:
    """Tell whether ``path`` is a character device."""
    return bool(stat(path) & StatFlags.IS_CHARACTER_SPECIAL)


def is_valid(path: str) -> bool:
    """Tell whether ``path`` exists."""
    return bool(stat(path) & StatFlags.IS_VALID)


def get_size(path: str) -> int:
    """Return the size of ``path`` in bytes; raises OSError if it is missing."""
    if not path:
        raise FileNotFoundError("empty path")
    return os.stat(path).st_size


def mkdir(directory: str) -> None:
    """Create ``directory`` and any missing parents.

    An existing directory is not an error. Raises ValueError for an empty
    path and OSError if the directory cannot be created.
    """
    if not directory:
        raise ValueError("empty directory path")
    parent = parent_dir(directory)
    if not parent or parent == directory:
        raise OSError(f"cannot create directory {directory!r}: no parent")
    if not is_directory(parent):
        mkdir(parent)
    try:
        os.mkdir(directory)
    except FileExistsError:
        if not is_directory(directory):
            raise