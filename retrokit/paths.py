"""Pure string manipulation of file paths, aware of archive ``#`` delimiters."""

from __future__ import annotations

import os

__all__ = [
    "DEFAULT_SLASH",
    "find_last_slash",
    "get_archive_delim",
    "contains_compressed_file",
    "get_extension",
    "remove_extension",
    "is_compressed_file",
    "replace_extension",
    "append_extension",
    "with_trailing_slash",
    "pathname_dir",
    "basename",
    "basename_nocompression",
    "base_noext",
    "base_ext",
    "basedir",
    "basedir_noext",
    "basedir_wrapper",
    "parent_dir_name",
    "parent_dir",
    "is_absolute",
    "short_representation",
    "short_representation_noext",
]

_WINDOWS = os.name == "nt"

DEFAULT_SLASH = "\\" if _WINDOWS else "/"

_ARCHIVE_EXTENSIONS = frozenset({"zip", "apk", "7z"})

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def _is_slash(char: str) -> bool:
    return char == "/" or (_WINDOWS and char == "\\")


def find_last_slash(path: str) -> int | None:
    """Return the index of the last path separator in ``path``, or None."""
    index = path.rfind("/")
    if _WINDOWS:
        index = max(index, path.rfind("\\"))
    return index if index >= 0 else None


def get_archive_delim(path: str) -> int | None:
    """Return the index of the first ``#`` that directly follows an archive
    extension (.zip, .apk, .7z) in the last path component, or None."""
    start = find_last_slash(path)
    if start is None:
        start = 0
    delim = path.find("#", start)
    while delim >= 0:
        distance = delim - start
        if distance > 4:
            tail = _ascii_lower(path[delim - 4 : delim])
            if tail in (".zip", ".apk") or tail[1:] == ".7z":
                return delim
        elif distance > 3:
            if _ascii_lower(path[delim - 3 : delim]) == ".7z":
                return delim
        delim = path.find("#", delim + 1)
    return None


def contains_compressed_file(path: str) -> bool:
    """Tell whether ``path`` points inside an archive."""
    return get_archive_delim(path) is not None


def _basename_start(path: str) -> int:
    delim = get_archive_delim(path)
    if delim is not None:
        return delim + 1
    last = find_last_slash(path)
    if last is not None:
        return last + 1
    return 0


def get_extension(path: str) -> str:
    """Return the extension of the basename without its dot, or ''."""
    if not path:
        return ""
    base = basename(path)
    dot = base.rfind(".")
    return base[dot + 1 :] if dot >= 0 else ""


def remove_extension(path: str) -> str | None:
    """Return ``path`` without the extension of its basename.

    Returns None if the path is empty or has no extension.
    """
    if not path:
        return None
    dot = path.rfind(".", _basename_start(path))
    if dot < 0:
        return None
    return path[:dot]


def is_compressed_file(path: str) -> bool:
    """Tell whether ``path`` names a supported archive by its extension."""
    ext = get_extension(path)
    return bool(ext) and _ascii_lower(ext) in _ARCHIVE_EXTENSIONS


def replace_extension(in_path: str, replace: str) -> str:
    """Replace the basename's extension (from the last dot) with ``replace``.

    Without a dot, ``replace`` is simply appended.
    """
    stripped = remove_extension(in_path)
    return append_extension(in_path if stripped is None else stripped, replace)


def append_extension(in_path: str, replace: str) -> str:
    """Append ``replace`` to ``in_path`` as it is."""
    return in_path + replace


def with_trailing_slash(path: str) -> str:
    """Return directory ``path`` ending in a separator, keeping its slash style."""
    last = find_last_slash(path)
    if last is None:
        return path + DEFAULT_SLASH
    if last != len(path) - 1:
        return path + path[last]
    return path


def pathname_dir(in_dir: str, in_basename: str, replace: str) -> str:
    """Join ``in_dir`` with the basename of ``in_basename`` and ``replace``."""
    return with_trailing_slash(in_dir) + basename(in_basename) + replace


def basename(path: str) -> str:
    """Return the part after an archive delimiter or the last separator."""
    return path[_basename_start(path) :]


def basename_nocompression(path: str) -> str:
    """Return the part after the last separator, ignoring archives."""
    last = find_last_slash(path)
    return path[last + 1 :] if last is not None else path


def base_noext(path: str) -> str:
    """Return the basename of ``path`` without its extension."""
    base = basename(path)
    stripped = remove_extension(base)
    return base if stripped is None else stripped


def base_ext(path: str, ext: str) -> str:
    """Return the basename of ``path`` with its extension replaced by ``ext``."""
    return base_noext(path) + ext


def basedir(path: str) -> str:
    """Return the directory part of ``path``, keeping the trailing separator.

    A path without separators gives the current directory; paths shorter
    than two characters are returned unchanged.
    """
    if len(path) < 2:
        return path
    last = find_last_slash(path)
    if last is not None:
        return path[: last + 1]
    return "." + DEFAULT_SLASH


def basedir_noext(path: str) -> str:
    """Return the base directory of ``path`` with any extension removed."""
    directory = basedir(path)
    stripped = remove_extension(directory)
    return directory if stripped is None else stripped


def basedir_wrapper(path: str, compression: bool = False) -> str:
    """Like :func:`basedir`; with ``compression`` the directory holding an
    archive is returned for a path inside that archive."""
    if len(path) < 2:
        return path
    if compression:
        delim = get_archive_delim(path)
        if delim is not None:
            path = path[:delim]
    last = find_last_slash(path)
    if last is not None:
        return path[: last + 1]
    return "." + DEFAULT_SLASH


def parent_dir_name(path: str) -> str:
    """Return only the name of the parent directory of directory ``path``.

    Raises ValueError if the path has no parent directory name.
    """
    temp = path
    last = find_last_slash(temp)
    if last is not None and last == len(temp) - 1:
        temp = temp[:last]
        last = find_last_slash(temp)
    if last is not None:
        temp = temp[:last]
    index = find_last_slash(temp)
    if index is None or index + 1 >= len(temp):
        raise ValueError(f"no parent directory name in {path!r}")
    return temp[index + 1 :]


def parent_dir(path: str) -> str:
    """Return the parent of directory ``path``, keeping the trailing separator.

    Gives '' when ``path`` is already the root.
    """
    if path and _is_slash(path[-1]):
        was_absolute = is_absolute(path)
        path = path[:-1]
        if was_absolute and find_last_slash(path) is None:
            return ""
    return basedir(path)


def is_absolute(path: str) -> bool:
    """Tell whether ``path`` is absolute."""
    if not path:
        return False
    if path.startswith("/"):
        return True
    if _WINDOWS:
        return path.startswith("\\\\") or path[1:3] in (":/", ":\\")
    return False


def short_representation(path: str) -> str:
    """Return a short display form of ``path``: its basename, extension cut."""
    return replace_extension(basename(path), "")


def short_representation_noext(path: str) -> str:
    """Like :func:`short_representation` with one more extension removed."""
    short = short_representation(path)
    stripped = remove_extension(short)
    return short if stripped is None else stripped