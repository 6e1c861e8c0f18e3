"""Special path prefixes ('~', ':'), dated file names and slash handling."""

from __future__ import annotations

import os
import sys
import time

from . import rtime
from .paths import DEFAULT_SLASH, basedir_wrapper, is_absolute
from .resolve import relative_to, resolve_relative

__all__ = [
    "application_path",
    "application_dir",
    "home_dir",
    "expand_special",
    "abbreviate_special",
    "abbreviated_or_relative",
    "dated_filename",
    "str_dated_filename",
    "is_accessible_using_standard_io",
    "conform_slashes_to_os",
    "make_slashes_portable",
    "count_slashes",
]

_WINDOWS = os.name == "nt"

_PROC_LINKS = ("exe", "file", "path/a.out")


def _is_slash(char: str) -> bool:
    return char == "/" or (_WINDOWS and char == "\\")


def application_path() -> str:
    """Return the path of the running executable, or '' if it is unknown."""
    if _WINDOWS:
        return sys.executable
    pid = os.getpid()
    for link in _PROC_LINKS:
        try:
            return os.readlink(f"/proc/{pid}/{link}")
        except OSError:
            continue
    return ""


def application_dir() -> str:
    """Return the directory holding the running executable."""
    return basedir_wrapper(application_path())


def home_dir() -> str:
    """Return the user's home directory from $HOME, or ''."""
    return os.environ.get("HOME", "")


def _expand_with(prefix_dir: str, path: str) -> str | None:
    if not prefix_dir:
        return None
    if not _is_slash(prefix_dir[-1]):
        prefix_dir += DEFAULT_SLASH
    return prefix_dir + path[2:]


def expand_special(path: str) -> str:
    """Expand a leading '~' to the home directory and ':' to the
    application directory; other paths are returned unchanged."""
    expanded = None
    if path.startswith("~"):
        expanded = _expand_with(home_dir(), path)
    elif path.startswith(":"):
        expanded = _expand_with(application_dir(), path)
    return path if expanded is None else expanded


def abbreviate_special(path: str) -> str:
    """Replace a leading application directory with ':' or a leading home
    directory with '~'; at most one abbreviation is applied."""
    candidates = ((application_dir(), ":"), (home_dir(), "~"))
    for candidate, notation in candidates:
        if candidate and path.startswith(candidate):
            rest = path[len(candidate):]
            if not (rest and _is_slash(rest[0])):
                notation += DEFAULT_SLASH
            return notation + rest
    return path


def conform_slashes_to_os(path: str) -> str:
    """Turn every '/' and '\\' into the platform's separator."""
    return path.replace("/", DEFAULT_SLASH).replace("\\", DEFAULT_SLASH)


def make_slashes_portable(path: str) -> str:
    """Turn every '\\' into '/'."""
    return path.replace("\\", "/")


def count_slashes(path: str) -> int:
    """Count the path separators in ``path``."""
    return sum(1 for char in path if _is_slash(char))


def abbreviated_or_relative(refpath: str, path: str) -> str:
    """Return ``path`` either relative to ``refpath`` or abbreviated with
    '~'/':', whichever has fewer separators; ties go to the relative form."""
    path_conformed = conform_slashes_to_os(path)
    ref_conformed = conform_slashes_to_os(refpath)

    expanded = expand_special(path_conformed)
    if is_absolute(expanded):
        absolute = expanded
    else:
        absolute = resolve_relative(ref_conformed, path_conformed)
    absolute = conform_slashes_to_os(absolute)

    relative = relative_to(absolute, ref_conformed)
    abbreviated = abbreviate_special(absolute)

    if count_slashes(relative) <= count_slashes(abbreviated):
        return relative
    return abbreviated


def dated_filename(ext: str) -> str:
    """Return 'RetroArch-MMDD-HHMMSS' in local time followed by ``ext``."""
    stamp = time.strftime("RetroArch-%m%d-%H%M%S", rtime.localtime())
    return stamp + ext


def str_dated_filename(in_str: str, ext: str) -> str:
    """Return ``in_str`` followed by '-YYMMDD-HHMMSS' and, if given, '.' + ``ext``."""
    now = rtime.localtime()
    if not ext:
        return in_str + time.strftime("-%y%m%d-%H%M%S", now)
    return in_str + time.strftime("-%y%m%d-%H%M%S.", now) + ext


def is_accessible_using_standard_io(path: str) -> bool:
    """Tell whether ``path`` can be opened with ordinary file I/O."""
    return True