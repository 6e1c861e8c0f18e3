import os

import pytest

from retrokit import resolve
from retrokit.paths import DEFAULT_SLASH


def test_realpath_removes_dotdot():
    assert resolve.resolve_realpath("/a/b/../c", False) == "/a/c"


def test_realpath_removes_dot_and_double_slashes():
    assert resolve.resolve_realpath("/a/./b//c", False) == "/a/b/c"


def test_realpath_keeps_leading_slashes():
    assert resolve.resolve_realpath("//a", False) == "//a"


@pytest.mark.parametrize("path", ["/..", "//..", "/a/../.."])
def test_realpath_above_root_raises(path):
    with pytest.raises(ValueError):
        resolve.resolve_realpath(path, False)


def test_realpath_rebases_relative_on_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cwd = os.getcwd()
    assert resolve.resolve_realpath("x/y", False) == cwd + "/x/y"


def test_realpath_empty_gives_cwd_with_slash(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert resolve.resolve_realpath("", False) == os.getcwd() + "/"


def test_realpath_is_idempotent():
    once = resolve.resolve_realpath("/x/./y/../z//w", False)
    assert resolve.resolve_realpath(once, False) == once


def test_realpath_follows_symlinks(tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("data")
    assert resolve.resolve_realpath(str(target), True) == os.path.realpath(target)


def test_realpath_missing_file_with_symlinks_raises(tmp_path):
    with pytest.raises(OSError):
        resolve.resolve_realpath(str(tmp_path / "missing"), True)


def test_relative_to_documented_example():
    assert resolve.relative_to("/a/b/e/f.cg", "/a/b/c/d/") == "../../e/f.cg"


def test_relative_to_same_directory():
    assert resolve.relative_to("/a/b/f.cg", "/a/b/") == "f.cg"


def test_relative_to_round_trip():
    base = "/root/one/two/"
    path = "/root/three/file.bin"
    rel = resolve.relative_to(path, base)
    assert resolve.resolve_realpath(base + rel, False) == path


def test_resolve_relative_documented_example():
    assert (
        resolve.resolve_relative("/foo/bar/baz.a", "foobar.cg")
        == "/foo/bar/foobar.cg"
    )


def test_resolve_relative_absolute_unchanged():
    assert resolve.resolve_relative("/foo/bar/baz.a", "/x/y.cg") == "/x/y.cg"


def test_resolve_relative_normalises_dotdot():
    assert resolve.resolve_relative("/foo/bar/baz.a", "../q.cg") == "/foo/q.cg"


def test_join_adds_separator():
    assert resolve.join("dir", "file") == "dir" + DEFAULT_SLASH + "file"


def test_join_no_double_separator():
    joined = resolve.join("dir" + DEFAULT_SLASH, "file")
    assert joined == "dir" + DEFAULT_SLASH + "file"


def test_join_empty_directory():
    assert resolve.join("", "file") == "file"


def test_join_special_ext():
    result = resolve.join_special_ext("a", "b", "c", ".d")
    assert result == DEFAULT_SLASH.join(["a", "b", "c"]) + ".d"


def test_join_concat_noext():
    assert resolve.join_concat_noext("a", "b", "c") == "abc"


def test_join_concat():
    assert resolve.join_concat("a", "b", ".c") == resolve.join("a", "b") + ".c"


def test_join_noext_strips_extension():
    assert resolve.join_noext("dir", "file.txt") == resolve.join("dir", "file")


def test_join_noext_without_extension():
    assert resolve.join_noext("dir", "file") == resolve.join("dir", "file")


def test_join_delim():
    assert resolve.join_delim("a", "b", "#") == "a#b"


def test_join_delim_without_path():
    assert resolve.join_delim("a", None, "#") == "a#"


def test_join_delim_concat():
    assert resolve.join_delim_concat("a", "b", "#", "c") == "a#bc"