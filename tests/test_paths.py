import pytest

from retrokit import paths


def test_replace_extension_documented_example():
    assert paths.replace_extension("/foo/bar/baz/boo.c", ".asm") == "/foo/bar/baz/boo.asm"


def test_replace_extension_with_empty():
    assert paths.replace_extension("/foo/bar/baz/boo.c", "") == "/foo/bar/baz/boo"


def test_replace_extension_without_dot_concatenates():
    assert paths.replace_extension("/foo/bar.d/baz", ".asm") == "/foo/bar.d/baz" + ".asm"


def test_append_extension_concatenates():
    assert paths.append_extension("/a/b.c", ".d") == "/a/b.c" + ".d"


def test_pathname_dir_documented_example():
    assert (
        paths.pathname_dir("/tmp/some_dir", "/some_content/foo.c", ".asm")
        == "/tmp/some_dir/foo.c.asm"
    )


def test_find_last_slash():
    path = "/a/bb/c"
    assert paths.find_last_slash(path) == path.rindex("/")
    assert paths.find_last_slash("noslash") is None


@pytest.mark.parametrize(
    "path",
    ["/games/pack.zip#rom.bin", "/games/PACK.ZIP#rom.bin", "x.7z#y", "/d/a.apk#z#w"],
)
def test_archive_delim_found(path):
    assert paths.get_archive_delim(path) == path.index("#")
    assert paths.contains_compressed_file(path) is True


@pytest.mark.parametrize("path", ["a/b#c.zip", "/dir.zip#x/file", ".7z#a", "plain"])
def test_archive_delim_absent(path):
    assert paths.get_archive_delim(path) is None
    assert paths.contains_compressed_file(path) is False


def test_get_extension():
    assert paths.get_extension("/a/b/file.tar.gz") == "gz"
    assert paths.get_extension("/a/dir.d/file") == ""
    assert paths.get_extension("") == ""


def test_remove_extension():
    assert paths.remove_extension("/a/file.txt") == "/a/file"
    assert paths.remove_extension("/a/b.c/file") is None
    assert paths.remove_extension("") is None


@pytest.mark.parametrize(
    "path,expected",
    [("a.zip", True), ("b.APK", True), ("c.7z", True), ("d.rar", False), ("e", False)],
)
def test_is_compressed_file(path, expected):
    assert paths.is_compressed_file(path) is expected


def test_with_trailing_slash():
    assert paths.with_trailing_slash("/a/b") == "/a/b/"
    assert paths.with_trailing_slash("/a/b/") == "/a/b/"
    assert paths.with_trailing_slash("name") == "name" + paths.DEFAULT_SLASH


def test_base_noext_and_ext():
    assert paths.base_noext("/a/b/game.img") == "game"
    assert paths.base_ext("/a/b/game.img", ".srm") == paths.base_noext("/a/b/game.img") + ".srm"


def test_basedir():
    assert paths.basedir("/a/b/c.txt") == "/a/b/"
    assert paths.basedir("file.txt") == "." + paths.DEFAULT_SLASH
    assert paths.basedir("a") == "a"


def test_basedir_noext_keeps_directory():
    assert paths.basedir_noext("/a/b/c.txt") == paths.basedir("/a/b/c.txt")


def test_parent_dir_name():
    assert paths.parent_dir_name("/a/b/c/") == "b"
    assert paths.parent_dir_name("/a/b/c") == "b"


@pytest.mark.parametrize("path", ["file", "/a", ""])
def test_parent_dir_name_fails(path):
    with pytest.raises(ValueError):
        paths.parent_dir_name(path)


def test_parent_dir():
    assert paths.parent_dir("/a/b/") == "/a/"
    assert paths.parent_dir("/") == ""


def test_is_absolute():
    assert paths.is_absolute("/usr") is True
    assert paths.is_absolute("usr/bin") is False
    assert paths.is_absolute("") is False


def test_short_representation():
    assert paths.short_representation("/path/to/game.img") == "game"
    assert paths.short_representation_noext("/p/game.tar.gz") == "game"


def test_short_representation_matches_base_noext_for_plain_paths():
    path = "/some/where/title.bin"
    assert paths.short_representation(path) == paths.base_noext(path)