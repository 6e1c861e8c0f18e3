import pytest

from retrokit import text


def test_strlcpy_truncates():
    assert text.strlcpy("hello", 3) == "hello"[:2]


def test_strlcpy_fits():
    assert text.strlcpy("hello", 100) == "hello"


@pytest.mark.parametrize("size", [0, -1])
def test_strlcpy_zero_size(size):
    assert text.strlcpy("hello", size) == ""


def test_strlcpy_bytes():
    assert text.strlcpy(b"hello", 4) == b"hello"[:3]


def test_strlcat_appends():
    assert text.strlcat("ab", "cd", 10) == "ab" + "cd"


def test_strlcat_truncates():
    result = text.strlcat("ab", "cdef", 4)
    assert len(result) == 3
    assert ("ab" + "cdef").startswith(result)


def test_strlcat_full_dest_unchanged():
    assert text.strlcat("abcd", "ef", 3) == "abcd"


def test_strldup():
    result = text.strldup("abcdef", 4)
    assert len(result) == 3
    assert "abcdef".startswith(result)


def test_strcasestr_match():
    assert text.strcasestr("Hello World", "WORLD") == "World"


def test_strcasestr_missing():
    assert text.strcasestr("Hello World", "planet") is None


def test_strcasestr_empty_needle():
    assert text.strcasestr("Hello", "") == "Hello"