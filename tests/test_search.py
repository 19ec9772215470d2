import pytest

from cstrsearch.search import (
    index,
    rindex,
    strcasestr,
    strchr,
    strchrnul,
    strcspn,
    strpbrk,
    strrchr,
    strspn,
    strstr,
)


def test_strchr_and_strchrnul():
    assert strchr(b"hello\0", ord("l")) == 2
    assert strchr(b"hello\0", ord("w")) is None
    assert strchr(b"hello\0", 0) == 5
    assert strchrnul(b"hello\0", ord("l")) == 2
    assert strchrnul(b"hello\0", ord("x")) == 5


def test_strchr_stops_at_terminator():
    assert strchr(b"hello\0world", ord("l")) == 2
    assert strchr(b"hello\0world", ord("w")) is None


def test_strchr_nul_without_terminator():
    assert strchr(b"abc", 0) is None


def test_strchrnul_without_terminator():
    assert strchrnul(b"abc", ord("z")) == 3
    assert strchrnul(b"abc\0z", ord("z")) == 3


def test_strrchr_and_aliases():
    assert strrchr(b"hello\0", ord("l")) == 3
    assert strrchr(b"hello\0", ord("x")) is None
    assert index(b"hello\0", ord("h")) == 0
    assert rindex(b"hello\0", ord("h")) == 0


def test_strrchr_nul_and_after_terminator():
    assert strrchr(b"ab\0cd\0", 0) == 2
    assert strrchr(b"abc", 0) is None
    assert strrchr(b"al\0l", ord("l")) == 1


def test_strstr_and_strcasestr():
    assert strstr(b"hello world\0", b"wor\0") == 6
    assert strstr(b"hello world\0", b"xyz\0") is None
    assert strstr(b"hello\0", b"\0") == 0
    assert strcasestr(b"Hello\0", b"hEl\0") == 0


def test_strstr_needle_longer_or_after_nul():
    assert strstr(b"ab\0", b"abc\0") is None
    assert strstr(b"ab\0cd", b"cd") is None


def test_strcasestr_middle_and_miss():
    assert strcasestr(b"xxABCxx\0", b"abc\0") == 2
    assert strcasestr(b"xxABCxx\0", b"abd\0") is None


def test_strspn_strcspn_strpbrk():
    assert strspn(b"hello\0", b"ehlo\0") == 5
    assert strspn(b"hello\0", b"xyz\0") == 0
    assert strcspn(b"hello\0", b"lo\0") == 2
    assert strcspn(b"hello\0", b"xyz\0") == 5
    assert strpbrk(b"hello\0", b"xyz\0") is None
    assert strpbrk(b"hello\0", b"lo\0") == 2


def test_empty_sets():
    assert strspn(b"hello\0", b"\0") == 0
    assert strcspn(b"hello\0", b"\0") == 5
    assert strpbrk(b"hello\0", b"") is None


def test_large_sets_and_long_strings():
    s = b"abc" * 40 + b"x" + b"\0"
    assert strspn(s, b"abc\0") == 120
    assert strcspn(s, b"x\0") == 120
    assert strpbrk(s, b"qrstuvwx\0") == 120
    assert strspn(s, b"abcdefgh\0") == 120


def test_bytearray_input():
    assert strchr(bytearray(b"hey\0"), ord("y")) == 2


@pytest.mark.parametrize("bad", [-1, 256])
def test_byte_out_of_range(bad):
    with pytest.raises(ValueError):
        strchr(b"abc\0", bad)


def test_byte_wrong_type():
    with pytest.raises(TypeError):
        strchr(b"abc\0", "a")