import pytest

from sigtalk.search import (
    strchr,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


def _text(buf):
    return bytes(buf[: buf.index(0)])


def test_strlen_stops_at_nul():
    assert strlen("Hello, world!") == len("Hello, world!")
    assert strlen("abc\0def") == strlen("abc")
    assert strlen(b"abc\0def") == strlen(b"abc")
    assert strlen("") == 0


def test_strchr_finds_first():
    assert strchr("Hello, World!", "o") == "Hello, World!".index("o")
    assert strchr("Hello, World!", ord("o")) == "Hello, World!".index("o")
    assert strchr(b"Hello, World!", b"o") == b"Hello, World!".index(b"o")


def test_strchr_missing_and_terminator():
    assert strchr("Hello", "z") is None
    assert strchr("Hello", "\0") == strlen("Hello")
    assert strchr("ab\0cd", "c") is None


def test_strchr_int_is_narrowed_to_char():
    assert strchr("Hello", ord("e") + 256) == "Hello".index("e")


def test_strrchr_finds_last():
    assert strrchr("Hello, World!", "o") == "Hello, World!".rindex("o")
    assert strrchr(b"Hello, World!", ord("o")) == b"Hello, World!".rindex(b"o")
    assert strrchr("Hello", "z") is None
    assert strrchr("Hello", 0) == strlen("Hello")


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("Hello", "ll")


def test_strncmp_equal_prefix():
    assert strncmp("applepie", "applesauce", 5) == 0
    assert strncmp("applepie", "applesauce", 0) == 0


def test_strncmp_sign_and_difference():
    assert strncmp("applepie", "applesauce", 6) == ord("p") - ord("s")
    assert strncmp("applesauce", "applepie", 6) > 0
    assert strncmp("abc", "abc", 10) == 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp(b"abc", b"ab", 3) == ord("c")


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_within_limit():
    haystack = "Hello, this is a test string!"
    assert strnstr(haystack, "this", 20) == haystack.index("this")
    assert strnstr(haystack, "string", 20) is None
    assert strnstr(haystack, "string", len(haystack)) == haystack.index("string")


def test_strnstr_needle_must_fit_in_limit():
    haystack = "Hello, this is a test string!"
    end = haystack.index("this") + len("this")
    assert strnstr(haystack, "this", end) == haystack.index("this")
    assert strnstr(haystack, "this", end - 1) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("", "", 5) == 0
    assert strnstr("", "a", 5) is None


def test_strlcpy_truncates():
    dst = bytearray(10)
    result = strlcpy(dst, "Hello, world!", len(dst))
    assert result == 13
    assert _text(dst) == b"Hello, wo"


def test_strlcpy_fits():
    dst = bytearray(b"x" * 20)
    assert strlcpy(dst, b"abc", len(dst)) == 3
    assert _text(dst) == b"abc"


def test_strlcpy_zero_size_writes_nothing():
    dst = bytearray(b"zz")
    assert strlcpy(dst, "abc", 0) == 3
    assert dst == bytearray(b"zz")


def test_strlcpy_size_beyond_buffer():
    with pytest.raises(ValueError):
        strlcpy(bytearray(4), "abc", 5)


def test_strlcat_truncates():
    dst = bytearray(10)
    strlcpy(dst, "Hello, ", len(dst))
    result = strlcat(dst, "world!", len(dst))
    assert result == 13
    assert _text(dst) == b"Hello, wo"


def test_strlcat_fits():
    dst = bytearray(20)
    strlcpy(dst, "ab", len(dst))
    assert strlcat(dst, "cd", len(dst)) == 4
    assert _text(dst) == b"abcd"


def test_strlcat_size_not_above_dst_length():
    dst = bytearray(10)
    strlcpy(dst, "Hello", len(dst))
    assert strlcat(dst, "abc", 3) == 3 + 3
    assert _text(dst) == b"Hello"


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat(bytearray(4), "a", -1)


def test_strdup_copies():
    original = "Hello, strdup!"
    assert strdup(original) == original
    assert strdup("ab\0cd") == "ab"
    source = bytearray(b"abc")
    copy = strdup(source)
    source[0] = ord("z")
    assert copy == bytearray(b"abc")