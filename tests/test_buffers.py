import pytest

from tinylibc.buffers import (
    memcpy,
    memmove,
    memset,
    strcat,
    strcpy,
    strncat,
    strncpy,
)


def test_strcpy_stops_at_nul():
    assert strcpy("abc\0def") == "abc"


def test_strcpy_bytes_round_trip():
    assert strcpy(b"hello") == b"hello"


def test_strncpy_pads_to_count():
    result = strncpy("ab", 5)
    assert len(result) == 5
    assert result.startswith("ab")
    assert set(result[2:]) == {"\0"}


def test_strncpy_truncates_without_terminator():
    result = strncpy(b"abcdef", 3)
    assert result == b"abcdef"[:3]
    assert b"\0" not in result


def test_strncpy_zero_count_is_empty():
    assert strncpy("abc", 0) == ""


def test_strncpy_negative_count():
    with pytest.raises(ValueError):
        strncpy("abc", -1)


def test_strcat_appends():
    assert strcat("foo", "bar") == "foo" + "bar"


def test_strcat_ignores_text_after_nul():
    assert strcat("foo\0junk", "bar\0junk") == "foo" + "bar"


def test_strcat_rejects_mixed_kinds():
    with pytest.raises(TypeError):
        strcat("foo", b"bar")


def test_strncat_limits_appended_length():
    result = strncat(b"ab", b"cdef", 2)
    assert result == b"ab" + b"cdef"[:2]


def test_strncat_zero_leaves_dest():
    assert strncat("ab", "cd", 0) == "ab"


def test_strncat_short_source_is_whole():
    assert strncat("x", "yz", 10) == strcat("x", "yz")


def test_memset_fills_prefix():
    buf = bytearray(8)
    result = memset(buf, 0x41, 3)
    assert result is buf
    assert buf[:3] == b"AAA"
    assert buf[3:] == bytes(5)


def test_memset_truncates_to_byte():
    buf = bytearray(2)
    memset(buf, 0x1FF, 2)
    assert list(buf) == [0xFF, 0xFF]


def test_memset_out_of_range():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_memset_requires_mutable():
    with pytest.raises(TypeError):
        memset(b"abc", 0, 1)


def test_memmove_forward_overlap():
    original = bytes(range(10))
    buf = bytearray(original)
    memmove(buf, 2, 0, 5)
    assert buf[2:7] == original[0:5]
    assert buf[:2] == original[:2]
    assert buf[7:] == original[7:]


def test_memmove_backward_overlap():
    original = bytes(range(10))
    buf = bytearray(original)
    memmove(buf, 0, 3, 6)
    assert buf[0:6] == original[3:9]
    assert buf[6:] == original[6:]


def test_memmove_on_list():
    buf = list("abcdef")
    memmove(buf, 1, 0, 3)
    assert buf[1:4] == list("abc")


def test_memcpy_matches_memmove():
    a = bytearray(range(16))
    b = bytearray(range(16))
    assert memcpy(a, 4, 1, 8) == memmove(b, 4, 1, 8)


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memmove_negative_count():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 0, 0, -1)