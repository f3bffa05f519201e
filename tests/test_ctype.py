import string

import pytest

from tinylibc import ctype

ASCII = range(128)


@pytest.mark.parametrize("code", ASCII)
def test_digit_matches_python(code):
    assert ctype.isdigit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ASCII)
def test_alpha_and_case_match_python(code):
    ch = chr(code)
    assert ctype.isalpha(code) == (ch in string.ascii_letters)
    assert ctype.isupper(code) == (ch in string.ascii_uppercase)
    assert ctype.islower(code) == (ch in string.ascii_lowercase)
    assert ctype.isalnum(code) == (ch in string.ascii_letters + string.digits)


@pytest.mark.parametrize("code", ASCII)
def test_xdigit_and_punct_match_python(code):
    ch = chr(code)
    assert ctype.isxdigit(code) == (ch in string.hexdigits)
    assert ctype.ispunct(code) == (ch in string.punctuation)


@pytest.mark.parametrize("code", ASCII)
def test_space_matches_set(code):
    assert ctype.isspace(code) == (chr(code) in " \t\n\r\x0b\x0c")


@pytest.mark.parametrize("code", ASCII)
def test_print_graph_cntrl_partition(code):
    assert ctype.isprint(code) != ctype.iscntrl(code)
    assert ctype.isgraph(code) == (ctype.isprint(code) and code != ord(" "))
    assert ctype.isprint(code) == chr(code).isprintable()


def test_range_edges():
    assert ctype.isascii(0) and ctype.isascii(127)
    assert not ctype.isascii(128)
    assert not ctype.isascii(-1)
    assert ctype.iscntrl(-5)
    assert ctype.iscntrl(200)


def test_accepts_strings():
    assert ctype.isdigit("7")
    assert ctype.isspace("\t")
    assert not ctype.isalpha("!")


def test_case_mapping_round_trip():
    for ch in string.ascii_lowercase:
        assert ctype.toupper(ch) == ch.upper()
        assert ctype.tolower(ctype.toupper(ch)) == ch
    for code in ASCII:
        if not ctype.isalpha(code):
            assert ctype.toupper(code) == code
            assert ctype.tolower(code) == code


def test_case_mapping_keeps_kind():
    assert ctype.toupper(ord("q")) == ord("Q")
    assert ctype.tolower("Q") == "q"


def test_multi_character_string_rejected():
    with pytest.raises(TypeError):
        ctype.isdigit("12")