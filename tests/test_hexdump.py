import pytest

from tinylibc.hexdump import format_hexdump, hexdump_lines

SAMPLE = (
    b"./a.out\0TERM=xterm\0HOME=/afs/cs.utah.edu/home/lomew\0"
    b"SHELL=/bin/tcsh\0LOGNAME=lomew\0USER=lomew\0"
    b"PATH=/afs/cs.utah.edu/home/lomew/bin/@sys:/afs/cs.utah.ed"
)

TOP = ".---------------------------------------------------------------------------."
BOTTOM = "`---------------------------------------------------------------------------'"


def test_borders():
    lines = list(hexdump_lines(SAMPLE))
    assert lines[0] == TOP
    assert lines[-1] == BOTTOM


def test_first_row_matches_documented_example():
    lines = list(hexdump_lines(SAMPLE))
    assert lines[1] == (
        "| 00000000       2e2f612e 6f757400 5445524d 3d787465       ./a.out.TERM=xte |"
    )


@pytest.mark.parametrize(
    "index, expected",
    [
        (2, "| 00000010       726d0048 4f4d453d 2f616673 2f63732e       rm.HOME=/afs/cs. |"),
        (4, "| 00000030       6d657700 5348454c 4c3d2f62 696e2f74       mew.SHELL=/bin/t |"),
        (9, "| 00000080       6e2f4073 79733a2f 6166732f 63732e75       n/@sys:/afs/cs.u |"),
    ],
)
def test_rows_match_documented_example(index, expected):
    assert list(hexdump_lines(SAMPLE))[index] == expected


def test_partial_last_row():
    last = list(hexdump_lines(SAMPLE))[-2]
    assert last.startswith("| 00000090       7461682e 6564 ")
    assert last.endswith("tah.ed" + " " * 11 + "|")


def test_row_count_and_width():
    lines = list(hexdump_lines(SAMPLE))
    assert len(lines) == 2 + (len(SAMPLE) + 15) // 16
    assert all(len(line) == len(TOP) for line in lines)


def test_empty_data_has_only_borders():
    assert list(hexdump_lines(b"")) == [TOP, BOTTOM]


def test_non_printable_bytes_shown_as_dots():
    line = list(hexdump_lines(bytes([0x20, 0x7F, 0x80, 0xFF])))[1]
    assert line.endswith("...." + " " * 12 + " |")


def test_format_hexdump_joins_lines():
    text = format_hexdump(SAMPLE)
    assert text.endswith("\n")
    assert text.splitlines() == list(hexdump_lines(SAMPLE))


def test_rejects_text():
    with pytest.raises(TypeError):
        format_hexdump("not bytes")