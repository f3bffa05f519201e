"""Render a byte buffer as a boxed hex and character dump."""

from tinylibc.ctype import isgraph

_WIDTH = 16
_GROUP = 4
_RULE = "-" * 75
_TOP = "." + _RULE + "."
_BOTTOM = "`" + _RULE + "'"


def _row(offset, chunk):
    hex_part = []
    for j in range(_WIDTH):
        if j % _GROUP == 0:
            hex_part.append(" ")
        hex_part.append(f"{chunk[j]:02x}" if j < len(chunk) else "  ")
    text = "".join(chr(b) if isgraph(b) else "." for b in chunk)
    return f"| {offset:08x}      {''.join(hex_part)}       {text:<{_WIDTH}} |"


def hexdump_lines(data):
    """Yield the lines of a dump of ``data``, borders included."""
    raw = bytes(data)
    yield _TOP
    for offset in range(0, len(raw), _WIDTH):
        yield _row(offset, raw[offset : offset + _WIDTH])
    yield _BOTTOM


def format_hexdump(data):
    """Return the whole dump of ``data`` as text, each line ending in newline."""
    return "".join(line + "\n" for line in hexdump_lines(data))