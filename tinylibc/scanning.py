"""A deliberately small scanf: ``%d``, ``%x``, ``%s`` and ``%*`` suppression.

Converted values are returned as a list rather than stored through
pointers. A conversion character other than ``d``, ``x`` or ``s`` reads
nothing from the input but still counts as a converted item; it
contributes ``None`` to the result so that ``len(result)`` is the count
the classic routine would return.
"""

from tinylibc.ctype import isspace
from tinylibc.limits import to_int32

_END = "\0"
_DIGIT_VALUES = {ch: int(ch, 16) for ch in "0123456789abcdefABCDEF"}


def _text(s):
    """Return ``s`` as text cut at its first NUL."""
    if not isinstance(s, str):
        s = bytes(s).decode("latin-1")
    return s.split(_END, 1)[0]


class _Input:
    """Character source with unlimited push-back; yields NUL once exhausted."""

    def __init__(self, chars):
        self._chars = iter(chars)
        self._pushed = []

    def getc(self):
        if self._pushed:
            return self._pushed.pop()
        ch = next(self._chars, _END)
        return chr(ch) if isinstance(ch, int) else ch

    def ungetc(self, ch):
        self._pushed.append(ch)


def _read_number(source, base):
    c = source.getc()
    negative = c == "-"
    if negative:
        c = source.getc()
    value = 0
    while (digit := _DIGIT_VALUES.get(c)) is not None and digit < base:
        value = value * base + digit
        c = source.getc()
    source.ungetc(c)
    return to_int32(-value if negative else value)


def _read_word(source):
    word = []
    c = source.getc()
    while c != _END and not isspace(c):
        word.append(c)
        c = source.getc()
    source.ungetc(c)
    return "".join(word)


def scan(fmt, chars):
    """Parse characters from the iterable ``chars`` according to ``fmt``.

    Whitespace in ``fmt`` skips any run of whitespace in the input; any
    other literal must match the next input character or scanning stops.
    ``%d`` reads an optional ``-`` and decimal digits, ``%x`` an optional
    ``-`` and hex digits, ``%s`` a run of non-space characters. A ``*``
    after ``%`` reads the item but leaves it out of the result. Missing
    digits give 0. Returns the list of converted values.
    """
    source = _Input(chars)
    values = []
    spec = iter(_text(fmt))
    for c in spec:
        if c != "%":
            if isspace(c):
                while isspace(ch := source.getc()):
                    pass
                source.ungetc(ch)
                continue
            if c == source.getc():
                continue
            break

        discard = False
        conv = next(spec, "")
        while conv == "*":
            discard = True
            conv = next(spec, "")
        if conv == "":
            break

        if conv == "d":
            value = _read_number(source, 10)
        elif conv == "x":
            value = _read_number(source, 16)
        elif conv == "s":
            value = _read_word(source)
        else:
            value = None

        if not discard:
            values.append(value)
    return values


def sscanf(text, fmt):
    """Parse ``text`` (up to its first NUL) according to ``fmt``; see :func:`scan`."""
    return scan(fmt, _text(text))