"""Number parsing and a small pseudo-random generator."""

from tinylibc.ctype import isdigit, isspace
from tinylibc.limits import to_int32, to_uint32

_END = "\0"


def atol(text):
    """Parse leading decimal digits of ``text`` as a 32-bit long.

    No whitespace or sign is accepted; parsing stops at the first
    non-digit and an empty prefix gives 0.
    """
    value = 0
    for ch in text:
        if not isdigit(ch):
            break
        value = value * 10 + ord(ch) - ord("0")
    return to_int32(value)


def atoi(text):
    """Parse leading decimal digits of ``text`` as a 32-bit int."""
    return to_int32(atol(text))


def _digit(ch, base):
    if "0" <= ch <= "9":
        value = ord(ch) - ord("0")
    elif "a" <= ch <= "z":
        value = ord(ch) - ord("a") + 10
    elif "A" <= ch <= "Z":
        value = ord(ch) - ord("A") + 10
    else:
        return None
    return value if value < base else None


def _parse(text, base, signed):
    def at(i):
        return text[i] if i < len(text) else _END

    pos = 0
    while isspace(at(pos)):
        pos += 1

    negative = False
    if signed and at(pos) == "-":
        negative = True
        pos += 1
    # A leading '+' is not consumed, so "+5" parses as nothing.

    if base in (0, 16) and at(pos) == "0" and at(pos + 1) in ("x", "X"):
        pos += 2
        base = 16
    if base == 0:
        base = 8 if at(pos) == "0" else 10

    value = 0
    while (digit := _digit(at(pos), base)) is not None:
        value = value * base + digit
        pos += 1

    return (-value if negative else value), pos


def strtol(text, base):
    """Parse a signed 32-bit number from ``text`` in ``base``.

    Returns ``(value, end)`` where ``end`` is the index of the first
    character not consumed. Base 0 selects hex for a ``0x`` prefix,
    octal for a leading ``0`` and decimal otherwise.
    """
    value, end = _parse(text, base, signed=True)
    return to_int32(value), end


def strtoul(text, base):
    """Parse an unsigned 32-bit number from ``text`` in ``base``.

    Returns ``(value, end)`` as :func:`strtol` does; no sign is accepted.
    """
    value, end = _parse(text, base, signed=False)
    return to_uint32(value), end


class Random:
    """Two-word additive generator yielding values in ``[0, 2**31)``."""

    _INCREMENT = 0xA859C317

    def __init__(self, seed=0):
        self.seed(seed)

    def seed(self, seed):
        """Reset both state words to ``seed``."""
        word = to_uint32(seed)
        self._state = [word, word]

    def rand(self):
        """Advance the state and return the next value."""
        first, second = self._state
        first = to_uint32(first + self._INCREMENT)
        rotated = to_uint32((second << 13) | (second >> 19))
        first = to_uint32(first + rotated)
        second = to_uint32(second + first)
        self._state = [first, second]
        return first & 0x7FFFFFFF


_shared = Random(0)


def srand(seed):
    """Reseed the shared generator."""
    _shared.seed(seed)


def rand():
    """Return the next value from the shared generator."""
    return _shared.rand()