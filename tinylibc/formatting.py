"""printf-style formatting into Python strings.

Supported conversions:

* ``d u o x X z r n`` and their upper-case forms for integers (``X``
  still prints lower-case digits; upper-case letters only differ in that
  they are never truncated to 32 bits);
* ``c`` for a character and ``s`` for a string;
* ``p`` for a pointer, printed as ``0x`` followed by eight hex digits;
* ``b`` for a device register decoded by a bit description string;
* ``t`` for a :class:`ThreadId`.

Flags ``#``, ``-``, ``+``, space and ``0`` are honoured, as are a field
width and precision given as digits or as ``*``. A single ``l`` is
accepted and ignored; ``ll`` selects 64-bit integers. Any other
conversion character is printed as itself, so ``%%`` gives ``%``.
"""

import operator
import re
from dataclasses import dataclass, fields

from tinylibc.limits import to_int32, to_int64, to_uint32, to_uint64

_DIGITS = "0123456789abcdef"
_MAX_PRECISION = 0x7FFFFFFF

_SPEC = re.compile(r"%([#+\- ]*)(0?)(\d+|\*)?(?:\.(\d+|\*)?)?(l*)(.?)", re.DOTALL)

# conversion -> (signed, base or None for the caller's radix, truncatable)
_NUMERIC = {
    "o": (False, 8, True),
    "O": (False, 8, False),
    "d": (True, 10, True),
    "D": (True, 10, False),
    "u": (False, 10, True),
    "U": (False, 10, False),
    "x": (False, 16, True),
    "X": (False, 16, False),
    "z": (True, 16, True),
    "Z": (True, 16, False),
    "r": (True, None, True),
    "R": (True, None, False),
    "n": (False, None, True),
    "N": (False, None, False),
}

_HIGH_LAYOUT = (("version_low", 10), ("lthread", 7), ("task", 11), ("version_high", 4))
_LOW_LAYOUT = (("site", 17), ("chief", 11), ("nest", 4))


@dataclass(frozen=True)
class ThreadId:
    """A thread identifier made of two packed 32-bit words."""

    version_low: int = 0
    lthread: int = 0
    task: int = 0
    version_high: int = 0
    site: int = 0
    chief: int = 0
    nest: int = 0

    def __post_init__(self):
        widths = dict(_HIGH_LAYOUT + _LOW_LAYOUT)
        for field in fields(self):
            value = getattr(self, field.name)
            if not 0 <= value < (1 << widths[field.name]):
                raise ValueError(
                    f"{field.name} must fit in {widths[field.name]} bits"
                )

    def _pack(self, layout):
        word = 0
        shift = 0
        for name, bits in layout:
            word |= getattr(self, name) << shift
            shift += bits
        return word

    @property
    def high(self):
        """The first word: version_low, lthread, task, version_high."""
        return self._pack(_HIGH_LAYOUT)

    @property
    def low(self):
        """The second word: site, chief, nest."""
        return self._pack(_LOW_LAYOUT)

    @classmethod
    def from_words(cls, high, low):
        """Unpack a thread id from its two 32-bit words."""
        values = {}
        for word, layout in ((to_uint32(high), _HIGH_LAYOUT), (to_uint32(low), _LOW_LAYOUT)):
            for name, bits in layout:
                values[name] = word & ((1 << bits) - 1)
                word >>= bits
        return cls(**values)


@dataclass
class _Spec:
    altfmt: bool = False
    ladjust: bool = False
    plus_sign: str = ""
    padc: str = " "
    length: int = 0
    prec: int = -1
    longopt: int = 0


def _cstr(text):
    return text.split("\0", 1)[0]


def _next_arg(pending):
    try:
        return next(pending)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _int_arg(pending):
    return operator.index(_next_arg(pending))


def _digits(u, base):
    if not 2 <= base <= 16:
        raise ValueError(f"unsupported base {base}")
    out = []
    while True:
        u, digit = divmod(u, base)
        out.append(_DIGITS[digit])
        if u == 0:
            return "".join(reversed(out))


def _number(spec, pending, signed, base, truncate):
    value = _int_arg(pending)
    wide = spec.longopt > 1
    sign = ""
    if signed:
        n = to_int64(value) if wide else to_int32(value)
        if n >= 0:
            u, sign = n, spec.plus_sign
        else:
            u, sign = -n, "-"
    else:
        u = to_uint64(value) if wide else to_uint32(value)
    if truncate:
        u = to_uint64(to_int32(u))

    digits = _digits(u, base)
    prefix = ""
    if u != 0 and spec.altfmt:
        prefix = {8: "0", 16: "0x"}.get(base, "")

    remaining = spec.length - len(digits) - len(sign) - len(prefix)
    parts = []
    if spec.padc == " " and not spec.ladjust:
        parts.append(" " * max(remaining, 0))
        remaining = 0
    parts.append(sign)
    parts.append(prefix)
    if spec.padc == "0":
        parts.append("0" * max(remaining, 0))
        remaining = 0
    parts.append(digits)
    if spec.ladjust:
        parts.append(" " * max(remaining, 0))
    return "".join(parts)


def _string(spec, pending):
    arg = _next_arg(pending)
    if arg is None:
        text = ""
    elif isinstance(arg, str):
        text = _cstr(arg)
    elif isinstance(arg, (bytes, bytearray)):
        text = _cstr(bytes(arg).decode("latin-1"))
    else:
        raise TypeError("%s expects a string")

    prec = _MAX_PRECISION if spec.prec == -1 else spec.prec
    shown = text[: max(prec, 0)]
    parts = []
    if spec.length > 0 and not spec.ladjust:
        parts.append(" " * max(spec.length - len(shown), 0))
    parts.append(shown)
    # A string cut short by the precision counts one extra character here.
    counted = len(shown) + (1 if len(text) > len(shown) else 0)
    if spec.ladjust:
        parts.append(" " * max(spec.length - counted, 0))
    return "".join(parts)


def _char(pending):
    arg = _next_arg(pending)
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError("%c expects a single character")
        return arg
    return chr(operator.index(arg) & 0xFF)


def _bit_register(pending):
    u = to_uint32(_int_arg(pending))
    desc = _next_arg(pending)
    if isinstance(desc, (bytes, bytearray)):
        desc = bytes(desc).decode("latin-1")
    if not isinstance(desc, str):
        raise TypeError("%b expects a description string")
    codes = [ord(ch) for ch in _cstr(desc)] + [0]

    base = codes[0]
    parts = [_digits(u, base)]
    if u == 0:
        return parts[0]

    any_bits = False
    pos = 1

    def separator():
        nonlocal any_bits
        if any_bits:
            return ","
        any_bits = True
        return "<"

    def read_name():
        nonlocal pos
        start = pos
        while codes[pos] > 32:
            pos += 1
        return "".join(map(chr, codes[start:pos]))

    while (i := codes[pos]) != 0:
        pos += 1
        if codes[pos] <= 32:
            j = codes[pos]
            if j < 1 or j > i:
                raise ValueError("malformed bit field description")
            pos += 1
            parts.append(separator())
            parts.append(read_name())
            field = to_uint32((u >> (j - 1)) & ((2 << (i - j)) - 1))
            parts.append(_digits(field, base))
        elif u & (1 << (i - 1)):
            parts.append(separator())
            parts.append(read_name())
        else:
            read_name()
    if any_bits:
        parts.append(">")
    return "".join(parts)


def _thread_id(spec, pending):
    tid = _next_arg(pending)
    if not isinstance(tid, ThreadId):
        raise TypeError("%t expects a ThreadId")
    length = spec.length
    parts = []

    if spec.longopt:
        n = 19 if spec.altfmt else 17
        if length > 0 and not spec.ladjust:
            parts.append(" " * max(length - n, 0))
            n = max(n, length)
        body = f"{tid.high:08x}:{tid.low:08x}"
        parts.append(f"[{body}]" if spec.altfmt else body)
        if length > 0 and spec.ladjust:
            parts.append(" " * max(length - n, 0))
        return "".join(parts)

    n = 4 if spec.altfmt else 2
    m = 1 + (tid.lthread >= 0x10)
    n += (tid.task >= 0x10) + (tid.task >= 0x100)
    lead = length > 0 and not spec.ladjust

    if lead and spec.padc == " ":
        fill = max(length - 2 - n, 0)
        parts.append(" " * fill)
        n += fill
    if spec.altfmt:
        parts.append("[")
    if lead and spec.padc == "0":
        fill = max(length - 2 - n, 0)
        parts.append("0" * fill)
        n += fill
    parts.append(_digits(tid.task, 16))
    parts.append(".")
    if lead:
        fill = max(length - m - n, 0)
        parts.append(spec.padc * fill)
        n += fill
    parts.append(_digits(tid.lthread, 16))
    if spec.altfmt:
        parts.append("]")
    if spec.ladjust:
        parts.append(" " * max(length - m - n, 0))
    return "".join(parts)


def _convert(match, pending, radix, truncates):
    flags, zero, width, prec_text, ells, conv = match.groups()
    spec = _Spec(
        altfmt="#" in flags,
        ladjust="-" in flags,
        plus_sign="+" if "+" in flags else (" " if " " in flags else ""),
        padc="0" if zero else " ",
        longopt=len(ells),
    )
    if width == "*":
        spec.length = to_int32(_int_arg(pending))
        if spec.length < 0:
            spec.ladjust = not spec.ladjust
            spec.length = -spec.length
    elif width:
        spec.length = int(width)
    if prec_text == "*":
        spec.prec = to_int32(_int_arg(pending))
    elif prec_text:
        spec.prec = int(prec_text)

    if conv == "":
        return ""
    if conv in ("b", "B"):
        return _bit_register(pending)
    if conv == "c":
        return _char(pending)
    if conv == "t":
        return _thread_id(spec, pending)
    if conv == "s":
        return _string(spec, pending)
    if conv == "p":
        spec.padc = "0"
        spec.length = 8
        return "0x" + _number(spec, pending, False, 16, truncates)
    if conv in _NUMERIC:
        signed, base, truncatable = _NUMERIC[conv]
        return _number(
            spec,
            pending,
            signed,
            radix if base is None else base,
            truncates and truncatable,
        )
    return conv


def iter_format(fmt, args=(), radix=0, truncates=False):
    """Yield the characters produced by formatting ``args`` with ``fmt``.

    ``radix`` is the base for ``%r`` and ``%n``; with the default of 0
    those conversions raise :class:`ValueError`. With ``truncates`` set,
    lower-case integer conversions keep only the low 32 bits.
    """
    text = _cstr(fmt)
    pending = iter(args)
    pos = 0
    while pos < len(text):
        start = text.find("%", pos)
        if start < 0:
            yield from text[pos:]
            return
        yield from text[pos:start]
        match = _SPEC.match(text, start)
        pos = match.end()
        yield from _convert(match, pending, radix, truncates)


def format_string(fmt, *args, radix=0, truncates=False):
    """Return ``fmt`` formatted with ``args``; see :func:`iter_format`."""
    return "".join(iter_format(fmt, args, radix, truncates))


def sprintf(fmt, *args):
    """Return ``fmt`` formatted with ``args``."""
    return format_string(fmt, *args)


def snprintf(size, fmt, *args):
    """Return at most ``size`` characters of ``fmt`` formatted with ``args``."""
    size = operator.index(size)
    if size < 0:
        raise ValueError("size must not be negative")
    return format_string(fmt, *args)[:size]