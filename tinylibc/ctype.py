"""Character classification and case mapping over ASCII code points.

Every predicate accepts either an integer code point or a one-character
string. The case mappers return the same kind of value they were given.
"""

_SPACE = frozenset(map(ord, " \f\n\r\t\v"))


def _code(c):
    """Return the integer code point of ``c``."""
    return ord(c) if isinstance(c, str) else int(c)


def isascii(c):
    """True for code points 0 through 127."""
    return 0 <= _code(c) <= 127


def iscntrl(c):
    """True for anything below space or above tilde."""
    code = _code(c)
    return code < ord(" ") or code > 126


def isdigit(c):
    """True for the decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def isgraph(c):
    """True for printable characters other than space."""
    code = _code(c)
    return ord(" ") < code <= 126


def islower(c):
    """True for lower-case ASCII letters."""
    return ord("a") <= _code(c) <= ord("z")


def isprint(c):
    """True for printable characters, space included."""
    code = _code(c)
    return ord(" ") <= code <= 126


def isspace(c):
    """True for space, form feed, newline, carriage return and tabs."""
    return _code(c) in _SPACE


def isupper(c):
    """True for upper-case ASCII letters."""
    return ord("A") <= _code(c) <= ord("Z")


def isxdigit(c):
    """True for hexadecimal digits of either case."""
    code = _code(c)
    return (
        isdigit(code)
        or ord("A") <= code <= ord("F")
        or ord("a") <= code <= ord("f")
    )


def isalpha(c):
    """True for ASCII letters."""
    code = _code(c)
    return islower(code) or isupper(code)


def isalnum(c):
    """True for ASCII letters and digits."""
    code = _code(c)
    return isalpha(code) or isdigit(code)


def ispunct(c):
    """True for visible characters that are neither letters nor digits."""
    code = _code(c)
    return isgraph(code) and not isalnum(code)


def toupper(c):
    """Map a lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    result = code - ord("a") + ord("A") if islower(code) else code
    return chr(result) if isinstance(c, str) else result


def tolower(c):
    """Map an upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    result = code - ord("A") + ord("a") if isupper(code) else code
    return chr(result) if isinstance(c, str) else result