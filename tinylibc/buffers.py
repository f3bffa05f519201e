"""String copying and buffer filling routines.

The copying routines take NUL-terminated strings given as ``str`` or as
bytes-like objects and return a new value of the same kind, since Python
strings cannot be written in place. The memory routines work in place on
a mutable sequence such as a ``bytearray`` and return it.
"""

from collections.abc import MutableSequence


def _cstr(s):
    """Return ``s`` up to, but not including, its first NUL."""
    if isinstance(s, str):
        return s.split("\0", 1)[0]
    return bytes(s).split(b"\0", 1)[0]


def _check_same_kind(a, b):
    if isinstance(a, str) != isinstance(b, str):
        raise TypeError("cannot mix text and bytes")


def _check_count(count):
    if count < 0:
        raise ValueError("count must not be negative")


def _check_region(buf, start, count):
    if start < 0 or start + count > len(buf):
        raise IndexError("region lies outside the buffer")


def strcpy(src):
    """Return a copy of the string ``src`` up to its terminating NUL."""
    return _cstr(src)


def strncpy(src, count):
    """Copy at most ``count`` characters of ``src``, padding with NUL.

    The result always has exactly ``count`` characters. When ``src`` is
    ``count`` characters or longer the result carries no terminating NUL.
    """
    _check_count(count)
    text = _cstr(src)[:count]
    pad = "\0" if isinstance(src, str) else b"\0"
    return text + pad * (count - len(text))


def strcat(dest, src):
    """Return ``src`` appended to the string held in ``dest``."""
    _check_same_kind(dest, src)
    return _cstr(dest) + _cstr(src)


def strncat(dest, src, n):
    """Append at most ``n`` characters of ``src`` to the string in ``dest``."""
    _check_same_kind(dest, src)
    _check_count(n)
    if n == 0:
        return _cstr(dest)
    return _cstr(dest) + _cstr(src)[:n]


def _fill_value(buf, c):
    if isinstance(buf, (bytearray, memoryview)):
        return int(c) & 0xFF
    return c


def memset(buf, c, length):
    """Set the first ``length`` elements of ``buf`` to ``c`` and return ``buf``.

    For byte buffers ``c`` is truncated to its low eight bits.
    """
    if not isinstance(buf, (MutableSequence, memoryview)):
        raise TypeError("buffer must be mutable")
    _check_count(length)
    _check_region(buf, 0, length)
    value = _fill_value(buf, c)
    buf[:length] = (bytes([value]) if isinstance(buf, (bytearray, memoryview))
                    else [value]) * length
    return buf


def memmove(buf, dest, src, count):
    """Copy ``count`` elements from offset ``src`` to offset ``dest`` in ``buf``.

    The regions may overlap; the result is as if the source were first
    copied aside. Returns ``buf``.
    """
    if not isinstance(buf, (MutableSequence, memoryview)):
        raise TypeError("buffer must be mutable")
    _check_count(count)
    _check_region(buf, src, count)
    _check_region(buf, dest, count)
    chunk = buf[src : src + count]
    if isinstance(chunk, memoryview):
        chunk = chunk.tobytes()
    buf[dest : dest + count] = chunk
    return buf


def memcpy(buf, dest, src, count):
    """Copy ``count`` elements within ``buf``; overlap is handled safely."""
    return memmove(buf, dest, src, count)