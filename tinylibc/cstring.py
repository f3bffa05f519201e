"""Read-only string and memory routines with NUL-terminated semantics.

Strings may be given as ``str`` or as bytes-like objects. A string ends
at its first NUL character, or at the end of the object if it has none.
Where the classic routines return a pointer into the string, these return
an index, or ``None`` when nothing is found.
"""

_NUL = 0


def _codes(s):
    """Return the code points of ``s`` up to, but not including, the first NUL."""
    values = [ord(ch) for ch in s] if isinstance(s, str) else list(bytes(s))
    try:
        return values[: values.index(_NUL)]
    except ValueError:
        return values


def _terminated(s):
    """Return the code points of ``s`` followed by a single NUL."""
    return [*_codes(s), _NUL]


def _char(c):
    """Return the integer value of a character given as ``str`` or ``int``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return int(c)


def strlen(s):
    """Number of characters before the terminating NUL."""
    return len(_codes(s))


def strcmp(a, b):
    """Compare two strings.

    Returns 0 when they are equal, otherwise the difference between the
    first pair of characters that differ (a shorter string compares as if
    followed by NUL).
    """
    for x, y in zip(_terminated(a), _terminated(b)):
        if x != y or x == _NUL:
            return x - y
    return 0


def strncmp(a, b, n):
    """Compare at most ``n`` characters of two strings."""
    if n <= 0:
        return 0
    for x, y in zip(_terminated(a)[:n], _terminated(b)[:n]):
        if x != y:
            return x - y
        if x == _NUL:
            return 0
    return 0


def strchr(s, c):
    """Index of the first occurrence of ``c`` in ``s``.

    Searching for NUL finds the terminator, whose index is ``strlen(s)``.
    """
    target = _char(c)
    for index, code in enumerate(_terminated(s)):
        if code == target:
            return index
    return None


def strrchr(s, c):
    """Index of the last occurrence of ``c`` before the terminator."""
    target = _char(c)
    found = None
    for index, code in enumerate(_codes(s)):
        if code == target:
            found = index
    return found


def strstr(haystack, needle):
    """Index of the first occurrence of ``needle`` in ``haystack``.

    An empty needle matches at index 0.
    """
    hay = _codes(haystack)
    pattern = _codes(needle)
    width = len(pattern)
    for start in range(len(hay) - width + 1):
        if hay[start : start + width] == pattern:
            return start
    return None


def strpbrk(s, accept):
    """Index of the first character of ``s`` that appears in ``accept``."""
    wanted = set(_codes(accept))
    return next(
        (index for index, code in enumerate(_codes(s)) if code in wanted), None
    )


def strspn(s, accept):
    """Length of the leading run of ``s`` made only of characters in ``accept``."""
    allowed = set(_codes(accept))
    count = 0
    for code in _codes(s):
        if code not in allowed:
            break
        count += 1
    return count


def strcspn(s, reject):
    """Length of the leading run of ``s`` with no character from ``reject``."""
    stop = set(_codes(reject))
    count = 0
    for code in _codes(s):
        if code in stop:
            break
        count += 1
    return count


def memcmp(a, b, size):
    """Compare the first ``size`` units of ``a`` and ``b``.

    Unlike the string routines, NUL is an ordinary value here. Returns 0
    when the regions are equal, otherwise the difference between the
    first pair of units that differ.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    left = [ord(ch) for ch in a] if isinstance(a, str) else list(bytes(a))
    right = [ord(ch) for ch in b] if isinstance(b, str) else list(bytes(b))
    if size > len(left) or size > len(right):
        raise ValueError("size exceeds the length of an operand")
    for x, y in zip(left[:size], right[:size]):
        if x != y:
            return x - y
    return 0