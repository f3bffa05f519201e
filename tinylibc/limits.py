"""Fixed-width integer limits and wrap-around conversions."""

UINT8_MAX = 0xFF
UINT16_MAX = 0xFFFF
UINT32_MAX = 0xFFFFFFFF
UINT64_MAX = 0xFFFFFFFFFFFFFFFF

INT8_MAX = 0x7F
INT16_MAX = 0x7FFF
INT32_MAX = 0x7FFFFFFF
INT64_MAX = 0x7FFFFFFFFFFFFFFF
INT8_MIN = -INT8_MAX - 1
INT16_MIN = -INT16_MAX - 1
INT32_MIN = -INT32_MAX - 1
INT64_MIN = -INT64_MAX - 1

SIZE_MAX = UINT32_MAX
SSIZE_MAX = INT32_MAX
SSIZE_MIN = INT32_MIN

CHAR_BIT = 8

UCHAR_MAX = UINT8_MAX
USHRT_MAX = UINT16_MAX
UINT_MAX = UINT32_MAX
ULONG_MAX = UINT32_MAX
ULLONG_MAX = UINT64_MAX

SCHAR_MAX = INT8_MAX
CHAR_MAX = SCHAR_MAX
SHRT_MAX = INT16_MAX
INT_MAX = INT32_MAX
LONG_MAX = INT32_MAX
LLONG_MAX = INT64_MAX
SCHAR_MIN = INT8_MIN
CHAR_MIN = SCHAR_MIN
SHRT_MIN = INT16_MIN
INT_MIN = INT32_MIN
LONG_MIN = INT32_MIN
LLONG_MIN = INT64_MIN


def _unsigned(value, bits):
    return int(value) & ((1 << bits) - 1)


def _signed(value, bits):
    raw = _unsigned(value, bits)
    return raw - (1 << bits) if raw >> (bits - 1) else raw


def to_int32(value):
    """Wrap ``value`` into the signed 32-bit range."""
    return _signed(value, 32)


def to_uint32(value):
    """Wrap ``value`` into the unsigned 32-bit range."""
    return _unsigned(value, 32)


def to_int64(value):
    """Wrap ``value`` into the signed 64-bit range."""
    return _signed(value, 64)


def to_uint64(value):
    """Wrap ``value`` into the unsigned 64-bit range."""
    return _unsigned(value, 64)