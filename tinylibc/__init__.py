"""Character, number, string, formatting, scanning and hexdump routines of a small C library."""

__version__ = "0.1.0"

__all__ = [
    "buffers",
    "console",
    "cstring",
    "ctype",
    "errors",
    "formatting",
    "hexdump",
    "limits",
    "scanning",
    "stdlib",
]