"""Console output: raw writes, characters, lines and formatted text."""

import sys

from tinylibc.formatting import iter_format
from tinylibc.hexdump import hexdump_lines

STDIN_FILENO = 0
STDOUT_FILENO = 1
STDERR_FILENO = 2

NUM_DEVICES = 4
PERIOD_DEV0 = 100
PERIOD_DEV1 = 200
PERIOD_DEV2 = 500
PERIOD_DEV3 = 50

_BUFFER_MAX = 128


def _as_text(data):
    if isinstance(data, str):
        return data
    return bytes(data).decode("latin-1")


class Console:
    """Writes to a text stream the way the console routines do."""

    def __init__(self, stream=None):
        self.stream = sys.stdout if stream is None else stream

    def write(self, data):
        """Write ``data`` (text or bytes) and return the number of characters."""
        text = _as_text(data)
        if text:
            self.stream.write(text)
        return len(text)

    def putchar(self, c):
        """Write one character, given as a code point or a string; return ``c``."""
        if isinstance(c, str):
            if len(c) != 1:
                raise ValueError("putchar expects a single character")
            self.write(c)
        else:
            self.write(chr(int(c) & 0xFF))
        return c

    def puts(self, text):
        """Write ``text`` up to its first NUL, then a newline."""
        self.write(_as_text(text).split("\0", 1)[0])
        self.write("\n")

    def printf(self, fmt, *args):
        """Format ``args`` with ``fmt`` and write the result.

        Output is gathered in a small buffer that is emitted a line at a
        time, or sooner when it fills or a NUL is produced. Returns the
        number of characters produced.
        """
        pending = []
        produced = 0

        def flush():
            self.write("".join(pending))
            pending.clear()

        for ch in iter_format(fmt, args):
            if ch == "\n":
                self.puts("".join(pending))
                pending.clear()
            elif ch == "\0" or len(pending) >= _BUFFER_MAX - 1:
                flush()
                self.putchar(ch)
            else:
                pending.append(ch)
            produced += 1

        if pending:
            flush()
        return produced

    def hexdump(self, data):
        """Write a boxed hex dump of ``data``."""
        for line in hexdump_lines(data):
            self.puts(line)