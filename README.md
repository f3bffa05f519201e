# tinylibc

`tinylibc` gives Python code the exact behaviour of a small freestanding C
library: character classification, number parsing, a seeded pseudo-random
generator, NUL-terminated string routines, a `printf`-style formatter with
the Mach extensions (`%b`, `%z`, `%r`, `%n`, `%t`), a minimal `sscanf`, and a
boxed hexdump printer.

It is meant for predicting, testing or emulating what such a library
produces, quirks included. It has no dependencies outside the standard
library.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Modules

| Module                | What it holds                                                            |
|-----------------------|--------------------------------------------------------------------------|
| `tinylibc.ctype`      | `isascii`, `isdigit`, `isspace`, `isalpha`, `ispunct`, `toupper`, `tolower`, ... |
| `tinylibc.errors`     | the `Errno` enumeration and the `LibcError` exception                    |
| `tinylibc.limits`     | integer limit constants and `to_int32`, `to_uint32`, `to_int64`, `to_uint64` |
| `tinylibc.stdlib`     | `atol`, `atoi`, `strtol`, `strtoul`, `Random`, `srand`, `rand`            |
| `tinylibc.cstring`    | `strlen`, `strcmp`, `strncmp`, `strchr`, `strrchr`, `strstr`, `strpbrk`, `strspn`, `strcspn`, `memcmp` |
| `tinylibc.buffers`    | `strcpy`, `strncpy`, `strcat`, `strncat`, `memset`, `memmove`, `memcpy`   |
| `tinylibc.hexdump`    | `hexdump_lines` and `format_hexdump`                                     |
| `tinylibc.formatting` | `sprintf`, `snprintf`, `format_string`, `iter_format`, `ThreadId`        |
| `tinylibc.scanning`   | `sscanf` and the lower-level `scan`                                      |
| `tinylibc.console`    | `Console`, which writes `write`/`putchar`/`puts`/`printf`/`hexdump` output to a text stream |

## Notes on behaviour

- The `ctype` predicates take an integer code point or a one-character
  string; `toupper` and `tolower` return the same kind they were given.
- String routines stop at the first NUL. Where C returns a pointer, these
  return an index, or `None` when nothing is found.
- `strtol` and `strtoul` return a `(value, end)` pair, `end` being the index
  of the first character not consumed. A leading `+` is not accepted.
- The `buffers` copying routines return new `str` or `bytes` values;
  `memset`, `memmove` and `memcpy` change a mutable sequence such as a
  `bytearray` in place and return it.
- In the formatter, `%X` prints lower-case digits like `%x`. `%r` and `%n`
  use the `radix` argument of `format_string`/`iter_format`; with the default
  of 0 they raise `ValueError`. `snprintf` returns the formatted text cut to
  `size` characters.
- `sscanf` returns the list of converted values instead of storing through
  pointers.

## Examples

```python
from tinylibc.formatting import sprintf

sprintf("%05d|%-4s|%x", 42, "ab", 255)        # '00042|ab  |ff'
sprintf("reg = %b", 3, "\10\2BITTWO\1BITONE")  # 'reg = 3<BITTWO,BITONE>'
```

```python
from tinylibc.stdlib import strtol
from tinylibc.scanning import sscanf

strtol("  -0x1A", 0)                   # (-26, 7)
sscanf("12 ff word", "%d %x %s")       # [12, 255, 'word']
```

A seeded generator always gives the same sequence for the same seed:

```python
from tinylibc.stdlib import Random

gen = Random(1234)
values = [gen.rand() for _ in range(3)]
```

Console output goes to any text stream (standard output by default):

```python
import sys
from tinylibc.console import Console

console = Console(sys.stdout)
console.puts("Hello World")
console.printf("Time now is %lu\n", 1500)
console.hexdump(b"./a.out\0TERM=xterm")
```

`tinylibc.errors` provides `Errno` codes such as `Errno.EINVAL` and
`Errno.ENOMEM`, each with a `description`, and `LibcError(code, message)` for
code that wants to report them as exceptions. The routines in this package
themselves raise `ValueError`, `TypeError` or `IndexError` on bad arguments.

## What it does not do

There is no command-line program. The package does not read input from a
terminal, and it has no task creation, scheduling, mutexes, event waiting,
sleeping or clock: `tinylibc.console` holds the device period constants
(`PERIOD_DEV0` and so on) and file descriptor numbers only as values.