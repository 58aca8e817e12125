# quirkprintf

`quirkprintf` is a small printf-style formatter. It understands the
conversions `c`, `s`, `d`, `i`, `u`, `x`, `X`, `p` and `%`, along with the
flags `-` and `0`, a field width, a precision, and `*` for a width or
precision taken from the arguments.

Flags, width and precision follow this library's own fixed rules. In a
number of corner cases the output differs from C's `printf` and from
Python's `%` operator. For example, a hexadecimal value in a field wider
than its digits prints as spaces followed by a single `0`:

```python
sprintf("%5x", 255)   # '    0'
```

## Installation

```
pip install quirkprintf
```

## Usage

```python
import sys

from quirkprintf.formatter import printf, sprintf

sprintf("%5d|", 42)          # '   42|'
sprintf("%-5s|", "ab")       # 'ab   |'
sprintf("%x %X", 255, 255)   # 'ff FF'
sprintf("%.3d", 7)           # '007'
sprintf("%*d", 4, 9)         # '   9'
sprintf("%s", None)          # '(null)'

printf("%d items\n", 3, stream=sys.stdout)
```

`sprintf(fmt, *args)` returns the formatted text. `printf(fmt, *args,
stream=None)` writes it to `stream` (standard output when none is given) and
returns the number of characters written.

Arguments are read in order and treated as C values: `d`, `i` and `c` take a
signed 32-bit integer (a one-character string is accepted and taken by its
code point), `u`, `x` and `X` take an unsigned 32-bit integer, `s` takes a
string or `None`, and `p` takes an integer address (or `None` for zero) and
prints it in hexadecimal with a `0x` prefix. A format string is read only up
to its first NUL character.

## Errors

- `TypeError` when the format is not a string, when there are too few
  arguments, when an argument has the wrong type, or when `None` is given for
  `s` together with a `*` width.
- `ValueError` when a conversion cannot be completed, for instance a `%` at
  the end of the format or an unrecognised conversion character after it.

## Modules

- `quirkprintf.formatter`: `sprintf` and `printf`, the entry points.
- `quirkprintf.state`: `FormatState`, which holds the flags of the current
  conversion, reads the arguments in order and collects the output, plus
  `to_int32` and `to_uint32`.
- `quirkprintf.numtext`: `atoi`, `is_digit`, `is_alpha`, `number_length`,
  `unsigned_length` and `to_base`.
- `quirkprintf.width`, `quirkprintf.minus`, `quirkprintf.zero`,
  `quirkprintf.star`, `quirkprintf.dot`, `quirkprintf.exception`: the padding
  rules for each combination of flags, width and precision.

## What it does not do

There is no command-line tool. Length modifiers (`l`, `h`, `ll`), the `+`,
space and `#` flags, and floating-point conversions are not supported.

## Running the tests

```
pip install -e ".[test]"
pytest
```