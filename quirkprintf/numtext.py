"""Small number and character helpers used by the formatter."""

from __future__ import annotations

import re
import string

_WHITESPACE = "\t\n\r\v\f "
_DIGITS_RE = re.compile(r"[0-9]*")
_SIZE_MASK = (1 << 64) - 1
_ALPHABET = string.digits + string.ascii_lowercase


def _wrap_int32(value: int) -> int:
    return ((value + (1 << 31)) % (1 << 32)) - (1 << 31)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the formatter reads widths.

    Leading whitespace is skipped and one sign is accepted; two signs in a
    row give 0. The result wraps to a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("+", "-") and rest:
        if rest[1:2] in ("+", "-") and rest[1:2]:
            return 0
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = _DIGITS_RE.match(rest).group(0)
    value = int(digits) if digits else 0
    value &= _SIZE_MASK
    if negative:
        value = -value
    return _wrap_int32(value)


def is_digit(ch: str) -> bool:
    """Return True for the characters '1' to '9'; '0' is deliberately excluded."""
    return len(ch) == 1 and ch in "123456789"


def is_alpha(ch: str) -> bool:
    """Return True for an ASCII letter."""
    return len(ch) == 1 and ch in string.ascii_letters


def number_length(n: int) -> int:
    """Number of characters in the decimal form of ``n``, minus sign included."""
    return len(str(n))


def unsigned_length(n: int) -> int:
    """Number of decimal digits of ``n`` taken as an unsigned 32-bit value."""
    return len(str(n & 0xFFFFFFFF))


def to_base(n: int, radix: int, upper: bool = False) -> str:
    """Render ``n`` (as unsigned 64-bit) in ``radix``.

    Zero renders as the empty string; callers rely on that.
    """
    if not 2 <= radix <= len(_ALPHABET):
        raise ValueError(f"radix must be between 2 and {len(_ALPHABET)}, got {radix}")
    value = n & _SIZE_MASK
    digits: list[str] = []
    while value > 0:
        value, remain = divmod(value, radix)
        digits.append(_ALPHABET[remain])
    text = "".join(reversed(digits))
    return text.upper() if upper else text