"""Per-call formatting state: argument cursor, flags and output buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from .numtext import to_base

_UINT64_MASK = (1 << 64) - 1


def to_int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    return ((value + (1 << 31)) % (1 << 32)) - (1 << 31)


def to_uint32(value: int) -> int:
    """Wrap an integer to an unsigned 32-bit value."""
    return value & 0xFFFFFFFF


def _as_integer(value: Any) -> int:
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str) and len(value) == 1:
        return ord(value)
    raise TypeError(f"expected an integer argument, got {type(value).__name__}")


@dataclass
class FormatState:
    """Flags of the conversion being processed, plus the arguments and output."""

    args: Sequence[Any] = ()
    zero: int = 0
    width: int = 0
    index: int = 0
    length: int = 0
    sign: int = 0
    dot_exception: int = 0
    precision: int = 0
    is_minus: int = 0
    star: int = 0
    _position: int = field(default=0, repr=False)
    _chunks: list = field(default_factory=list, repr=False)

    def reset(self) -> None:
        """Clear the per-conversion flags. The star flag is kept."""
        self.width = 0
        self.index = 0
        self.sign = 0
        self.zero = 0
        self.precision = 0
        self.dot_exception = 0
        self.is_minus = 0

    def _next(self) -> Any:
        if self._position >= len(self.args):
            raise TypeError("not enough arguments for format string")
        value = self.args[self._position]
        self._position += 1
        return value

    def next_int(self) -> int:
        """Take the next argument as a signed 32-bit integer."""
        return to_int32(_as_integer(self._next()))

    def next_unsigned(self) -> int:
        """Take the next argument as an unsigned 32-bit integer."""
        return to_uint32(_as_integer(self._next()))

    def next_long(self) -> int:
        """Take the next argument as a signed 64-bit integer."""
        value = _as_integer(self._next()) & _UINT64_MASK
        return value - (1 << 64) if value >= (1 << 63) else value

    def next_str(self) -> Optional[str]:
        """Take the next argument as a string, or None for a null string."""
        value = self._next()
        if value is None:
            return None
        if not isinstance(value, str):
            raise TypeError(f"expected a string argument, got {type(value).__name__}")
        return value.split("\0", 1)[0]

    def next_pointer_text(self) -> str:
        """Take the next argument as an address and render it as ``0x...``."""
        value = self._next()
        address = 0 if value is None else _as_integer(value)
        text = "0x" + to_base(address & _UINT64_MASK, 16)
        if text == "0x":
            text += "0"
        return text

    def put_char(self, ch: Any) -> None:
        """Write one character (a one-character string or a byte value)."""
        if isinstance(ch, str):
            if len(ch) != 1:
                raise ValueError("put_char expects exactly one character")
            self._chunks.append(ch)
        else:
            self._chunks.append(chr(_as_integer(ch) & 0xFF))
        self.length += 1

    def put_str(self, text: Optional[str]) -> None:
        """Write every character of ``text``; None writes nothing."""
        if not text:
            return
        self._chunks.append(text)
        self.length += len(text)

    def put_number(self, n: int) -> None:
        """Write a signed decimal whose magnitude is taken as unsigned 32-bit."""
        if n < 0:
            self.put_char("-")
            magnitude = to_uint32(-n)
        else:
            magnitude = to_uint32(n)
        self.put_str(str(magnitude))

    def put_unsigned(self, n: int) -> None:
        """Write ``n`` as an unsigned 32-bit decimal."""
        self.put_str(str(to_uint32(n)))

    def put_in_base(self, n: int, digits: str) -> int:
        """Write ``n`` (unsigned 64-bit) using ``digits`` as the base alphabet."""
        radix = len(digits)
        if radix < 2:
            raise ValueError("a base needs at least two digits")
        value = n & _UINT64_MASK
        out: list[str] = []
        rest = value
        while True:
            rest, remain = divmod(rest, radix)
            out.append(digits[remain])
            if rest == 0:
                break
        self.put_str("".join(reversed(out)))
        return value

    def put_zeros(self, count: int) -> None:
        """Write ``count`` zeros; nothing if ``count`` is not positive."""
        if count > 0:
            self.put_str("0" * count)

    def put_spaces(self, count: int) -> None:
        """Write ``count`` spaces; nothing if ``count`` is not positive."""
        if count > 0:
            self.put_str(" " * count)

    def text(self) -> str:
        """Everything written so far."""
        return "".join(self._chunks)