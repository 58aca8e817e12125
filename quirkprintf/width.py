"""Rendering of conversions that carry only a field width (``%5d`` and the like)."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .numtext import number_length, unsigned_length
from .state import FormatState, to_uint32

_NULL_TEXT = "(null)"


def _or_null(text: Optional[str]) -> str:
    return _NULL_TEXT if text is None else text


def _pad_field(
    state: FormatState,
    emit: Callable[[], Any],
    size: int,
    left: bool = False,
    fill: str = " ",
) -> None:
    """Emit a value that prints ``size`` characters, padded out to the width."""
    pad = state.put_zeros if fill == "0" else state.put_spaces
    gap = state.width - size
    if left:
        emit()
        if gap > 0:
            pad(gap)
    else:
        if gap > 0:
            pad(gap)
        emit()


def _pad_text(state: FormatState, text: str, left: bool = False, fill: str = " ") -> None:
    _pad_field(state, lambda: state.put_str(text), len(text), left=left, fill=fill)


def _pad_unsigned(state: FormatState, value: int, size: int, left: bool = False, fill: str = " ") -> None:
    """Pad a value, printing it unsigned when it fills the width by itself."""
    emit = state.put_unsigned if state.width <= size else state.put_number
    _pad_field(state, lambda: emit(value), size, left=left, fill=fill)


def width_di(state: FormatState, nbr: int) -> None:
    """Right-align a signed decimal in the field width with spaces."""
    _pad_field(state, lambda: state.put_number(nbr), number_length(nbr))


def width_s(state: FormatState, text: Optional[str]) -> None:
    """Right-align a string with spaces; a null string prints as ``(null)``."""
    _pad_text(state, _or_null(text))


def width_c(state: FormatState, ch: Any) -> None:
    """Right-align one character with spaces."""
    _pad_field(state, lambda: state.put_char(ch), 1)


def width_u(state: FormatState, nbr: int) -> None:
    """Right-align an unsigned decimal with spaces."""
    value = to_uint32(nbr)
    _pad_unsigned(state, value, unsigned_length(value))


def width_x(state: FormatState, text: str) -> None:
    """Render hexadecimal digits in a field width.

    When the field is wider than the digits, the field is filled with spaces
    followed by a single ``0`` in place of the digits.
    """
    if state.width <= len(text):
        state.put_str(text)
    else:
        _pad_field(state, lambda: state.put_char("0"), 1)


def width_p(state: FormatState, text: str) -> None:
    """Right-align an address text with spaces."""
    _pad_text(state, text)