"""Rendering of left-aligned conversions (``%-5d`` and the like)."""

from __future__ import annotations

from typing import Any, Optional

from .numtext import number_length, unsigned_length
from .state import FormatState, to_int32
from .width import _or_null, _pad_field, _pad_text, _pad_unsigned


def minus_di(state: FormatState, nbr: int) -> None:
    """Left-align a signed decimal, padding with spaces on the right."""
    _pad_field(state, lambda: state.put_number(nbr), number_length(nbr), left=True)


def minus_c(state: FormatState, ch: Any) -> None:
    """Left-align one character."""
    _pad_field(state, lambda: state.put_char(ch), 1, left=True)


def minus_u(state: FormatState, nbr: int) -> None:
    """Left-align an unsigned value.

    The value is held as a signed 32-bit integer, so a padded value above
    the signed range prints with a minus sign.
    """
    value = to_int32(nbr)
    _pad_unsigned(state, value, unsigned_length(value), left=True)


def minus_s(state: FormatState, text: Optional[str]) -> None:
    """Left-align a string; a null string prints as ``(null)``."""
    _pad_text(state, _or_null(text), left=True)


def minus_x(state: FormatState, text: str) -> None:
    """Render hexadecimal digits in a left-aligned field.

    With the minus flag set and a field wider than the digits, a single
    ``0`` is printed followed by spaces.
    """
    if state.width <= len(text):
        state.put_str(text)
    elif state.is_minus == 1:
        _pad_field(state, lambda: state.put_char("0"), 1, left=True)
    elif not text:
        state.put_char("0")
    else:
        _pad_text(state, text, left=True)


def minus_p(state: FormatState, text: str) -> None:
    """Left-align an address text."""
    _pad_text(state, text, left=True)