"""Rendering of zero-padded conversions (``%05d`` and the like)."""

from __future__ import annotations

from typing import Any, Optional

from .numtext import number_length, unsigned_length
from .state import FormatState, to_int32, to_uint32
from .width import _or_null, _pad_field, _pad_text, _pad_unsigned


def zero_di(state: FormatState, nbr: int) -> None:
    """Pad a signed decimal with zeros.

    The sign goes in front of the zeros only when the state's sign flag is
    set; otherwise the zeros come before the number as written.
    """
    size = number_length(nbr)
    if state.width > size and state.sign == 1:
        state.put_char("-")
        state.put_zeros(state.width - size)
        state.put_number(to_int32(-nbr))
    else:
        _pad_field(state, lambda: state.put_number(nbr), size, fill="0")


def zero_s(state: FormatState, text: Optional[str]) -> None:
    """Pad a string with zeros on the left."""
    _pad_text(state, _or_null(text), fill="0")


def zero_u(state: FormatState, nbr: int) -> None:
    """Pad an unsigned decimal with zeros."""
    value = to_uint32(nbr)
    _pad_unsigned(state, value, unsigned_length(value), fill="0")


def zero_c(state: FormatState, ch: Any) -> None:
    """Pad one character with zeros on the left."""
    _pad_field(state, lambda: state.put_char(ch), 1, fill="0")


def zero_x(state: FormatState, text: str) -> None:
    """Render hexadecimal digits padded with zeros, honouring a precision.

    ``text`` is empty for the value zero.
    """
    if state.width > len(text):
        _pad_text(state, text, fill="0")
    elif not text:
        if state.precision == 0:
            return
        if state.precision > 0:
            state.put_zeros(state.precision - 1)
        state.put_char("0")
    else:
        if state.precision > 0:
            state.put_zeros(state.precision - len(text))
        state.put_str(text)