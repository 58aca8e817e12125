"""Rendering of conversions whose width comes from an argument (``%*d`` and the like)."""

from __future__ import annotations

from typing import Any, Optional

from .numtext import number_length, unsigned_length
from .state import FormatState, to_int32, to_uint32
from .width import _pad_field, _pad_text


def _layout(state: FormatState) -> dict:
    """Alignment and fill for a starred width: zeros only when right-aligned."""
    left = state.is_minus == 1
    return {"left": left, "fill": "0" if state.zero == 1 and not left else " "}


def star_di(state: FormatState, nbr: int) -> None:
    """Render a signed decimal in a width taken from the arguments.

    With the zero flag a negative number gets its sign before the zeros.
    """
    size = number_length(nbr)
    if state.width > size and state.is_minus != 1 and state.zero == 1 and nbr < 0:
        state.put_char("-")
        state.put_zeros(state.width - size)
        state.put_number(to_int32(-nbr))
    else:
        _pad_field(state, lambda: state.put_number(nbr), size, **_layout(state))


def star_p(state: FormatState, text: str) -> None:
    """Align an address text in a width taken from the arguments."""
    _pad_text(state, text, left=state.is_minus == 1)


def star_u(state: FormatState, nbr: int) -> None:
    """Render an unsigned decimal in a width taken from the arguments."""
    value = to_uint32(nbr)
    _pad_field(state, lambda: state.put_unsigned(value), unsigned_length(value), **_layout(state))


def star_c(state: FormatState, ch: Any) -> None:
    """Align one character in a width taken from the arguments."""
    _pad_field(state, lambda: state.put_char(ch), 1, left=state.is_minus == 1)


def star_s(state: FormatState, text: Optional[str]) -> None:
    """Align a string in a width taken from the arguments.

    A null string is not accepted here.
    """
    if text is None:
        raise TypeError("a null string cannot be printed with a '*' width")
    _pad_text(state, text, left=state.is_minus == 1)


def star_x(state: FormatState, text: str) -> None:
    """Render hexadecimal digits in a width taken from the arguments.

    ``text`` is empty for the value zero, which prints as a single ``0``
    except under the zero flag, where the field is filled with zeros only.
    """
    if state.width <= len(text):
        state.put_str(text or "0")
    elif state.zero == 1:
        _pad_text(state, text, **_layout(state))
    else:
        _pad_text(state, text or "0", left=state.is_minus == 1)