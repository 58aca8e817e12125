"""Rendering of conversions that carry a precision (``%.5d`` and the like)."""

from __future__ import annotations

from typing import Optional

from .numtext import number_length, unsigned_length
from .state import FormatState, to_uint32
from .width import _NULL_TEXT, _pad_field


def _precise(state: FormatState, nbr: int) -> None:
    """Print a number preceded by zeros up to the precision."""
    state.put_zeros(state.precision - number_length(nbr))
    state.put_number(nbr)


def _signed_precise(state: FormatState, nbr: int) -> None:
    """Like ``_precise``, with a negative number's sign before the zeros."""
    if nbr < 0:
        state.put_char("-")
        nbr = -nbr
    _precise(state, nbr)


def dot_di(state: FormatState, nbr: int) -> None:
    """Render a signed decimal padded with zeros up to the precision.

    A zero value with a zero precision prints nothing, unless the zero flag
    is combined with a width or a width-then-dot form.
    """
    if nbr != 0:
        _signed_precise(state, nbr)
        return
    if state.zero == 1 and state.dot_exception == 0 and state.width == 0 and state.precision == 0:
        return
    if state.zero == 0 and state.precision == 0:
        return
    _precise(state, nbr)


def dot_u(state: FormatState, nbr: int) -> None:
    """Render an unsigned decimal padded with zeros up to the precision."""
    value = to_uint32(nbr)
    if state.width == 0 and state.precision == 0 and value == 0:
        return
    state.put_zeros(state.precision - unsigned_length(value))
    state.put_unsigned(value)


def dot_s(state: FormatState, text: str) -> None:
    """Render a string cut to the precision.

    In the width-then-dot form the padding is reckoned from the full length
    of the string, not from the cut one.
    """
    if state.dot_exception == 1 and state.width >= len(text) and state.precision > 0:
        _pad_field(state, lambda: state.put_str(text[: state.precision]), len(text))
    elif state.precision > 0:
        state.put_str(text[: state.precision])
    elif state.precision == 0 and state.width == 0:
        return
    else:
        state.put_str(text)


def dot_null_s(state: FormatState) -> None:
    """Render a null string under a precision."""
    if state.precision == 0:
        return
    if state.precision > 0:
        dot_s(state, _NULL_TEXT)
    else:
        state.put_str(_NULL_TEXT)


def render_optional_s(state: FormatState, text: Optional[str]) -> None:
    """Render a string under a precision, handling a null string."""
    if text is None:
        dot_null_s(state)
    else:
        dot_s(state, text)