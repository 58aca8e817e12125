"""Rendering of conversions that combine a width with a precision.

These cover the ``%8.3d``, ``%-8.3s``, ``%*.*x`` family of forms, where the
width and the precision both take part in the layout.
"""

from __future__ import annotations

from typing import Optional

from .dot import _precise, _signed_precise
from .numtext import number_length, unsigned_length
from .state import FormatState, to_int32, to_uint32
from .width import _or_null, _pad_field, _pad_text


def _put_zero_digit(state: FormatState, left: bool = False, fill: str = " ") -> None:
    _pad_field(state, lambda: state.put_char("0"), 1, left=left, fill=fill)


# --- signed decimals -------------------------------------------------------


def exception_di(state: FormatState, nbr: int) -> None:
    """Render a signed decimal under both a width and a precision."""
    size = number_length(nbr)
    if (
        state.dot_exception == 1
        and state.is_minus == 1
        and nbr < 0
        and state.precision == size
    ):
        _signed_precise(state, nbr)
        state.put_spaces(state.width - state.precision - 1)
    elif state.width > state.precision and state.precision <= size:
        _di_width_wins(state, nbr)
    elif state.precision >= size:
        _di_precision_wins(state, nbr)
    elif nbr == 0 and state.precision < 1:
        return
    else:
        state.put_number(nbr)


def _di_zero_value(state: FormatState, nbr: int) -> None:
    def number() -> None:
        state.put_number(nbr)

    if state.zero == 1 and state.precision > 0:
        left = state.precision == number_length(nbr) and state.is_minus == 1
        _pad_field(state, number, 1, left=left)
    elif state.is_minus != 0 and state.dot_exception == 1 and state.precision != 0:
        _pad_field(state, number, 1, left=True)
    elif state.width >= 0 and state.precision < 0:
        if state.zero == 1 and state.dot_exception == 1 and state.star == 1:
            state.put_zeros(state.width - 1)
        elif state.zero == 0:
            state.put_spaces(state.width - 1)
        number()
    elif state.width > 0 and state.precision == 1:
        _pad_field(state, number, 1)
    else:
        state.put_spaces(state.width)


def _di_precision_wins(state: FormatState, nbr: int) -> None:
    size = number_length(nbr)
    if state.width <= state.precision:
        _signed_precise(state, nbr)
        return
    if nbr < 0:
        nbr = to_int32(-nbr)
        state.precision += 1
        state.sign = 1
    if state.sign == 1 and state.is_minus == 1:
        state.put_char("-")
        state.put_zeros(state.precision - size)
        state.put_number(nbr)
        state.put_spaces(state.width - state.precision)
    elif state.sign == 1:
        state.put_spaces(state.width - state.precision)
        state.put_char("-")
        state.put_zeros(state.precision - number_length(nbr) - 1)
        state.put_number(nbr)
    else:
        _pad_field(state, lambda: _precise(state, nbr), state.precision, left=state.is_minus != 0)


def _di_width_wins(state: FormatState, nbr: int) -> None:
    size = number_length(nbr)
    if nbr == 0:
        _di_zero_value(state, nbr)
    elif nbr < 0 and state.precision >= size and state.is_minus == 1:
        _signed_precise(state, nbr)
        state.put_spaces(state.width - number_length(-nbr) - 2)
    elif state.sign == 1 or state.is_minus != 0:
        _pad_field(state, lambda: state.put_number(nbr), size, left=True)
    elif nbr < 0 and state.precision >= size:
        state.put_spaces(state.width - size - 1)
        _signed_precise(state, nbr)
    elif (
        state.zero == 1
        and state.dot_exception == 1
        and state.star == 1
        and state.precision < 0
    ):
        if nbr < 0:
            nbr = -nbr
            state.put_char("-")
        state.put_zeros(state.width - size)
        state.put_number(nbr)
    else:
        _pad_field(state, lambda: state.put_number(nbr), size)


# --- unsigned decimals -----------------------------------------------------


def exception_u(state: FormatState, nbr: int) -> None:
    """Render an unsigned decimal under both a width and a precision."""
    value = to_uint32(nbr)
    size = unsigned_length(value)
    if state.width > state.precision and state.precision <= size:
        _u_width_wins(state, value)
    elif state.precision >= size:
        _u_precision_wins(state, value)
    elif state.width == state.precision and value == 0 and state.is_minus == 0:
        return
    elif (
        state.width == 0
        and state.precision == 0
        and value == 0
        and state.is_minus == 1
    ):
        return
    else:
        state.put_number(value)


def _u_zero_value(state: FormatState, value: int) -> None:
    if state.zero == 1 and state.precision > 0:
        _pad_field(state, lambda: state.put_number(value), 1)
    elif state.precision < 0:
        zero_fill = state.zero == 1
        _pad_field(
            state,
            lambda: state.put_char("0"),
            unsigned_length(value),
            left=not zero_fill and state.is_minus == 1,
            fill="0" if zero_fill else " ",
        )
    elif state.width > 0 and state.precision > 0:
        _put_zero_digit(state, left=state.is_minus == 1)
    else:
        state.put_spaces(state.width)


def _u_precision_wins(state: FormatState, value: int) -> None:
    def emit() -> None:
        state.put_zeros(state.precision - unsigned_length(value))
        state.put_number(value)

    _pad_field(state, emit, state.precision, left=state.is_minus != 0)


def _u_width_wins(state: FormatState, value: int) -> None:
    if value == 0:
        _u_zero_value(state, value)
        return
    left = state.sign == 1 or state.is_minus != 0
    fill = "0" if not left and state.zero == 1 and state.precision < 0 else " "
    _pad_field(state, lambda: state.put_number(value), unsigned_length(value), left=left, fill=fill)


# --- hexadecimal -----------------------------------------------------------


def exception_x(state: FormatState, text: str) -> None:
    """Render hexadecimal digits under both a width and a precision.

    ``text`` is empty for the value zero.
    """
    size = len(text)
    if state.width > state.precision and state.precision <= size:
        _x_width_wins(state, text)
    elif state.precision >= size:
        _x_precision_wins(state, text)
    else:
        state.put_str(text)


def _x_width_wins(state: FormatState, text: str) -> None:
    left = state.sign == 1 or state.is_minus != 0
    if not text and (left or state.is_minus == 1):
        if state.precision == 0:
            state.put_spaces(state.width)
        elif state.is_minus == 1 and state.zero == 0:
            _put_zero_digit(state, left=True)
        else:
            state.put_char("0")
    elif left:
        _pad_text(state, text, left=True)
    elif not text:
        _x_zero_value(state)
    else:
        fill = "0" if state.zero == 1 and state.precision < 0 else " "
        _pad_text(state, text, fill=fill)


def _x_zero_value(state: FormatState) -> None:
    if state.precision < 0 and state.width >= 0:
        _put_zero_digit(state, fill="0" if state.zero == 1 else " ")
    elif state.width > 0 and state.precision <= 0:
        state.put_spaces(state.width)
    else:
        _put_zero_digit(state)


def _x_precision_wins(state: FormatState, text: str) -> None:
    def emit() -> None:
        state.put_zeros(state.precision - len(text))
        state.put_str(text)

    _pad_field(state, emit, state.precision, left=state.is_minus != 0)


# --- strings ---------------------------------------------------------------


def exception_s(state: FormatState, text: Optional[str]) -> None:
    """Render a string under both a width and a precision.

    A null string prints as ``(null)``. With a negative precision and
    neither the minus flag nor the width-then-dot form, no padding is added.
    """
    value = _or_null(text)
    if state.dot_exception == 1 and state.precision == 0:
        state.put_spaces(state.width)
    elif state.precision < 0:
        if state.is_minus == 1 or state.dot_exception == 1:
            _pad_text(state, value, left=state.is_minus != 0)
        else:
            state.put_str(value)
    elif state.precision < len(value):
        _pad_field(
            state,
            lambda: state.put_str(value[: state.precision]),
            state.precision,
            left=state.is_minus != 0,
        )
    elif state.is_minus != 0:
        _pad_text(state, value, left=True)
    else:
        if state.dot_exception == 1 and state.width >= len(value):
            state.put_spaces(state.width - len(value))
        state.put_str(value[: state.precision])