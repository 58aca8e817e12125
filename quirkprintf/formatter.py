"""Format-string driver: walks the format and dispatches each conversion."""

from __future__ import annotations

import sys
from typing import Any, Optional, Sequence, TextIO

from .dot import dot_di, dot_u, render_optional_s
from .exception import exception_di, exception_s, exception_u, exception_x
from .minus import minus_c, minus_di, minus_p, minus_s, minus_u, minus_x
from .numtext import atoi, is_alpha, is_digit, number_length, to_base
from .star import star_c, star_di, star_p, star_s, star_u, star_x
from .state import FormatState, to_int32
from .width import width_c, width_di, width_p, width_s, width_u, width_x
from .zero import zero_c, zero_di, zero_s, zero_u, zero_x

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_NULL_TEXT = "(null)"


class _Dispatcher:
    """Reads flags after a ``%`` and hands the argument to the right renderer."""

    def __init__(self, fmt: str, state: FormatState) -> None:
        self.fmt = fmt
        self.state = state

    def _at(self, i: int) -> str:
        return self.fmt[i] if 0 <= i < len(self.fmt) else ""

    def _hex(self, upper: bool) -> str:
        return to_base(self.state.next_unsigned(), 16, upper)

    # --- entry -------------------------------------------------------------

    def check_flag(self, i: int) -> None:
        self.state.reset()
        c = self._at(i)
        if c == "0":
            self._zero_flag(i)
        elif c == ".":
            self._dot_flag(i)
        elif c == "*":
            self._star_flag(i)
        elif c == "-":
            self._minus_flag(i)
        elif is_digit(c):
            self._width_flag(i)
        else:
            self._plain(i)

    def _plain(self, i: int) -> None:
        st = self.state
        c = self._at(i)
        if c == "c":
            st.put_char(st.next_int())
        elif c == "s":
            text = st.next_str()
            st.put_str(_NULL_TEXT if text is None else text)
        elif c in ("d", "i"):
            st.put_number(st.next_int())
        elif c == "p":
            st.put_str(st.next_pointer_text())
        elif c == "u":
            st.put_unsigned(st.next_unsigned())
        elif c == "x":
            st.put_in_base(st.next_unsigned(), _HEX_LOWER)
        elif c == "X":
            st.put_in_base(st.next_unsigned(), _HEX_UPPER)
        elif c == "%":
            st.put_char("%")
        else:
            return
        st.index = i

    # --- zero flag ---------------------------------------------------------

    def _zero_flag(self, i: int) -> None:
        st = self.state
        st.zero = 1
        while self._at(i) == "0":
            i += 1
        c = self._at(i)
        if c == ".":
            self._dot_flag(i)
        elif c == "-":
            self._minus_flag(i)
        elif c == "*":
            self._star_flag(i)
        width = 0
        if is_digit(self._at(i)):
            width = atoi(self.fmt[i:])
            after = self._at(i + number_length(width))
            if not is_digit(after) and not is_alpha(after):
                self._width_flag(i)
            else:
                i += number_length(width)
        st.width = width
        self._zero_convert(i)

    def _zero_convert(self, i: int) -> None:
        st = self.state
        c = self._at(i)
        if c in ("d", "i"):
            nbr = st.next_int()
            if nbr < 0:
                st.sign = 1
            zero_di(st, nbr)
        elif c == "s":
            zero_s(st, st.next_str())
        elif c == "u":
            zero_u(st, st.next_unsigned())
        elif c == "c":
            zero_c(st, st.next_int())
        elif c == "x":
            zero_x(st, self._hex(False))
        elif c == "X":
            zero_x(st, self._hex(True))
        else:
            return
        st.index += i

    # --- precision ---------------------------------------------------------

    def _dot_flag(self, i: int) -> None:
        st = self.state
        while self._at(i) == ".":
            i += 1
        while self._at(i) == "0":
            i += 1
        if is_digit(self._at(i)):
            st.precision = atoi(self.fmt[i:])
            i += number_length(st.precision)
        if self._at(i) == "*" and st.dot_exception == 0:
            st.star = 1
            st.precision = st.next_int()
            self._dot_convert(i + 1)
        elif st.dot_exception == 1 or st.is_minus == 1:
            self._exception(i)
        else:
            self._dot_convert(i)

    def _dot_convert(self, i: int) -> None:
        st = self.state
        c = self._at(i)
        if c in ("d", "i"):
            dot_di(st, st.next_int())
        elif c == "s":
            render_optional_s(st, st.next_str())
        elif c == "c":
            st.put_char(st.next_int())
        elif c == "u":
            dot_u(st, st.next_unsigned())
        elif c == "x":
            zero_x(st, self._hex(False))
        elif c == "X":
            zero_x(st, self._hex(True))
        else:
            return
        st.index += i

    # --- width and precision together --------------------------------------

    def _exception(self, i: int) -> None:
        st = self.state
        if st.width < 0:
            st.width = to_int32(-st.width)
            st.is_minus += 1
        if self._at(i) == "*":
            st.precision = to_int32(st.next_long())
            i += 1
        c = self._at(i)
        if c in ("d", "i"):
            exception_di(st, st.next_int())
            st.index += i
        elif c == "u":
            exception_u(st, st.next_unsigned())
            st.index += i
        elif c == "x":
            exception_x(st, self._hex(False))
            st.index = i
        elif c == "X":
            exception_x(st, self._hex(True))
            st.index = i
        elif c == "s":
            exception_s(st, st.next_str())
            st.index = i

    # --- width from an argument --------------------------------------------

    def _star_flag(self, i: int) -> None:
        st = self.state
        st.star = 1
        width = 0
        if self._at(i) == "*":
            width = st.next_int()
            i += 1
        st.width = width
        if self._at(i) == ".":
            st.dot_exception = 1
            self._dot_flag(i)
        if st.width < 0:
            st.width = to_int32(-st.width)
            self._minus_convert(i)
        else:
            self._star_convert(i)

    def _star_convert(self, i: int) -> None:
        st = self.state
        c = self._at(i)
        if c in ("d", "i"):
            star_di(st, st.next_int())
        elif c == "p":
            star_p(st, st.next_pointer_text())
        elif c == "c":
            star_c(st, st.next_int())
        elif c == "u":
            star_u(st, st.next_unsigned())
        elif c == "s":
            star_s(st, st.next_str())
        elif c == "x":
            star_x(st, self._hex(False))
        elif c == "X":
            star_x(st, self._hex(True))
        else:
            return
        st.index += i

    # --- left alignment ----------------------------------------------------

    def _minus_flag(self, i: int) -> None:
        st = self.state
        st.is_minus = 1
        while self._at(i) == "-":
            i += 1
        if self._at(i) == "0":
            self._zero_flag(i)
        if self._at(i) == "*":
            self._star_flag(i)
        if is_digit(self._at(i)):
            st.width = atoi(self.fmt[i:])
            i += number_length(st.width)
        if self._at(i) == ".":
            self._dot_flag(i)
        self._minus_convert(i)

    def _minus_convert(self, i: int) -> None:
        st = self.state
        c = self._at(i)
        if c in ("d", "i"):
            minus_di(st, st.next_int())
            st.index = i
        elif c == "u":
            minus_u(st, st.next_unsigned())
            st.index = i
        elif c == "c":
            minus_c(st, st.next_int())
            st.index = i
        elif c == "x":
            minus_x(st, self._hex(False))
            st.index += i
        elif c == "X":
            minus_x(st, self._hex(True))
            st.index += i
        elif c == "s":
            text = st.next_str()
            st.index += i
            minus_s(st, text)
        elif c == "p":
            minus_p(st, st.next_pointer_text())
            st.index += i

    # --- plain field width -------------------------------------------------

    def _width_flag(self, i: int) -> None:
        st = self.state
        st.width = atoi(self.fmt[i:])
        i += number_length(st.width)
        while self._at(i) == "0":
            i += 1
        c = self._at(i)
        if c == ".":
            st.dot_exception = 1
            self._dot_flag(i)
            return
        if c in ("d", "i"):
            width_di(st, st.next_int())
        elif c == "s":
            width_s(st, st.next_str())
        elif c == "c":
            width_c(st, st.next_int())
        elif c == "u":
            width_u(st, st.next_unsigned())
        elif c == "x":
            width_x(st, self._hex(False))
        elif c == "X":
            width_x(st, self._hex(True))
        elif c == "p":
            width_p(st, st.next_pointer_text())
        else:
            return
        st.index = i


def _render(fmt: Optional[str], args: Sequence[Any]) -> FormatState:
    if fmt is None:
        raise TypeError("format must be a string, not None")
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a string, not {type(fmt).__name__}")
    fmt = fmt.split("\0", 1)[0]
    state = FormatState(args=tuple(args))
    dispatcher = _Dispatcher(fmt, state)
    i = 0
    while i < len(fmt):
        if fmt[i] == "%":
            dispatcher.check_flag(i + 1)
            if state.index < i:
                raise ValueError(
                    f"unsupported or incomplete conversion at position {i} in format"
                )
            i = state.index
        else:
            state.put_char(fmt[i])
        i += 1
    return state


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the result."""
    return _render(fmt, args).text()


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Format ``args`` according to ``fmt``, write it out and return its length."""
    state = _render(fmt, args)
    out = sys.stdout if stream is None else stream
    out.write(state.text())
    return state.length