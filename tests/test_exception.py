import pytest

from quirkprintf.exception import exception_di, exception_s, exception_u, exception_x
from quirkprintf.numtext import to_base
from quirkprintf.state import FormatState


def _render(func, value, **flags):
    state = FormatState(**flags)
    func(state, value)
    out = state.text()
    assert state.length == len(out)
    return out, state


@pytest.mark.parametrize(
    "nbr, width, precision, minus",
    [
        (42, 8, 5, 0),
        (42, 8, 5, 1),
        (-42, 8, 5, 0),
        (-42, 8, 5, 1),
        (-42, 3, 5, 0),
        (7, 0, 5, 0),
        (1234, 8, 2, 0),
        (-42, 8, 3, 0),
        (-42, 8, 3, 1),
        (1234, 0, 1, 0),
    ],
)
def test_di_matches_printf(nbr, width, precision, minus):
    out, _ = _render(exception_di, nbr, width=width, precision=precision, is_minus=minus)
    spec = f"%{'-' if minus else ''}{width}.{precision}d"
    assert out == spec % nbr


def test_di_negative_sets_sign_and_bumps_precision():
    _, state = _render(exception_di, -42, width=8, precision=5)
    assert state.sign == 1
    assert state.precision == 6


def test_di_dot_exception_minus_equal_precision():
    out, _ = _render(
        exception_di, -42, width=8, precision=3, is_minus=1, dot_exception=1
    )
    assert out == "%-8.3d" % -42


def test_di_negative_precision_is_plain_width():
    out, _ = _render(exception_di, 42, width=6, precision=-1)
    assert out == "%6d" % 42


def test_di_zero_flag_star_negative_precision():
    out, _ = _render(
        exception_di, -42, width=6, precision=-1, zero=1, dot_exception=1, star=1
    )
    assert out == "%06d" % -42


def test_di_zero_value_zero_precision_fills_width():
    out, _ = _render(exception_di, 0, width=5, precision=0, dot_exception=1)
    assert out == " " * 5


def test_di_zero_value_no_width_prints_nothing():
    out, state = _render(exception_di, 0, width=0, precision=0)
    assert out == ""
    assert state.length == 0


@pytest.mark.parametrize(
    "nbr, width, precision, minus",
    [
        (42, 8, 5, 0),
        (42, 8, 5, 1),
        (1234, 6, 2, 0),
        (4294967295, 12, -1, 0),
        (7, 0, 4, 0),
    ],
)
def test_u_matches_printf(nbr, width, precision, minus):
    out, _ = _render(exception_u, nbr, width=width, precision=precision, is_minus=minus)
    if precision < 0:
        spec = f"%{'-' if minus else ''}{width}u"
    else:
        spec = f"%{'-' if minus else ''}{width}.{precision}u"
    assert out == spec % nbr


def test_u_wraps_negative_to_unsigned():
    out, _ = _render(exception_u, -1, width=12, precision=-1)
    assert out == "%12u" % 4294967295


def test_u_zero_value_zero_precision_fills_width():
    out, _ = _render(exception_u, 0, width=5, precision=0, dot_exception=1)
    assert out == " " * 5


def test_u_zero_value_zero_flag():
    out, _ = _render(exception_u, 0, width=4, precision=-1, zero=1)
    assert out == "%04u" % 0


@pytest.mark.parametrize("minus", [0, 1])
def test_u_zero_value_no_width_prints_nothing(minus):
    out, _ = _render(exception_u, 0, width=0, precision=0, is_minus=minus)
    assert out == ""


@pytest.mark.parametrize(
    "value, width, precision, minus, upper",
    [
        (255, 8, 5, 0, False),
        (255, 8, 5, 1, False),
        (255, 6, 1, 0, False),
        (255, 8, 5, 0, True),
        (0, 4, 2, 1, False),
        (3054, 2, 6, 0, False),
    ],
)
def test_x_matches_printf(value, width, precision, minus, upper):
    text = to_base(value, 16, upper)
    out, _ = _render(exception_x, text, width=width, precision=precision, is_minus=minus)
    spec = f"%{'-' if minus else ''}{width}.{precision}{'X' if upper else 'x'}"
    assert out == spec % value


def test_x_zero_value_zero_precision_fills_width():
    out, _ = _render(exception_x, "", width=5, precision=0, dot_exception=1)
    assert out == " " * 5


def test_x_zero_value_zero_flag():
    out, _ = _render(exception_x, "", width=4, precision=-1, zero=1)
    assert out == "%04x" % 0


@pytest.mark.parametrize(
    "text, width, precision, minus",
    [
        ("hello", 8, 3, 0),
        ("hello", 8, 3, 1),
        ("hello", 4, 0, 0),
        ("hi", 6, 5, 0),
        ("hi", 6, 5, 1),
    ],
)
def test_s_matches_printf(text, width, precision, minus):
    out, _ = _render(
        exception_s, text, width=width, precision=precision, is_minus=minus, dot_exception=1
    )
    spec = f"%{'-' if minus else ''}{width}.{precision}s"
    assert out == spec % text


def test_s_null_prints_placeholder():
    out, _ = _render(exception_s, None, width=8, precision=3, dot_exception=1)
    assert out == "%8.3s" % "(null)"


def test_s_negative_precision_with_dot_form_pads():
    out, _ = _render(exception_s, "hello", width=7, precision=-1, dot_exception=1)
    assert out == "%7s" % "hello"


def test_s_negative_precision_without_flags_has_no_padding():
    out, _ = _render(exception_s, "hello", width=7, precision=-1)
    assert out == "hello"


def test_s_left_and_right_share_content():
    left, _ = _render(exception_s, "hello", width=9, precision=2, is_minus=1)
    right, _ = _render(exception_s, "hello", width=9, precision=2)
    assert left.strip() == right.strip()
    assert len(left) == len(right) == 9
    assert left[0] != " " and right[-1] != " "