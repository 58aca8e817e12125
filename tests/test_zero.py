import pytest

from quirkprintf.state import FormatState
from quirkprintf.zero import zero_c, zero_di, zero_s, zero_u, zero_x


def render(fn, value, **flags):
    state = FormatState(**flags)
    fn(state, value)
    return state, state.text()


@pytest.mark.parametrize(
    "fn, value, flags, expected",
    [
        (zero_di, 42, {"width": 5, "zero": 1}, "00042"),
        (zero_di, -42, {"width": 6, "zero": 1, "sign": 1}, "-00042"),
        (zero_di, -42, {"width": 6, "zero": 1}, "000-42"),
        (zero_di, 123456, {"width": 3, "zero": 1}, "123456"),
        (zero_s, "hi", {"width": 5, "zero": 1}, "000hi"),
        (zero_s, None, {"width": 2, "zero": 1}, "(null)"),
        (zero_u, -1, {"width": 12, "zero": 1}, "004294967295"),
        (zero_u, 77, {"width": 1, "zero": 1}, "77"),
        (zero_c, "x", {"width": 4, "zero": 1}, "000x"),
        (zero_x, "ab", {"width": 5, "zero": 1}, "000ab"),
        (zero_x, "", {"width": 0, "precision": 0}, ""),
        (zero_x, "", {"width": 0, "precision": 1}, "0"),
        (zero_x, "", {"width": 0, "precision": 3}, "000"),
        (zero_x, "", {"width": 0, "precision": 6}, "000000"),
        (zero_x, "", {"width": 0, "precision": -1}, "0"),
        (zero_x, "ab", {"width": 1, "precision": 4}, "00ab"),
        (zero_x, "abc", {"width": 2, "precision": 0}, "abc"),
    ],
)
def test_zero_rendering(fn, value, flags, expected):
    state, out = render(fn, value, **flags)
    assert out == expected
    assert state.length == len(expected)