import pytest

from precise_number.core import PreciseNumber
from precise_number.core.number import ONE


def _pair(x: PreciseNumber):
    return x.exponent, x.significand


# -----------------------------
# round(decimal_digits)
# -----------------------------

def test_round_float_captured_value():
    x = PreciseNumber.from_float(123.456)
    print(f"[round] {x} to 2 dp")
    assert x.round(2) == PreciseNumber.from_float(123.46)
    assert _pair(x.round(2)) == (-2, 12346)


def test_round_adds_repeated_fives():
    # 1.2345 + 0.0055 truncated to 2 dp
    x = PreciseNumber.from_float(1.2345)
    assert x.round(2) == PreciseNumber.from_float(1.24)


def test_round_one_digit_half_up():
    assert _pair(PreciseNumber(-3, 12345).round(2)) == (-2, 1235)


def test_round_negative_half_away_from_zero():
    print("[round] -123.456 -> -123.46")
    assert _pair(PreciseNumber(-3, -123456).round(2)) == (-2, -12346)
    assert _pair(PreciseNumber(-1, -25).round(0)) == (0, -3)


def test_round_never_pads():
    x = PreciseNumber(-1, 5)
    assert x.round(5) is x
    assert x.round(1) is x
    y = PreciseNumber(3, 7)
    assert y.round(2) is y


def test_round_to_integer_carries():
    assert _pair(PreciseNumber(-2, 995).round(1)) == (1, 1)
    assert PreciseNumber(-2, 995).round(0) == PreciseNumber.from_int(10)


@pytest.mark.parametrize(
    "value,ndigits,expected",
    [
        (2.5, None, 3),
        (-2.5, None, -3),
        (2.4, None, 2),
        (0.5, None, 1),
    ],
)
def test_builtin_round_to_int(value, ndigits, expected):
    x = PreciseNumber.from_float(value)
    assert round(x) == expected


def test_builtin_round_with_ndigits():
    x = PreciseNumber(-3, 12345)
    assert round(x, 2) == PreciseNumber(-2, 1235)
    assert isinstance(round(x, 2), PreciseNumber)


# -----------------------------
# reduce_significance
# -----------------------------

def test_reduce_significance():
    print("[reduce] 12345 to 3 significant digits -> 124e2")
    assert _pair(PreciseNumber(0, 12345).reduce_significance(3)) == (2, 124)


def test_reduce_significance_negative():
    # -987.65 -> -990
    assert _pair(PreciseNumber(-2, -98765).reduce_significance(2)) == (1, -99)


def test_reduce_significance_noop_when_already_short():
    x = PreciseNumber(0, 12345)
    assert x.reduce_significance(5) is x
    assert x.reduce_significance(9) is x
    assert ONE.reduce_significance(1) is ONE


def test_reduce_significance_keeps_value_close():
    x = PreciseNumber(-40, 27182818284590452353602874713526624977572)
    r = x.reduce_significance(6)
    assert r.significant_digits <= 6
    assert str(r) == "2.71828"
