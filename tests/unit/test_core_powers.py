import math
from decimal import Decimal

import pytest

from precise_number.core import PreciseNumber
from precise_number.core.powers import power, exp
from precise_number.core.exc import RangeError
from precise_number.core.number import ZERO, ONE, NEGATIVE_ONE, E


def _i(n: int) -> PreciseNumber:
    return PreciseNumber.from_int(n)


# -----------------------------
# power
# -----------------------------

def test_power_integer_exponent_is_exact():
    print("[power] 2^3 and 1.5^2")
    assert power(_i(2), _i(3)) == _i(8)
    assert power(PreciseNumber(-1, 15), _i(2)) == PreciseNumber(-2, 225)
    assert power(_i(-2), _i(3)) == _i(-8)
    assert power(_i(10), _i(40)) == PreciseNumber(40, 1)


def test_power_negative_integer_exponent():
    assert power(_i(2), _i(-3)) == PreciseNumber.from_float(0.125)
    assert power(_i(4), NEGATIVE_ONE) == PreciseNumber(-2, 25)


def test_power_shortcuts():
    x = PreciseNumber(-2, 12345)
    assert power(x, ZERO) is ONE
    assert power(ZERO, _i(10)) is ZERO
    assert power(ONE, _i(10)) is ONE
    assert power(x, ONE) == x


def test_power_fractional_exponent_bridges_float():
    expected = PreciseNumber.from_float(math.exp(math.log(2.0) * 2.5))
    print(f"[power] 2^2.5 -> {expected}")
    assert power(_i(2), PreciseNumber.from_float(2.5)) == expected


def test_power_fractional_exponent_negative_base():
    with pytest.raises(RangeError):
        power(_i(-2), PreciseNumber(-1, 25))


# -----------------------------
# exp
# -----------------------------

def test_exp_anchors():
    assert exp(ZERO) is ONE
    assert exp(ONE) is E


def test_exp_minus_one_is_reciprocal_of_e():
    assert exp(NEGATIVE_ONE) == ONE / E


@pytest.mark.parametrize(
    "x,expected",
    [
        (5, "148.4131591025766"),
        (-5, "0.006737946999085467"),
    ],
)
def test_exp_float_bridge(x, expected):
    r = exp(_i(x))
    print(f"[exp] e^{x} -> {r}")
    assert r == PreciseNumber.from_decimal(Decimal(expected))


def test_exp_overflow():
    with pytest.raises(OverflowError):
        exp(_i(1000))
