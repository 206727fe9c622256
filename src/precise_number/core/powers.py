"""
Powers and the exponential function.

- Integer exponents are exact: repeated multiplication, reciprocal for
  negative exponents (the reciprocal goes through the float-bridged division).
- Non-integer exponents and `exp` bridge through native float (math.log /
  math.exp) and are captured back through the double-precision path, so their
  precision is bounded by float.
"""

from __future__ import annotations

import math

from .constants import debug_flag
from .exc import RangeError
from .number import E, ONE, ZERO, PreciseNumber

# Debug printing control
DEBUG_POWERS = debug_flag("ARITH")

def _dbg(msg: str) -> None:
    if DEBUG_POWERS:
        print(msg)


def power(base: PreciseNumber, exponent: PreciseNumber) -> PreciseNumber:
    """Raise `base` to `exponent`.

    power(2, 3)    -> 8        (exact)
    power(2, -3)   -> 0.125    (reciprocal of the exact power)
    power(2, 2.5)  -> exp(log(2.0) * 2.5) captured from float
    """
    if exponent.is_zero():
        return ONE
    if base.is_zero():
        return ZERO
    if base == ONE:
        return ONE

    if exponent.is_integer():
        n = abs(exponent.to_int())
        result = base
        for _ in range(1, n):
            result = result * base
        _dbg(f"power: {base!r} ** {exponent!r} via {n} multiplies")
        return ONE / result if exponent.is_negative() else result

    b = base.to_float()
    if b < 0:
        raise RangeError(f"non-integer power of a negative base: {base} ** {exponent}")
    value = math.exp(math.log(b) * exponent.to_float())
    _dbg(f"power: {base!r} ** {exponent!r} via float -> {value!r}")
    return PreciseNumber.from_float(value)


def exp(x: PreciseNumber) -> PreciseNumber:
    """e ** x; exact for 0 and 1, float-bridged otherwise."""
    if x.is_zero():
        return ONE
    if x == ONE:
        return E
    try:
        value = math.exp(x.to_float())
    except OverflowError as err:
        raise OverflowError(f"exp({x}) overflows float") from err
    return PreciseNumber.from_float(value)


__all__ = [
    "power",
    "exp",
]
