"""
Arithmetic engine as pure functions over PreciseNumber.

The binary operators on PreciseNumber share the same kernel; this module adds
the members that are deliberately not exposed as operators (`mod`, `increment`,
`decrement`) and the precision-aware variants that never claim more precision
than the least precise non-anchor input supports.

Precision selection:
- add/subtract are limited by decimal places (digits after the point),
- multiply/divide are limited by significant digits,
- the anchors 0, 1 and -1 defer to the other operand's count.
"""

from __future__ import annotations

from .constants import debug_flag
from .exc import DivideByZeroError
from .number import ONE, ZERO, PreciseNumber, make_commonized

# Debug printing control
DEBUG_ARITH = debug_flag("ARITH")

def _dbg(msg: str) -> None:
    if DEBUG_ARITH:
        print(msg)


# ---------------------------------------------------------------------------
# Exact operations
# ---------------------------------------------------------------------------

def add(left: PreciseNumber, right: PreciseNumber) -> PreciseNumber:
    return left + right


def subtract(left: PreciseNumber, right: PreciseNumber) -> PreciseNumber:
    return left - right


def multiply(left: PreciseNumber, right: PreciseNumber) -> PreciseNumber:
    return left * right


def divide(left: PreciseNumber, right: PreciseNumber) -> PreciseNumber:
    """Exact integral part plus a float-bridged fraction (DivideByZeroError on zero)."""
    return left / right


def mod(left: PreciseNumber, right: PreciseNumber) -> PreciseNumber:
    """Floor modulus at the common exponent: l - floor(l / r) * r.

    The result takes the sign of the divisor, as with Python's `%` on ints.
    """
    if right.is_zero():
        raise DivideByZeroError("modulus by zero")
    if left == right:
        return ZERO
    cl, cr, e = make_commonized(left, right)
    m = cl.significand - (cl.significand // cr.significand) * cr.significand
    _dbg(f"mod: {left!r} mod {right!r} -> m={m}, e={e}")
    return PreciseNumber(e, m)


def negate(value: PreciseNumber) -> PreciseNumber:
    return -value


def plus(value: PreciseNumber) -> PreciseNumber:
    return +value


def absolute(value: PreciseNumber) -> PreciseNumber:
    return abs(value)


def increment(value: PreciseNumber) -> PreciseNumber:
    return value + ONE


def decrement(value: PreciseNumber) -> PreciseNumber:
    return value - ONE


# ---------------------------------------------------------------------------
# Precision selection
# ---------------------------------------------------------------------------

def lowest_decimal_digits(left: PreciseNumber, right: PreciseNumber) -> int:
    """Smaller decimal-place count of the two; an anchor defers to the other side."""
    left_digits = left.count_decimal_digits()
    right_digits = right.count_decimal_digits()
    if left.has_infinite_precision:
        left_digits = right_digits
    if right.has_infinite_precision:
        right_digits = left_digits
    return min(left_digits, right_digits)


def lowest_significant_digits(left: PreciseNumber, right: PreciseNumber) -> int:
    """Smaller significant-digit count of the two; an anchor defers to the other side."""
    left_digits = left.significant_digits
    right_digits = right.significant_digits
    if left.has_infinite_precision:
        left_digits = right_digits
    if right.has_infinite_precision:
        right_digits = left_digits
    return min(left_digits, right_digits)


# ---------------------------------------------------------------------------
# Precision-aware operations
# ---------------------------------------------------------------------------

def precise_add(left: PreciseNumber, right: PreciseNumber) -> PreciseNumber:
    """Sum rounded to the decimal places of the less precise operand."""
    return (left + right).round(lowest_decimal_digits(left, right))


def precise_subtract(left: PreciseNumber, right: PreciseNumber) -> PreciseNumber:
    """Difference rounded to the decimal places of the less precise operand."""
    return (left - right).round(lowest_decimal_digits(left, right))


def precise_multiply(left: PreciseNumber, right: PreciseNumber) -> PreciseNumber:
    """Product reduced to the significant digits of the less precise operand."""
    return (left * right).reduce_significance(lowest_significant_digits(left, right))


def precise_divide(left: PreciseNumber, right: PreciseNumber) -> PreciseNumber:
    """Quotient reduced to the significant digits of the less precise operand."""
    return (left / right).reduce_significance(lowest_significant_digits(left, right))


__all__ = [
    "add",
    "subtract",
    "multiply",
    "divide",
    "mod",
    "negate",
    "plus",
    "absolute",
    "increment",
    "decrement",
    "lowest_decimal_digits",
    "lowest_significant_digits",
    "precise_add",
    "precise_subtract",
    "precise_multiply",
    "precise_divide",
]
