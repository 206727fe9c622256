"""
Integer helpers for the base-10 representation (centralised).

All helpers work on Python ints of unbounded size. Division helpers truncate
toward zero, which is the rounding the significance-reduction code relies on;
Python's `//` floors and must not be used on signed significands directly.
"""

from __future__ import annotations

from typing import Tuple

from .constants import BASE10


def ten_pow(n: int) -> int:
    """Return 10**n for n >= 0."""
    if n < 0:
        raise ValueError("ten_pow expects non-negative exponent")
    return BASE10 ** n


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise ZeroDivisionError("trunc_div by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def count_digits(n: int) -> int:
    """Number of decimal digits of |n|; 0 for n == 0."""
    if n == 0:
        return 0
    return len(str(abs(n)))


def strip_trailing_zeros(significand: int, exponent: int) -> Tuple[int, int]:
    """Fold trailing base-10 zeros of `significand` into `exponent`.

    Zero is returned unchanged; callers canonicalise it separately.
    """
    while significand != 0 and significand % BASE10 == 0:
        significand //= BASE10
        exponent += 1
    return significand, exponent


def repeating_digits(digit: int, count: int) -> int:
    """Return the integer made of `digit` repeated `count` times (0 if count <= 0).

    repeating_digits(5, 3) -> 555
    """
    if count <= 0:
        return 0
    value = digit
    for _ in range(1, count):
        value = value * BASE10 + digit
    return value


def copy_sign(magnitude: int, sign_source: int) -> int:
    """Return |magnitude| carrying the sign of `sign_source` (zero counts as positive)."""
    return -abs(magnitude) if sign_source < 0 else abs(magnitude)


def drop_digits_half_away(significand: int, k: int) -> int:
    """Drop `k` trailing digits of `significand`, rounding half away from zero.

    Adds a sign-matched 5...5 of length k and truncates; k <= 0 is a no-op.
    """
    if k <= 0:
        return significand
    addend = copy_sign(repeating_digits(5, k), significand)
    return trunc_div(significand + addend, ten_pow(k))


__all__ = [
    "ten_pow",
    "trunc_div",
    "count_digits",
    "strip_trailing_zeros",
    "repeating_digits",
    "copy_sign",
    "drop_digits_half_away",
]
