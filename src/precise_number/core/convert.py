"""
Native numeric bridges: int / float / Decimal <-> (exponent, significand).

- Callers pick the adapter explicitly (from_int / from_float / from_decimal);
  nothing here inspects a value to guess which kind of number it is.
- Float capture goes through fixed-width scientific text, so the captured value
  is the value of the rendered text, not the exact binary value.
- Native targets scale by `10.0 ** exponent` in float; very large or very small
  exponents lose precision there and that is accepted.
"""

from __future__ import annotations

import math
import struct
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

from .constants import DOUBLE_FLOAT_FORMAT, SINGLE_FLOAT_FORMAT, SINGLE_FLOAT_MAX, debug_flag
from .digits import strip_trailing_zeros
from .exc import RangeError
from .fmt import parse_components

# Debug printing control
DEBUG_CONVERT = debug_flag("CONVERT")

def _dbg(msg: str) -> None:
    if DEBUG_CONVERT:
        print(msg)


# ----------------------------
# Target widths
# ----------------------------

class FloatWidth(Enum):
    """Floating-point width used for capture and for narrowing conversions."""

    SINGLE = "single"
    DOUBLE = "double"
    GENERIC = "generic"


class IntWidth(Enum):
    """Fixed-width integer targets for checked conversion: (bits, signed)."""

    INT8 = (8, True)
    INT16 = (16, True)
    INT32 = (32, True)
    INT64 = (64, True)
    UINT8 = (8, False)
    UINT16 = (16, False)
    UINT32 = (32, False)
    UINT64 = (64, False)

    @property
    def bounds(self) -> Tuple[int, int]:
        bits, signed = self.value
        if signed:
            return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        return 0, (1 << bits) - 1


# ----------------------------
# Native -> components
# ----------------------------

def _narrow_to_single(value: float) -> float:
    """Round a Python float to the nearest float32 (OverflowError when out of range)."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError as err:
        raise OverflowError(f"{value!r} does not fit single precision") from err


def render_float(value: float, width: FloatWidth = FloatWidth.DOUBLE) -> str:
    """Render a finite float as text sized to `width`."""
    if width is FloatWidth.SINGLE:
        return format(_narrow_to_single(value), SINGLE_FLOAT_FORMAT)
    if width is FloatWidth.DOUBLE:
        return format(value, DOUBLE_FLOAT_FORMAT)
    return repr(value)


def float_components(value: float, width: FloatWidth = FloatWidth.DOUBLE) -> Tuple[int, int]:
    """Capture a finite float as (exponent, significand) via its rendered text.

    float_components(123.456) -> (-3, 123456)   # '1.234560000000000E+02'
    """
    if math.isinf(value):
        raise RangeError("Infinite values are not supported")
    if math.isnan(value):
        raise RangeError("NaN values are not supported")
    text = render_float(float(value), width)
    exponent, significand = parse_components(text)
    significand, exponent = strip_trailing_zeros(significand, exponent)
    _dbg(f"float_components: {value!r} [{width.value}] -> {text} -> m={significand}, e={exponent}")
    return exponent, significand


def int_components(value: int) -> Tuple[int, int]:
    """Split an int into (exponent, significand) with trailing zeros folded away."""
    significand, exponent = strip_trailing_zeros(value, 0)
    return exponent, significand


def decimal_components(value: Decimal) -> Tuple[int, int]:
    """Exact (exponent, significand) of a finite Decimal."""
    if not value.is_finite():
        raise RangeError(f"non-finite Decimal not supported: {value}")
    tup = value.as_tuple()
    digits = int("".join(str(d) for d in tup.digits)) if tup.digits else 0
    significand = -digits if tup.sign else digits
    return int(tup.exponent), significand


# ----------------------------
# Components -> native
# ----------------------------

def _scale(exponent: int) -> float:
    try:
        return 10.0 ** exponent
    except OverflowError as err:
        raise OverflowError(f"10^{exponent} overflows float") from err


def to_float_value(
    significand: int,
    exponent: int,
    width: FloatWidth = FloatWidth.DOUBLE,
) -> float:
    """significand * 10^exponent as a float; OverflowError if it cannot be held.

    The significand itself must fit the target width before it is scaled.
    """
    try:
        base = float(significand)
    except OverflowError as err:
        raise OverflowError("significand too large for float") from err
    if width is FloatWidth.SINGLE and abs(base) > SINGLE_FLOAT_MAX:
        raise OverflowError(f"significand {significand} overflows single precision")
    result = base * _scale(exponent)
    if math.isinf(result):
        raise OverflowError(f"{significand}e{exponent} overflows float")
    if width is FloatWidth.SINGLE:
        if abs(result) > SINGLE_FLOAT_MAX:
            raise OverflowError(f"{significand}e{exponent} overflows single precision")
        result = _narrow_to_single(result)
    return result


def to_int_value(
    significand: int,
    exponent: int,
    width: Optional[IntWidth] = None,
) -> int:
    """significand * 10^exponent truncated to an int, checked against `width`.

    Both the significand and the scaled result must fit `width`, so 1.28 does not
    convert to INT8 (significand 128). Non-negative exponents scale by
    int(10.0 ** exponent); negative ones by a float multiply followed by truncation.
    """
    if width is not None:
        lo, hi = width.bounds
        if not (lo <= significand <= hi):
            raise OverflowError(f"significand {significand} out of range for {width.name}")
    scale = _scale(exponent)
    if exponent >= 0:
        result = significand * int(scale)
    else:
        try:
            result = int(float(significand) * scale)
        except OverflowError as err:
            raise OverflowError("significand too large for float") from err
    if width is not None:
        if not (lo <= result <= hi):
            raise OverflowError(f"{result} out of range for {width.name}")
    _dbg(f"to_int_value: m={significand}, e={exponent}, width={width} -> {result}")
    return result


__all__ = [
    "FloatWidth",
    "IntWidth",
    "render_float",
    "float_components",
    "int_components",
    "decimal_components",
    "to_float_value",
    "to_int_value",
]
