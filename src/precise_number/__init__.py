# Top-level API for precise_number (integer-domain).
"""
Top-level API for precise_number (integer-domain).

This module exposes the stable interface of the decimal engine:
  - PreciseNumber: exact significand * 10^exponent value type
  - ZERO, ONE, NEGATIVE_ONE, E, PI, TAU: named constants
  - NumberFormat / INVARIANT: symbols used for text output
  - FloatWidth / IntWidth: explicit native conversion targets

Pure-function arithmetic (`mod`, `increment`, precision-aware operations),
ordering helpers and the power bridge live in `precise_number.core` and its
submodules.
"""

# NOTE:
#   Values are immutable; every operation returns a new PreciseNumber.
#   Native float is touched only at explicit bridges (float capture, division
#   remainder, non-integer powers and exp).

from __future__ import annotations

from .core import (
    PreciseNumber,
    ZERO,
    ONE,
    NEGATIVE_ONE,
    E,
    PI,
    TAU,
    NumberFormat,
    INVARIANT,
    FloatWidth,
    IntWidth,
    to_precise_number,
    PreciseNumberError,
    RangeError,
    DivideByZeroError,
    FormatError,
    NotSupportedError,
    PreciseNumberTypeError,
)

__version__ = "0.1.0"

__all__ = [
    "PreciseNumber",
    "ZERO",
    "ONE",
    "NEGATIVE_ONE",
    "E",
    "PI",
    "TAU",
    "NumberFormat",
    "INVARIANT",
    "FloatWidth",
    "IntWidth",
    "to_precise_number",
    "PreciseNumberError",
    "RangeError",
    "DivideByZeroError",
    "FormatError",
    "NotSupportedError",
    "PreciseNumberTypeError",
]
