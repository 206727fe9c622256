"""
Precise Number Core
===================

Unified exports for the integer-domain decimal engine.
All arithmetic works on (exponent, significand) pairs of Python ints; native
float is used only at explicit bridges (float capture, division remainder,
non-integer powers and exp).

Core exposes PreciseNumber and its named constants as public API.
"""

# NOTE:
#   The `core` package defines the representation and arithmetic of PreciseNumber.
#   Every value is significand * 10^exponent in canonical form (no trailing zeros
#   in the significand, zero is (0, 0)). Operations align exponents before
#   combining significands, so comparisons and sums are exact.

# Integer-domain constants
from .constants import (
    BASE10,
    SINGLE_FLOAT_FORMAT,
    DOUBLE_FLOAT_FORMAT,
)

# Number primitive, constants and adapters
from .number import (
    PreciseNumber,
    make_commonized,
    to_precise_number,
    ZERO,
    ONE,
    NEGATIVE_ONE,
    E,
    PI,
    TAU,
    ADDITIVE_IDENTITY,
    MULTIPLICATIVE_IDENTITY,
)

# Native bridges
from .convert import (
    FloatWidth,
    IntWidth,
)

# Formatting / parsing
from .fmt import (
    NumberFormat,
    INVARIANT,
    format_components,
    parse_components,
)

# Arithmetic engine (pure functions)
from .arithmetic import (
    add,
    subtract,
    multiply,
    divide,
    mod,
    negate,
    plus,
    absolute,
    increment,
    decrement,
    lowest_decimal_digits,
    lowest_significant_digits,
    precise_add,
    precise_subtract,
    precise_multiply,
    precise_divide,
)

# Ordering utilities
from .ordering import (
    compare,
    maximum,
    minimum,
    clamp,
    max_magnitude,
    min_magnitude,
    stable_sort,
)

# Power / exponential bridge
from .powers import (
    power,
    exp,
)

# Structural interfaces
from .protocols import DecimalNumber, ExtendedNumber

# Core exceptions
from .exc import (
    PreciseNumberError,
    RangeError,
    DivideByZeroError,
    FormatError,
    NotSupportedError,
    PreciseNumberTypeError,
)

__all__ = [
    # constants
    "BASE10",
    "SINGLE_FLOAT_FORMAT",
    "DOUBLE_FLOAT_FORMAT",
    # number
    "PreciseNumber",
    "make_commonized",
    "to_precise_number",
    "ZERO",
    "ONE",
    "NEGATIVE_ONE",
    "E",
    "PI",
    "TAU",
    "ADDITIVE_IDENTITY",
    "MULTIPLICATIVE_IDENTITY",
    # convert
    "FloatWidth",
    "IntWidth",
    # fmt
    "NumberFormat",
    "INVARIANT",
    "format_components",
    "parse_components",
    # arithmetic
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
    # ordering
    "compare",
    "maximum",
    "minimum",
    "clamp",
    "max_magnitude",
    "min_magnitude",
    "stable_sort",
    # powers
    "power",
    "exp",
    # protocols
    "DecimalNumber",
    "ExtendedNumber",
    # exceptions
    "PreciseNumberError",
    "RangeError",
    "DivideByZeroError",
    "FormatError",
    "NotSupportedError",
    "PreciseNumberTypeError",
]
