"""
PreciseNumber: arbitrary-precision decimal value, significand * 10^exponent.

- Significand is an unbounded Python int; exponent is a signed power of ten.
- Canonical form strips trailing zeros of the significand into the exponent and
  maps zero to (0, 0). `sanitize=False` keeps the raw pair; it exists for
  commonization only and is invisible to equality and hashing.
- Arithmetic and comparison align both operands to the smaller exponent first
  (commonization) and then work on plain integers.
- Division is exact for the integral part; the fractional remainder is evaluated
  in native float and captured back through the double-precision path, so
  non-terminating quotients carry about 16 significant fractional digits.
- Rounding drops digits by adding a sign-matched 5...5 and truncating.

# Alignment notes:
# - ZERO, ONE and NEGATIVE_ONE are "infinite precision" anchors: they never limit
#   the precision chosen by the precision-aware operations in `arithmetic.py`.
# - The `%` operator is not part of the supported operator surface; use
#   `arithmetic.mod` instead.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from decimal import Decimal
from fractions import Fraction
from typing import ClassVar, MutableSequence, Optional, Tuple, Union

from .constants import (
    E_DIGITS,
    E_EXPONENT,
    PI_DIGITS,
    PI_EXPONENT,
    TAU_DIGITS,
    TAU_EXPONENT,
    debug_flag,
)
from .convert import (
    FloatWidth,
    IntWidth,
    decimal_components,
    float_components,
    int_components,
    to_float_value,
    to_int_value,
)
from .digits import count_digits, drop_digits_half_away, strip_trailing_zeros, ten_pow, trunc_div
from .exc import DivideByZeroError, NotSupportedError, PreciseNumberTypeError
from .fmt import NumberFormat, format_components, parse_components, validate_format_spec, write_into

# Debug printing control
DEBUG_ARITH = debug_flag("ARITH")

def _dbg(msg: str) -> None:
    if DEBUG_ARITH:
        print(msg)


def _is_plain_int(x: object) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


# ----------------------------
# PreciseNumber
# ----------------------------

@dataclass(frozen=True, eq=False, repr=False)
class PreciseNumber:
    """Exact decimal value: significand * 10^exponent."""

    exponent: int
    significand: int
    sanitize: InitVar[bool] = True
    significant_digits: int = field(init=False)

    ZERO: ClassVar["PreciseNumber"]
    ONE: ClassVar["PreciseNumber"]
    NEGATIVE_ONE: ClassVar["PreciseNumber"]
    E: ClassVar["PreciseNumber"]
    PI: ClassVar["PreciseNumber"]
    TAU: ClassVar["PreciseNumber"]

    def __post_init__(self, sanitize: bool) -> None:
        if not _is_plain_int(self.exponent):
            raise PreciseNumberTypeError(f"exponent must be int, got {type(self.exponent).__name__}")
        if not _is_plain_int(self.significand):
            raise PreciseNumberTypeError(f"significand must be int, got {type(self.significand).__name__}")

        m, e = self.significand, self.exponent
        if sanitize:
            if m == 0:
                e = 0
            else:
                m, e = strip_trailing_zeros(m, e)
            object.__setattr__(self, "significand", m)
            object.__setattr__(self, "exponent", e)
        object.__setattr__(self, "significant_digits", count_digits(m))

    # ------------- constructors -------------

    @classmethod
    def from_int(cls, value: int) -> "PreciseNumber":
        """Exact conversion of an int; trailing zeros are folded into the exponent."""
        if not _is_plain_int(value):
            raise PreciseNumberTypeError(f"from_int expects int, got {type(value).__name__}")
        if value == 0:
            return ZERO
        if value == 1:
            return ONE
        if value == -1:
            return NEGATIVE_ONE
        e, m = int_components(value)
        return cls(e, m)

    @classmethod
    def from_float(cls, value: float, width: FloatWidth = FloatWidth.DOUBLE) -> "PreciseNumber":
        """Capture a float through its `width`-sized scientific rendering.

        NaN and infinities raise RangeError. The result is the value of the
        rendered text (16 significant digits for DOUBLE, 8 for SINGLE).
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PreciseNumberTypeError(f"from_float expects float, got {type(value).__name__}")
        value = float(value)
        if value == 0.0:
            return ZERO
        if value == 1.0:
            return ONE
        if value == -1.0:
            return NEGATIVE_ONE
        e, m = float_components(value, width)
        return cls(e, m)

    @classmethod
    def from_decimal(cls, value: Decimal) -> "PreciseNumber":
        """Exact conversion of a finite Decimal (NaN/inf raise RangeError)."""
        if not isinstance(value, Decimal):
            raise PreciseNumberTypeError(f"from_decimal expects Decimal, got {type(value).__name__}")
        e, m = decimal_components(value)
        return cls(e, m)

    @classmethod
    def from_string(cls, text: str) -> "PreciseNumber":
        """Parse plain or exponent-suffixed decimal text, e.g. '-123.45' or '1.5e3'."""
        e, m = parse_components(text)
        return cls(e, m)

    @classmethod
    def parse(cls, text: str, number_format: Optional[NumberFormat] = None) -> "PreciseNumber":
        """Generic numeric-interface parse entry point; not supported, use from_string."""
        raise NotSupportedError("PreciseNumber.parse is not supported; use PreciseNumber.from_string")

    @classmethod
    def try_parse(cls, text: str, number_format: Optional[NumberFormat] = None) -> Tuple[bool, Optional["PreciseNumber"]]:
        """Generic numeric-interface try-parse entry point; not supported."""
        raise NotSupportedError("PreciseNumber.try_parse is not supported; use PreciseNumber.from_string")

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.significand == 0

    def is_integer(self) -> bool:
        return self.exponent >= 0 or self.significand == 0

    def is_even_integer(self) -> bool:
        return self.is_integer() and (self.exponent > 0 or self.significand % 2 == 0)

    def is_odd_integer(self) -> bool:
        return self.is_integer() and not self.is_even_integer()

    def is_negative(self) -> bool:
        return self.significand < 0

    def is_positive(self) -> bool:
        """True for values >= 0 (zero counts as positive)."""
        return self.significand >= 0

    @property
    def has_infinite_precision(self) -> bool:
        """True for the anchors 0, 1 and -1."""
        return self.exponent == 0 and self.significand in (-1, 0, 1)

    def count_decimal_digits(self) -> int:
        """Digits after the decimal point implied by the exponent."""
        return -self.exponent if self.exponent < 0 else 0

    def __bool__(self) -> bool:
        return self.significand != 0

    # ------------- canonical form / hashing -------------

    def canonical_pair(self) -> Tuple[int, int]:
        """(exponent, significand) after trailing-zero normalisation."""
        if self.significand == 0:
            return 0, 0
        m, e = strip_trailing_zeros(self.significand, self.exponent)
        return e, m

    def __hash__(self) -> int:
        return hash(self.canonical_pair())

    def __repr__(self) -> str:
        return f"PreciseNumber({self.significand}e{self.exponent})"

    # ------------- comparisons (integer domain) -------------

    def _cmp_core(self, other: "PreciseNumber") -> int:
        left, right, _ = make_commonized(self, other)
        m1, m2 = left.significand, right.significand
        return (m1 > m2) - (m1 < m2)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PreciseNumber):
            return NotImplemented
        return self._cmp_core(other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, PreciseNumber):
            return NotImplemented
        return self._cmp_core(other) != 0

    def __lt__(self, other: "PreciseNumber") -> bool:
        if not isinstance(other, PreciseNumber):
            return NotImplemented
        return self._cmp_core(other) < 0

    def __le__(self, other: "PreciseNumber") -> bool:
        if not isinstance(other, PreciseNumber):
            return NotImplemented
        return self._cmp_core(other) <= 0

    def __gt__(self, other: "PreciseNumber") -> bool:
        if not isinstance(other, PreciseNumber):
            return NotImplemented
        return self._cmp_core(other) > 0

    def __ge__(self, other: "PreciseNumber") -> bool:
        if not isinstance(other, PreciseNumber):
            return NotImplemented
        return self._cmp_core(other) >= 0

    def compare_to(self, other: Union["PreciseNumber", int, float, Decimal]) -> int:
        """Three-way compare (-1, 0, 1) against a PreciseNumber or a native number."""
        return self._cmp_core(to_precise_number(other))

    # ------------- arithmetic (integer domain) -------------

    def _add_sub(self, other: "PreciseNumber", sign_other: int) -> "PreciseNumber":
        left, right, e = make_commonized(self, other)
        m = left.significand + sign_other * right.significand
        _dbg(f"add_sub: {self!r} {'+' if sign_other > 0 else '-'} {other!r} -> m={m}, e={e}")
        return PreciseNumber(e, m)

    def __add__(self, other: "PreciseNumber") -> "PreciseNumber":
        if not isinstance(other, PreciseNumber):
            return NotImplemented
        return self._add_sub(other, +1)

    def __sub__(self, other: "PreciseNumber") -> "PreciseNumber":
        if not isinstance(other, PreciseNumber):
            return NotImplemented
        return self._add_sub(other, -1)

    def __mul__(self, other: "PreciseNumber") -> "PreciseNumber":
        if not isinstance(other, PreciseNumber):
            return NotImplemented
        if self.is_zero() or other.is_zero():
            return ZERO
        # Identity keeps the other operand's precision untouched.
        if self == ONE:
            return other
        if other == ONE:
            return self
        left, right, e = make_commonized(self, other)
        m = left.significand * right.significand
        _dbg(f"mul: {self!r} * {other!r} -> m={m}, e={e + e}")
        return PreciseNumber(e + e, m)

    def __truediv__(self, other: "PreciseNumber") -> "PreciseNumber":
        if not isinstance(other, PreciseNumber):
            return NotImplemented
        if other.is_zero():
            raise DivideByZeroError("division by zero")
        if self == other:
            return ONE
        left, right, e = make_commonized(self, other)
        q = trunc_div(left.significand, right.significand)
        r = left.significand - q * right.significand
        # |r| < |divisor|, so the float quotient is a pure fraction
        fraction = r / right.significand
        _dbg(f"div: {self!r} / {other!r} -> q={q}, r={r}, common_e={e}, frac={fraction!r}")
        return PreciseNumber(0, q) + PreciseNumber.from_float(fraction)

    def __mod__(self, other: "PreciseNumber") -> "PreciseNumber":
        raise NotSupportedError("the % operator is not supported; use precise_number.core.arithmetic.mod")

    def __neg__(self) -> "PreciseNumber":
        if self.is_zero():
            return self
        return PreciseNumber(self.exponent, -self.significand)

    def __pos__(self) -> "PreciseNumber":
        return self

    def __abs__(self) -> "PreciseNumber":
        return -self if self.significand < 0 else self

    def squared(self) -> "PreciseNumber":
        return self * self

    def cubed(self) -> "PreciseNumber":
        return self.squared() * self

    # ------------- rounding -------------

    def round(self, decimal_digits: int) -> "PreciseNumber":
        """Round half away from zero to `decimal_digits` fractional digits.

        Only ever reduces precision; a value already at or below the requested
        number of decimal digits is returned unchanged.
        """
        k = self.count_decimal_digits() - decimal_digits
        if k <= 0:
            return self
        m = drop_digits_half_away(self.significand, k)
        _dbg(f"round: {self!r} to {decimal_digits} dp -> drop {k}, m={m}")
        return PreciseNumber(self.exponent + k, m)

    def __round__(self, ndigits: Optional[int] = None):
        if ndigits is None:
            return self.round(0).to_int()
        return self.round(ndigits)

    def reduce_significance(self, significant_digits: int) -> "PreciseNumber":
        """Keep at most `significant_digits` digits of the significand (half away from zero)."""
        k = self.significant_digits - significant_digits
        if k <= 0:
            return self
        m = drop_digits_half_away(self.significand, k)
        _dbg(f"reduce_significance: {self!r} to {significant_digits} sd -> drop {k}, m={m}")
        return PreciseNumber(self.exponent + k, m)

    # ------------- conversions -------------

    def to_float(self, width: FloatWidth = FloatWidth.DOUBLE) -> float:
        """significand * 10.0**exponent; OverflowError when it does not fit."""
        return to_float_value(self.significand, self.exponent, width)

    def to_int(self, width: Optional[IntWidth] = None) -> int:
        """Truncating conversion, checked against `width` when given."""
        return to_int_value(self.significand, self.exponent, width)

    def to_decimal(self) -> Decimal:
        """Exact Decimal view (sign, digits, exponent), independent of context precision."""
        sign = 1 if self.significand < 0 else 0
        digits = tuple(int(d) for d in str(abs(self.significand)))
        return Decimal((sign, digits, self.exponent))

    def as_fraction(self) -> Fraction:
        """Exact rational view."""
        if self.exponent >= 0:
            return Fraction(self.significand * ten_pow(self.exponent), 1)
        return Fraction(self.significand, ten_pow(-self.exponent))

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.to_int()

    # ------------- formatting -------------

    def to_string(
        self,
        format_spec: Optional[str] = None,
        number_format: Optional[NumberFormat] = None,
    ) -> str:
        """Plain decimal text; only the generic format ('', 'G', 'g') is accepted."""
        validate_format_spec(format_spec)
        return format_components(self.significand, self.exponent, number_format)

    def try_format(
        self,
        destination: MutableSequence[str],
        format_spec: Optional[str] = None,
        number_format: Optional[NumberFormat] = None,
    ) -> Tuple[bool, int]:
        """Write the text into `destination`; returns (ok, chars_written).

        An undersized buffer yields (False, 0) and is left untouched.
        """
        text = self.to_string(format_spec, number_format)
        return write_into(text, destination)

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec)


# ----------------------------
# Commonization
# ----------------------------

def make_commonized(
    left: PreciseNumber,
    right: PreciseNumber,
) -> Tuple[PreciseNumber, PreciseNumber, int]:
    """Rescale both operands to the smaller exponent.

    Returns (left', right', common_exponent); the rescaled values are built with
    sanitize=False so their significands keep the added zeros.
    """
    e = min(left.exponent, right.exponent)
    m1 = left.significand * ten_pow(left.exponent - e)
    m2 = right.significand * ten_pow(right.exponent - e)
    return (
        PreciseNumber(e, m1, sanitize=False),
        PreciseNumber(e, m2, sanitize=False),
        e,
    )


# ----------------------------
# Typed adapter
# ----------------------------

def to_precise_number(value: Union[PreciseNumber, int, float, Decimal]) -> PreciseNumber:
    """Convert a supported native number; other types raise NotSupportedError."""
    if isinstance(value, PreciseNumber):
        return value
    if isinstance(value, bool):
        raise NotSupportedError("bool is not a supported numeric input")
    if isinstance(value, int):
        return PreciseNumber.from_int(value)
    if isinstance(value, float):
        return PreciseNumber.from_float(value)
    if isinstance(value, Decimal):
        return PreciseNumber.from_decimal(value)
    raise NotSupportedError(f"cannot convert {type(value).__name__} to PreciseNumber")


# ----------------------------
# Named constants
# ----------------------------

ZERO = PreciseNumber(0, 0)
ONE = PreciseNumber(0, 1)
NEGATIVE_ONE = PreciseNumber(0, -1)
E = PreciseNumber(E_EXPONENT, int(E_DIGITS))
PI = PreciseNumber(PI_EXPONENT, int(PI_DIGITS))
TAU = PreciseNumber(TAU_EXPONENT, int(TAU_DIGITS))

PreciseNumber.ZERO = ZERO
PreciseNumber.ONE = ONE
PreciseNumber.NEGATIVE_ONE = NEGATIVE_ONE
PreciseNumber.E = E
PreciseNumber.PI = PI
PreciseNumber.TAU = TAU

#: Identities of the additive and multiplicative groups.
ADDITIVE_IDENTITY = ZERO
MULTIPLICATIVE_IDENTITY = ONE


__all__ = [
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
]
