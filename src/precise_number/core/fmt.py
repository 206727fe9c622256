"""
Formatting and parsing of canonical decimal text (integer domain in, text out).

Helpers here work on raw (significand, exponent) components so that they can be
shared by `number.py` (str/format) and `convert.py` (float capture) without an
import cycle. Exponential notation is never produced.

Canonical text:
  [negative sign] integer-digits [decimal separator fractional-digits]
"""

from __future__ import annotations

import locale
import re
from dataclasses import dataclass
from typing import MutableSequence, Optional, Tuple

from .constants import BASE10, GENERIC_FORMAT_SPECS, debug_flag
from .exc import FormatError

# Debug printing control (formatting layer)
DEBUG_FMT = debug_flag("FMT")

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


_EXPONENT_RE = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Number format (locale-specific symbols)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NumberFormat:
    """Symbols used when rendering text: decimal separator and negative sign."""

    decimal_separator: str = "."
    negative_sign: str = "-"

    @classmethod
    def from_locale(cls, negative_sign: str = "-") -> "NumberFormat":
        """Decimal separator from the current process locale (`locale.localeconv()`).

        localeconv() only carries a monetary negative sign, so the numeric sign
        stays "-" unless the caller passes one.
        """
        conv = locale.localeconv()
        separator = conv.get("decimal_point") or "."
        return cls(decimal_separator=separator, negative_sign=negative_sign)


#: Culture-independent symbols.
INVARIANT = NumberFormat()


def validate_format_spec(format_spec: Optional[str]) -> None:
    """Accept only the default/generic specifier; anything else is a FormatError."""
    if format_spec is None or format_spec in GENERIC_FORMAT_SPECS:
        return
    raise FormatError(f"unsupported format specifier: {format_spec!r}", text=format_spec)


# ---------------------------------------------------------------------------
# Components -> text
# ---------------------------------------------------------------------------

def format_components(
    significand: int,
    exponent: int,
    number_format: Optional[NumberFormat] = None,
) -> str:
    """Render significand * 10^exponent as plain decimal text.

    format_components(12345, -2)  -> '123.45'
    format_components(12345, 3)   -> '12345000'
    format_components(5, -3)      -> '0.005'
    """
    nf = number_format or INVARIANT

    if significand == 0:
        return "0"
    if exponent == 0 and significand == 1:
        return "1"
    if exponent == 0 and significand == -1:
        return f"{nf.negative_sign}1"

    sign = nf.negative_sign if significand < 0 else ""
    digits = str(abs(significand))

    if exponent >= 0:
        return f"{sign}{digits}{'0' * exponent}"

    shift = -exponent
    if shift >= len(digits):
        integral = "0"
        fractional = "0" * (shift - len(digits)) + digits
    else:
        integral = digits[:-shift]
        fractional = digits[-shift:]
    _dbg(f"format: m={significand}, e={exponent} -> int={integral}, frac={fractional}")
    return f"{sign}{integral}{nf.decimal_separator}{fractional}"


def write_into(text: str, destination: MutableSequence[str]) -> Tuple[bool, int]:
    """Copy `text` into `destination` character by character.

    Returns (False, 0) without touching the buffer when it is too small.
    """
    if len(text) > len(destination):
        _dbg(f"write_into: need {len(text)} chars, buffer has {len(destination)}")
        return False, 0
    for i, ch in enumerate(text):
        destination[i] = ch
    return True, len(text)


# ---------------------------------------------------------------------------
# Text -> components
# ---------------------------------------------------------------------------

def parse_components(text: str) -> Tuple[int, int]:
    """Parse decimal text into (exponent, significand), not yet canonicalised.

    Grammar: [+|-] digits [. digits] [(e|E) [+|-] digits]
    At least one mantissa digit is required; a second '.' or any other
    character is a FormatError.

    parse_components('123.45')   -> (-2, 12345)
    parse_components('-1.5e3')   -> (2, -15)
    """
    if not isinstance(text, str):
        raise FormatError(f"expected str, got {type(text).__name__}")
    if not text:
        raise FormatError("empty input", text=text)

    negative = text[0] == "-"
    start = 1 if text[0] in "+-" else 0

    significand = 0
    exponent = 0
    fractional_digits = 0
    seen_point = False
    seen_digit = False

    for i in range(start, len(text)):
        c = text[i]
        if c == ".":
            if seen_point:
                raise FormatError("second decimal point", text=text)
            seen_point = True
            continue
        if c in "eE":
            tail = text[i + 1:]
            if not _EXPONENT_RE.fullmatch(tail):
                raise FormatError("malformed exponent", text=text)
            exponent = int(tail)
            break
        if not ("0" <= c <= "9"):
            raise FormatError(f"unexpected character {c!r}", text=text)
        seen_digit = True
        if seen_point:
            fractional_digits += 1
        significand = significand * BASE10 + (ord(c) - ord("0"))

    if not seen_digit:
        raise FormatError("no digits", text=text)

    exponent -= fractional_digits
    if negative:
        significand = -significand
    _dbg(f"parse: {text!r} -> m={significand}, e={exponent}")
    return exponent, significand


__all__ = [
    "NumberFormat",
    "INVARIANT",
    "validate_format_spec",
    "format_components",
    "write_into",
    "parse_components",
]
