"""
Precise Number Core Constants (integer domain)
==============================================

Only integer constants and the literal digits of the named constants live here.
Float rendering widths used by the conversion bridge are kept next to them so
that every place which crosses into native floating point agrees on them.
"""

# NOTE: The named constants are stored as (exponent, significand-digits) pairs and
# materialised by `number.py`; they never pass through float.

import os

# ---------------------------------------------------------------------------
# Radix
# ---------------------------------------------------------------------------

#: The only supported radix.
BASE10: int = 10


# ---------------------------------------------------------------------------
# Named constants (literal significands)
# ---------------------------------------------------------------------------

#: e to 40 decimal places.
E_EXPONENT: int = -40
E_DIGITS: str = "27182818284590452353602874713526624977572"

#: pi to 25 decimal places.
PI_EXPONENT: int = -25
PI_DIGITS: str = "31415926535897932384626433"

#: tau to 24 decimal places.
TAU_EXPONENT: int = -24
TAU_DIGITS: str = "6283185307179586476925287"


# ---------------------------------------------------------------------------
# Float bridge rendering
# ---------------------------------------------------------------------------

#: Scientific format used to capture a single-precision value (8 significant digits).
SINGLE_FLOAT_FORMAT: str = ".7E"

#: Scientific format used to capture a double-precision value (16 significant digits).
DOUBLE_FLOAT_FORMAT: str = ".15E"

#: Largest finite float32 magnitude; checked when narrowing to single precision.
SINGLE_FLOAT_MAX: float = 3.4028234663852886e38


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

#: Format specifiers accepted by the formatter (generic only).
GENERIC_FORMAT_SPECS: frozenset = frozenset({"", "G", "g"})


# ---------------------------------------------------------------------------
# Debug switches
# ---------------------------------------------------------------------------

def _env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


#: Global debug switch; per-module switches fall back to it.
DEBUG_ALL: bool = _env_flag("PRECISE_NUMBER_DEBUG")


def debug_flag(module: str) -> bool:
    """Return the debug switch for `module` (e.g. "ARITH", "FMT", "CONVERT")."""
    return _env_flag(f"PRECISE_NUMBER_DEBUG_{module}", "1" if DEBUG_ALL else "0")


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "BASE10",
    "E_EXPONENT",
    "E_DIGITS",
    "PI_EXPONENT",
    "PI_DIGITS",
    "TAU_EXPONENT",
    "TAU_DIGITS",
    "SINGLE_FLOAT_FORMAT",
    "DOUBLE_FLOAT_FORMAT",
    "SINGLE_FLOAT_MAX",
    "GENERIC_FORMAT_SPECS",
    "DEBUG_ALL",
    "debug_flag",
]
