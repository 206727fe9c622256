"""
Core exception types for precise_number.core.

These are dependency-free and may be imported by all core modules. Each leaf
also derives from the nearest builtin so that callers catching `ValueError`,
`ZeroDivisionError` or `TypeError` keep working.
"""

__all__ = [
    "PreciseNumberError",
    "RangeError",
    "DivideByZeroError",
    "FormatError",
    "NotSupportedError",
    "PreciseNumberTypeError",
]


class PreciseNumberError(Exception):
    """Base class for all precise_number failures."""
    pass


class RangeError(PreciseNumberError, ValueError):
    """Raised for non-finite input (NaN or infinity) at a conversion boundary."""
    pass


class DivideByZeroError(PreciseNumberError, ZeroDivisionError):
    """Raised when the divisor of a division or modulus is zero."""
    pass


class FormatError(PreciseNumberError, ValueError):
    """Raised for malformed numeric text or an unsupported format specifier.

    Attributes
    ----------
    text : str | None
        The offending input (text or format specifier), for context.
    """

    def __init__(self, message, *, text=None):
        super().__init__(message)
        self.text = text


class NotSupportedError(PreciseNumberError, NotImplementedError):
    """Raised by members that are deliberately outside the supported numeric surface."""
    pass


class PreciseNumberTypeError(PreciseNumberError, TypeError):
    """Raised when construction receives components of the wrong type."""
    pass
