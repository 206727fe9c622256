"""
Structural numeric interfaces.

`DecimalNumber` is the minimal surface PreciseNumber implements completely:
arithmetic, comparison, native conversion and formatting. Generic code should
depend on it.

`ExtendedNumber` adds the members only some generic algorithms need (modulus
operator and text parsing through the type). The isinstance check is
structural only: PreciseNumber defines `__mod__` and `parse`, so it passes the
check, but both raise NotSupportedError. Code written against `ExtendedNumber`
must not be handed a PreciseNumber.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

N = TypeVar("N", bound="DecimalNumber")


@runtime_checkable
class DecimalNumber(Protocol):
    """Arithmetic, comparison, conversion and formatting."""

    def __add__(self: N, other: N) -> N: ...
    def __sub__(self: N, other: N) -> N: ...
    def __mul__(self: N, other: N) -> N: ...
    def __truediv__(self: N, other: N) -> N: ...
    def __neg__(self: N) -> N: ...
    def __pos__(self: N) -> N: ...
    def __lt__(self: N, other: N) -> bool: ...
    def __le__(self: N, other: N) -> bool: ...
    def __gt__(self: N, other: N) -> bool: ...
    def __ge__(self: N, other: N) -> bool: ...
    def compare_to(self, other) -> int: ...
    def to_float(self) -> float: ...
    def to_int(self) -> int: ...
    def to_string(self, format_spec=None, number_format=None) -> str: ...


@runtime_checkable
class ExtendedNumber(DecimalNumber, Protocol):
    """DecimalNumber plus modulus and type-level parsing."""

    def __mod__(self: N, other: N) -> N: ...

    @classmethod
    def parse(cls, text: str, number_format=None): ...


__all__ = [
    "DecimalNumber",
    "ExtendedNumber",
]
