"""Exact numeric values backing every metric.

A ``NumericValue`` is one of three kinds:

- ``integer``: an exact whole number (counts)
- ``rational``: an exact fraction, kept as numerator/denominator
- ``floating``: an inexact float

Arithmetic keeps exact operands exact and only falls back to floating point
when a floating operand is involved, so ``of_rational(1, 3).times(of(100))``
stays the exact fraction 100/3 until it is formatted.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Union

INTEGER = "integer"
RATIONAL = "rational"
FLOATING = "floating"

Number = Union[int, float, Fraction]


@dataclass(frozen=True)
class NumericValue:
    """Immutable integer, rational or floating value.

    Exact kinds compare by their exact value. A floating value only equals
    another floating value; ``NumericValue.of(2.0)`` is not equal to
    ``NumericValue.of(2)``.
    """

    kind: str
    _exact: Fraction = Fraction(0)
    _float: float = 0.0

    @classmethod
    def of(cls, value: Union[int, float]) -> NumericValue:
        if isinstance(value, bool):
            raise TypeError("NumericValue.of() does not accept booleans")
        if isinstance(value, int):
            return cls(INTEGER, _exact=Fraction(value))
        if isinstance(value, float):
            return cls(FLOATING, _float=value)
        raise TypeError(f"NumericValue.of() expects int or float, got {type(value).__name__}")

    @classmethod
    def of_rational(cls, numerator: int, denominator: int) -> NumericValue:
        """Build an exact fraction. A zero denominator raises ZeroDivisionError."""
        return cls._from_fraction(Fraction(numerator, denominator))

    @classmethod
    def _from_fraction(cls, value: Fraction) -> NumericValue:
        if value.denominator == 1:
            return cls(INTEGER, _exact=value)
        return cls(RATIONAL, _exact=value)

    @property
    def is_exact(self) -> bool:
        return self.kind != FLOATING

    @property
    def numerator(self) -> int:
        if not self.is_exact:
            raise ValueError("floating values have no exact numerator")
        return self._exact.numerator

    @property
    def denominator(self) -> int:
        if not self.is_exact:
            raise ValueError("floating values have no exact denominator")
        return self._exact.denominator

    def plus(self, other: NumericValue) -> NumericValue:
        if self.is_exact and other.is_exact:
            return self._from_fraction(self._exact + other._exact)
        return NumericValue(FLOATING, _float=self.to_float() + other.to_float())

    def times(self, other: NumericValue) -> NumericValue:
        if self.is_exact and other.is_exact:
            return self._from_fraction(self._exact * other._exact)
        return NumericValue(FLOATING, _float=self.to_float() * other.to_float())

    def divide(self, other: NumericValue) -> NumericValue:
        """Divide by ``other``. Dividing by zero is the caller's responsibility."""
        if self.is_exact and other.is_exact:
            return self._from_fraction(self._exact / other._exact)
        return NumericValue(FLOATING, _float=self.to_float() / other.to_float())

    __add__ = plus
    __mul__ = times
    __truediv__ = divide

    def to_float(self) -> float:
        if self.is_exact:
            return float(self._exact)
        return self._float

    def to_python(self) -> Number:
        """Return the closest native value: int, Fraction or float."""
        if self.kind == INTEGER:
            return self._exact.numerator
        if self.kind == RATIONAL:
            return self._exact
        return self._float

    def format(self, decimal_places: int = 4) -> str:
        """Render for display; integers are never given a fractional part."""
        if self.kind == INTEGER:
            return str(self._exact.numerator)
        return f"{self.to_float():.{decimal_places}f}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumericValue):
            return NotImplemented
        if self.is_exact != other.is_exact:
            return False
        if self.is_exact:
            return self._exact == other._exact
        return self._float == other._float

    def __hash__(self) -> int:
        if self.is_exact:
            return hash((True, self._exact))
        return hash((False, self._float))

    def __str__(self) -> str:
        if self.kind == INTEGER:
            return str(self._exact.numerator)
        if self.kind == RATIONAL:
            return str(self.to_float())
        return str(self._float)

    def __repr__(self) -> str:
        if self.kind == RATIONAL:
            return f"NumericValue({self._exact.numerator}/{self._exact.denominator})"
        return f"NumericValue({self.to_python()!r})"
