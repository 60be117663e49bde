"""Closed-interval arithmetic over exact numbers."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from fractions import Fraction
from typing import Any


def _sign(value: Any) -> int:
    return (value > 0) - (value < 0)


def _reciprocal(value: Any) -> Any:
    return Fraction(1) / value


@dataclass(frozen=True)
class Interval:
    """The knowledge that a value is >= ``min`` and <= ``max``.

    Intervals do not have trichotomy: one spanning zero is neither
    positive nor negative.
    """

    min: Any
    max: Any

    @classmethod
    def exact(cls, val: Any) -> Interval:
        """An interval holding exactly one value."""
        return cls(val, val)

    @classmethod
    def zero(cls) -> Interval:
        return cls(Fraction(0), Fraction(0))

    def is_zero(self) -> bool:
        return self.min == 0 and self.max == 0

    def is_positive(self) -> bool:
        """True if every value in the interval is positive."""
        return self.min > 0

    def is_negative(self) -> bool:
        """True if every value in the interval is negative."""
        return self.max < 0

    def is_maybe_positive(self) -> bool:
        """True if some value in the interval is positive."""
        return self.max > 0

    def is_maybe_negative(self) -> bool:
        """True if some value in the interval is negative."""
        return self.min < 0

    def square(self) -> Interval:
        """Square of the interval; tighter than multiplying it by itself."""
        low_sq = abs(self.min) * abs(self.min)
        high_sq = abs(self.max) * abs(self.max)
        if _sign(self.min) != _sign(self.max):
            lower = 0 if isinstance(self.min, int) and isinstance(self.max, int) else Fraction(0)
        else:
            lower = low_sq if low_sq <= high_sq else high_sq
        upper = high_sq if high_sq >= low_sq else low_sq
        return Interval(lower, upper)

    def recip(self) -> Interval:
        """Reciprocal of the interval.

        Raises ZeroDivisionError when the interval touches or spans zero.
        """
        if _sign(self.min) != _sign(self.max):
            raise ZeroDivisionError("divide by zero in interval arithmetic")
        return Interval(_reciprocal(self.max), _reciprocal(self.min))

    @staticmethod
    def _coerce(other: Any) -> Interval | None:
        if isinstance(other, Interval):
            return other
        if isinstance(other, numbers.Real):
            return Interval.exact(other)
        return None

    def __add__(self, other: Any) -> Interval:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Interval(self.min + rhs.min, self.max + rhs.max)

    def __radd__(self, other: Any) -> Interval:
        return self.__add__(other)

    def __sub__(self, other: Any) -> Interval:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Interval(self.min - rhs.max, self.max - rhs.min)

    def __rsub__(self, other: Any) -> Interval:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __neg__(self) -> Interval:
        return Interval(-self.max, -self.min)

    def __mul__(self, other: Any) -> Interval:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        products = (
            self.max * rhs.min,
            self.min * rhs.min,
            self.min * rhs.max,
            self.max * rhs.max,
        )
        return Interval(min(products), max(products))

    def __rmul__(self, other: Any) -> Interval:
        return self.__mul__(other)


def is_positive(value: Any) -> bool:
    """True if the value (or every value of an interval) is positive."""
    if isinstance(value, Interval):
        return value.is_positive()
    return value > 0


def is_negative(value: Any) -> bool:
    """True if the value (or every value of an interval) is negative."""
    if isinstance(value, Interval):
        return value.is_negative()
    return value < 0


def is_maybe_positive(value: Any) -> bool:
    """True if the value (or some value of an interval) is positive."""
    if isinstance(value, Interval):
        return value.is_maybe_positive()
    return value > 0


def is_maybe_negative(value: Any) -> bool:
    """True if the value (or some value of an interval) is negative."""
    if isinstance(value, Interval):
        return value.is_maybe_negative()
    return value < 0


def square(value: Any) -> Any:
    """Square of a number or an interval."""
    if isinstance(value, Interval):
        return value.square()
    return value * value


def recip(value: Any) -> Any:
    """Reciprocal of a number or an interval."""
    if isinstance(value, Interval):
        return value.recip()
    return _reciprocal(value)