"""Exact rational percentages for slippage and price impact bounds."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction


@dataclass(frozen=True)
class Percent:
    """A rational percentage stored as an exact fraction of one.

    Percent(1, 100) is 1%. Arithmetic never rounds; callers take the
    floor (quotient) only when converting back to on-chain integers.

    Attributes:
        numerator: Numerator of the ratio
        denominator: Denominator of the ratio (non-zero)
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        if self.denominator == 0:
            raise ZeroDivisionError("Percent denominator cannot be zero")

    @classmethod
    def from_fraction(cls, value: Fraction) -> Percent:
        return cls(value.numerator, value.denominator)

    @classmethod
    def from_bips(cls, bips: int) -> Percent:
        """Create a Percent from basis points (50 = 0.5%)."""
        return cls(bips, 10_000)

    @property
    def fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    @property
    def quotient(self) -> int:
        """Floor of numerator / denominator."""
        return self.numerator // self.denominator

    def add(self, other: Percent | int) -> Percent:
        return Percent.from_fraction(self.fraction + _as_fraction(other))

    def subtract(self, other: Percent | int) -> Percent:
        return Percent.from_fraction(self.fraction - _as_fraction(other))

    def multiply(self, other: Percent | int) -> Percent:
        return Percent.from_fraction(self.fraction * _as_fraction(other))

    def invert(self) -> Percent:
        return Percent(self.denominator, self.numerator)

    def is_negative(self) -> bool:
        return self.fraction < 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Percent, int, Fraction)):
            return self.fraction == _as_fraction(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.fraction)

    def __lt__(self, other: Percent | int) -> bool:
        return self.fraction < _as_fraction(other)

    def __le__(self, other: Percent | int) -> bool:
        return self.fraction <= _as_fraction(other)

    def __gt__(self, other: Percent | int) -> bool:
        return self.fraction > _as_fraction(other)

    def __ge__(self, other: Percent | int) -> bool:
        return self.fraction >= _as_fraction(other)

    def __str__(self) -> str:
        return f"{float(self.fraction * 100):.4f}%"


def _as_fraction(value: Percent | int | Fraction) -> Fraction:
    if isinstance(value, Percent):
        return value.fraction
    return Fraction(value)


ZERO_PERCENT = Percent(0)
ONE_HUNDRED_PERCENT = Percent(1)
