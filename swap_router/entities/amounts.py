"""Currency amounts in raw base units."""

from __future__ import annotations

from dataclasses import dataclass

from swap_router.entities.currency import Currency
from swap_router.errors import CurrencyMismatchError, NegativeAmountError

# Maximum uint256 value
UINT256_MAX = 2**256 - 1


@dataclass(frozen=True)
class CurrencyAmount:
    """An immutable (currency, raw amount) pair.

    Amounts are always non-negative integers in the currency's smallest
    unit. Arithmetic returns new instances and requires both operands to
    be in the same currency.
    """

    currency: Currency
    raw: int

    def __post_init__(self) -> None:
        if not isinstance(self.raw, int) or isinstance(self.raw, bool):
            raise TypeError(f"CurrencyAmount requires int, got {type(self.raw).__name__}")
        if self.raw < 0:
            raise NegativeAmountError(f"Negative amount of {self.currency}: {self.raw}")
        if self.raw > UINT256_MAX:
            raise ValueError(f"Amount exceeds uint256 max: {self.raw}")

    @classmethod
    def zero(cls, currency: Currency) -> CurrencyAmount:
        return cls(currency, 0)

    @property
    def quotient(self) -> int:
        return self.raw

    @property
    def wrapped(self) -> CurrencyAmount:
        """The same amount expressed in the wrapped token."""
        if self.currency.is_token:
            return self
        return CurrencyAmount(self.currency.wrapped, self.raw)

    def _check_currency(self, other: CurrencyAmount) -> None:
        if not self.currency.equals(other.currency):
            raise CurrencyMismatchError(
                f"Cannot combine amounts of {self.currency} and {other.currency}"
            )

    def add(self, other: CurrencyAmount) -> CurrencyAmount:
        self._check_currency(other)
        return CurrencyAmount(self.currency, self.raw + other.raw)

    def subtract(self, other: CurrencyAmount) -> CurrencyAmount:
        """Subtract other from self.

        Raises:
            NegativeAmountError: If other is larger than self
        """
        self._check_currency(other)
        return CurrencyAmount(self.currency, self.raw - other.raw)

    def difference(self, other: CurrencyAmount) -> int:
        """Signed raw difference self - other, for shortfall checks."""
        self._check_currency(other)
        return self.raw - other.raw

    def __str__(self) -> str:
        return f"{self.raw} {self.currency}"
