"""Concentrated liquidity positions."""

from __future__ import annotations

from dataclasses import dataclass

from swap_router.entities.amounts import CurrencyAmount
from swap_router.entities.fractions import Percent
from swap_router.entities.pools import Pool
from swap_router.errors import InvalidTickError
from swap_router.math.liquidity_math import (
    get_amount0_delta,
    get_amount1_delta,
    max_liquidity_for_amounts,
)
from swap_router.math.tick_math import (
    MAX_SQRT_RATIO,
    MAX_TICK,
    MIN_SQRT_RATIO,
    MIN_TICK,
    encode_sqrt_ratio_x96,
    get_sqrt_ratio_at_tick,
    get_tick_at_sqrt_ratio,
)


@dataclass(frozen=True)
class MintAmounts:
    """Raw token amounts required to mint a position."""

    amount0: int
    amount1: int


@dataclass(frozen=True)
class Position:
    """A liquidity position on a V3 pool over [tick_lower, tick_upper).

    Ticks must be ordered, inside the global tick range and aligned to the
    pool's tick spacing.
    """

    pool: Pool
    tick_lower: int
    tick_upper: int
    liquidity: int

    def __post_init__(self) -> None:
        if self.tick_lower >= self.tick_upper:
            raise InvalidTickError(f"tick_lower {self.tick_lower} >= tick_upper {self.tick_upper}")
        if self.tick_lower < MIN_TICK or self.tick_upper > MAX_TICK:
            raise InvalidTickError("Position ticks out of range")
        spacing = self.pool.spacing
        if self.tick_lower % spacing or self.tick_upper % spacing:
            raise InvalidTickError(f"Position ticks not aligned to tick spacing {spacing}")
        if self.liquidity < 0:
            raise ValueError("Position liquidity cannot be negative")

    @classmethod
    def from_amounts(
        cls,
        pool: Pool,
        tick_lower: int,
        tick_upper: int,
        amount0: int,
        amount1: int,
        use_full_precision: bool,
    ) -> Position:
        """Largest position that can be minted with the given amounts."""
        liquidity = max_liquidity_for_amounts(
            pool.sqrt_price_x96,
            get_sqrt_ratio_at_tick(tick_lower),
            get_sqrt_ratio_at_tick(tick_upper),
            amount0,
            amount1,
            use_full_precision,
        )
        return cls(pool, tick_lower, tick_upper, liquidity)

    @property
    def sqrt_ratio_lower(self) -> int:
        return get_sqrt_ratio_at_tick(self.tick_lower)

    @property
    def sqrt_ratio_upper(self) -> int:
        return get_sqrt_ratio_at_tick(self.tick_upper)

    @property
    def amount0(self) -> CurrencyAmount:
        """Token0 held by the position at the current price, rounded down."""
        pool = self.pool
        if pool.tick < self.tick_lower:
            raw = get_amount0_delta(self.sqrt_ratio_lower, self.sqrt_ratio_upper, self.liquidity, False)
        elif pool.tick < self.tick_upper:
            raw = get_amount0_delta(pool.sqrt_price_x96, self.sqrt_ratio_upper, self.liquidity, False)
        else:
            raw = 0
        return CurrencyAmount(pool.token0, raw)

    @property
    def amount1(self) -> CurrencyAmount:
        """Token1 held by the position at the current price, rounded down."""
        pool = self.pool
        if pool.tick < self.tick_lower:
            raw = 0
        elif pool.tick < self.tick_upper:
            raw = get_amount1_delta(self.sqrt_ratio_lower, pool.sqrt_price_x96, self.liquidity, False)
        else:
            raw = get_amount1_delta(self.sqrt_ratio_lower, self.sqrt_ratio_upper, self.liquidity, False)
        return CurrencyAmount(pool.token1, raw)

    @property
    def mint_amounts(self) -> MintAmounts:
        """Amounts required to mint this position's liquidity, rounded up."""
        return _mint_amounts(self.pool.tick, self.pool.sqrt_price_x96, self)

    def mint_amounts_with_slippage(self, slippage_tolerance: Percent) -> MintAmounts:
        """Minimum amounts that must be deposited for the mint to succeed.

        Recomputes the mint at the pool prices reached after moving the
        current price by +/- slippage_tolerance: token0 is bounded at the
        upper price and token1 at the lower price.
        """
        sqrt_lower, sqrt_upper = self._ratios_after_slippage(slippage_tolerance)

        # The position the router will actually create (imprecise liquidity)
        mint = self.mint_amounts
        created = Position.from_amounts(
            self.pool,
            self.tick_lower,
            self.tick_upper,
            mint.amount0,
            mint.amount1,
            use_full_precision=False,
        )

        amount0 = _mint_amounts(get_tick_at_sqrt_ratio(sqrt_upper), sqrt_upper, created).amount0
        amount1 = _mint_amounts(get_tick_at_sqrt_ratio(sqrt_lower), sqrt_lower, created).amount1
        return MintAmounts(amount0, amount1)

    def _ratios_after_slippage(self, slippage_tolerance: Percent) -> tuple[int, int]:
        price = self.pool.token0_price
        price_lower = price * Percent(1).subtract(slippage_tolerance).fraction
        price_upper = price * slippage_tolerance.add(1).fraction

        if price_lower <= 0:
            sqrt_lower = MIN_SQRT_RATIO + 1
        else:
            sqrt_lower = encode_sqrt_ratio_x96(price_lower.numerator, price_lower.denominator)
            if sqrt_lower <= MIN_SQRT_RATIO:
                sqrt_lower = MIN_SQRT_RATIO + 1

        sqrt_upper = encode_sqrt_ratio_x96(price_upper.numerator, price_upper.denominator)
        if sqrt_upper >= MAX_SQRT_RATIO:
            sqrt_upper = MAX_SQRT_RATIO - 1
        return sqrt_lower, sqrt_upper


def _mint_amounts(tick_current: int, sqrt_price_x96: int, position: Position) -> MintAmounts:
    sqrt_lower = position.sqrt_ratio_lower
    sqrt_upper = position.sqrt_ratio_upper
    liquidity = position.liquidity

    if tick_current < position.tick_lower:
        return MintAmounts(get_amount0_delta(sqrt_lower, sqrt_upper, liquidity, True), 0)
    if tick_current < position.tick_upper:
        return MintAmounts(
            get_amount0_delta(sqrt_price_x96, sqrt_upper, liquidity, True),
            get_amount1_delta(sqrt_lower, sqrt_price_x96, liquidity, True),
        )
    return MintAmounts(0, get_amount1_delta(sqrt_lower, sqrt_upper, liquidity, True))
