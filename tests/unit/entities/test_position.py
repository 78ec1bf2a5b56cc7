"""Tests for liquidity positions."""

import pytest

from swap_router.entities import Percent, Position
from swap_router.errors import InvalidTickError
from tests.helpers import make_pool

LIQUIDITY = 10**18


class TestPositionValidation:
    """Tests for tick validation."""

    def test_ticks_must_be_ordered(self, weth, usdc):
        """tick_lower must be below tick_upper."""
        with pytest.raises(InvalidTickError):
            Position(make_pool(weth, usdc), 60, -60, LIQUIDITY)

    def test_ticks_must_be_aligned(self, weth, usdc):
        """Ticks must be multiples of the pool's tick spacing."""
        with pytest.raises(InvalidTickError):
            Position(make_pool(weth, usdc, fee=3000), -50, 60, LIQUIDITY)

    def test_ticks_must_be_in_range(self, weth, usdc):
        """Ticks must stay inside the global tick range."""
        with pytest.raises(InvalidTickError):
            Position(make_pool(weth, usdc, fee=500), -887280, 60, LIQUIDITY)


class TestPositionAmounts:
    """Tests for position token amounts."""

    def test_in_range_holds_both_tokens(self, weth, usdc):
        """A range around the current price holds both tokens."""
        position = Position(make_pool(weth, usdc), -600, 600, LIQUIDITY)
        assert position.amount0.raw > 0
        assert position.amount1.raw > 0

    def test_range_above_price_holds_only_token0(self, weth, usdc):
        """A range above the current price is all token0."""
        position = Position(make_pool(weth, usdc), 600, 1200, LIQUIDITY)
        assert position.amount0.raw > 0
        assert position.amount1.raw == 0

    def test_range_below_price_holds_only_token1(self, weth, usdc):
        """A range below the current price is all token1."""
        position = Position(make_pool(weth, usdc), -1200, -600, LIQUIDITY)
        assert position.amount0.raw == 0
        assert position.amount1.raw > 0

    def test_mint_amounts_round_up(self, weth, usdc):
        """Mint amounts are never below the held amounts."""
        position = Position(make_pool(weth, usdc), -600, 600, LIQUIDITY)
        mint = position.mint_amounts
        assert mint.amount0 >= position.amount0.raw
        assert mint.amount1 >= position.amount1.raw
        assert mint.amount0 - position.amount0.raw <= 1
        assert mint.amount1 - position.amount1.raw <= 1

    def test_symmetric_range_at_price_one(self, weth, usdc):
        """At price 1 a symmetric range needs nearly equal amounts."""
        position = Position(make_pool(weth, usdc), -600, 600, LIQUIDITY)
        mint = position.mint_amounts
        assert abs(mint.amount0 - mint.amount1) <= mint.amount0 // 1000

    def test_from_amounts_fits_budget(self, weth, usdc):
        """The largest position for given amounts never exceeds them."""
        pool = make_pool(weth, usdc)
        position = Position.from_amounts(pool, -600, 600, 10**18, 10**18, use_full_precision=True)
        assert position.liquidity > 0
        mint = position.mint_amounts
        assert mint.amount0 <= 10**18
        assert mint.amount1 <= 10**18

    def test_mint_amounts_with_slippage_below_mint(self, weth, usdc):
        """Slippage-adjusted minimums do not exceed the mint amounts."""
        position = Position(make_pool(weth, usdc), -600, 600, LIQUIDITY)
        mint = position.mint_amounts
        minimums = position.mint_amounts_with_slippage(Percent.from_bips(50))
        assert 0 < minimums.amount0 <= mint.amount0
        assert 0 < minimums.amount1 <= mint.amount1

    def test_zero_slippage_minimums_near_mint(self, weth, usdc):
        """Without slippage the minimums stay close to the mint amounts."""
        position = Position(make_pool(weth, usdc), -600, 600, LIQUIDITY)
        mint = position.mint_amounts
        minimums = position.mint_amounts_with_slippage(Percent(0))
        assert mint.amount0 - minimums.amount0 <= mint.amount0 // 10**6 + 1
        assert mint.amount1 - minimums.amount1 <= mint.amount1 // 10**6 + 1
