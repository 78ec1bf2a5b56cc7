"""Tests for settlement predicates."""

import pytest

from swap_router.entities import CurrencyAmount, Percent, TradeType
from swap_router.risk import (
    has_high_price_impact,
    needs_aggregated_slippage_check,
    risk_of_partial_fill,
    router_must_custody,
    sum_amounts,
)
from tests.helpers import make_leg, make_pair, make_pool

HALF = Percent(50, 100)


class TestAggregatedSlippageCheck:
    """needs_aggregated_slippage_check."""

    def test_exact_input_above_threshold(self):
        """More than two legs on exact input."""
        assert needs_aggregated_slippage_check(TradeType.EXACT_INPUT, 3, 2)
        assert not needs_aggregated_slippage_check(TradeType.EXACT_INPUT, 2, 2)

    def test_never_for_exact_output(self):
        """Exact output trades keep per-leg bounds."""
        assert not needs_aggregated_slippage_check(TradeType.EXACT_OUTPUT, 10, 2)


class TestRouterMustCustody:
    """Custody decision table."""

    @pytest.mark.parametrize(
        "output_is_native,has_fee,is_swap_and_add,aggregated,expected",
        [
            (False, False, False, False, False),
            (True, False, False, False, True),
            (False, True, False, False, True),
            (False, False, True, False, True),
            (False, False, False, True, True),
            (True, True, True, True, True),
        ],
    )
    def test_table(self, output_is_native, has_fee, is_swap_and_add, aggregated, expected):
        """Any of the four conditions forces custody."""
        assert router_must_custody(output_is_native, has_fee, is_swap_and_add, aggregated) is expected


class TestPartialFill:
    """Price impact risk."""

    def test_v2_never_at_risk(self, weth, usdc):
        """V2 legs fill fully or revert."""
        leg = make_leg([make_pair(weth, usdc)], weth, usdc, 100, 10)
        assert not has_high_price_impact(leg, HALF)

    def test_v3_above_threshold(self, weth, usdc):
        """A 60% impact V3 leg is at risk."""
        leg = make_leg([make_pool(weth, usdc)], weth, usdc, 100, 40)
        assert has_high_price_impact(leg, HALF)

    def test_v3_at_threshold_not_at_risk(self, weth, usdc):
        """The threshold itself is not exceeded."""
        leg = make_leg([make_pool(weth, usdc)], weth, usdc, 100, 50)
        assert not has_high_price_impact(leg, HALF)

    def test_any_leg(self, weth, usdc):
        """One risky leg is enough."""
        safe = make_leg([make_pool(weth, usdc)], weth, usdc, 100, 100)
        risky = make_leg([make_pool(weth, usdc)], weth, usdc, 100, 40)
        assert risk_of_partial_fill([safe, risky], HALF)
        assert not risk_of_partial_fill([safe, safe], HALF)


class TestSumAmounts:
    """Explicit folds over legs."""

    def test_sums_in_currency(self, weth, usdc):
        """Totals are in the given currency and start from zero."""
        legs = [make_leg([make_pair(weth, usdc)], weth, usdc, n, n) for n in (1, 2, 3)]
        total = sum_amounts(legs, usdc, lambda leg: leg.output_amount)
        assert total == CurrencyAmount(usdc, 6)

    def test_empty_is_zero(self, usdc):
        """The zero element is a zero amount."""
        assert sum_amounts([], usdc, lambda leg: leg.output_amount).raw == 0

    def test_order_independent(self, weth, usdc):
        """Totals do not depend on leg order."""
        legs = [make_leg([make_pair(weth, usdc)], weth, usdc, n, n) for n in (5, 7, 11)]
        forward = sum_amounts(legs, weth, lambda leg: leg.input_amount)
        backward = sum_amounts(list(reversed(legs)), weth, lambda leg: leg.input_amount)
        assert forward == backward
