"""Amount and risk predicates used by the settlement policy."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from swap_router.entities.amounts import CurrencyAmount
from swap_router.entities.currency import Currency
from swap_router.entities.fractions import Percent
from swap_router.entities.pools import Protocol
from swap_router.entities.trade import LegTrade, TradeType


def needs_aggregated_slippage_check(trade_type: TradeType, leg_count: int, threshold: int) -> bool:
    """True when per-leg minimums are replaced by one check over the sum.

    Only EXACT_INPUT trades with more than `threshold` legs qualify: the
    global check costs more gas, but long multi-leg trades revert less often.
    """
    return trade_type == TradeType.EXACT_INPUT and leg_count > threshold


def router_must_custody(
    output_is_native: bool,
    has_fee: bool,
    is_swap_and_add: bool,
    aggregated_slippage_check: bool,
) -> bool:
    """True when swap output must be sent to the router first.

    - native output must be unwrapped by the router
    - a fee on the output is taken by the router
    - swap-and-add deposits the output from the router
    - the aggregated slippage check sweeps the summed output
    """
    return output_is_native or has_fee or is_swap_and_add or aggregated_slippage_check


def has_high_price_impact(leg: LegTrade, threshold: Percent) -> bool:
    """True for non-V2 legs whose price impact exceeds `threshold`.

    V2 fills are all-or-nothing, so V2 legs never risk a partial fill.
    """
    if leg.protocol == Protocol.V2:
        return False
    return leg.price_impact > threshold


def risk_of_partial_fill(legs: Iterable[LegTrade], threshold: Percent) -> bool:
    """True if any leg may hit its price limit and fill partially."""
    return any(has_high_price_impact(leg, threshold) for leg in legs)


def sum_amounts(
    legs: Iterable[LegTrade],
    zero_currency: Currency,
    amount_of: Callable[[LegTrade], CurrencyAmount],
) -> CurrencyAmount:
    """Fold leg amounts into one total, starting from zero in `zero_currency`.

    Addition is associative, so only the emitted call order depends on leg
    order, never the total.
    """
    total = CurrencyAmount.zero(zero_currency)
    for leg in legs:
        total = total.add(amount_of(leg))
    return total
