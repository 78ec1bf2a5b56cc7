"""Trade normalization.

Flattens any accepted trade input into an ordered tuple of single-protocol
legs and checks that they can be settled together.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from swap_router.entities.currency import Currency
from swap_router.entities.pools import Protocol
from swap_router.entities.trade import (
    AggregateTrade,
    LegTrade,
    Swap,
    TradeInput,
    TradeList,
    TradeShape,
    TradeType,
)
from swap_router.errors import (
    NoTradesError,
    TokenInMismatchError,
    TokenOutMismatchError,
    TradeTypeMismatchError,
    UnsupportedProtocolError,
)

logger = structlog.get_logger()


@dataclass(frozen=True)
class NormalizedTrades:
    """Canonical flat form of a trade input.

    Attributes:
        legs: Single-protocol legs in input order
        leg_count: Number of routes (one per leg, whatever its protocol or hops)
    """

    legs: tuple[LegTrade, ...]
    leg_count: int

    @property
    def sample(self) -> LegTrade:
        """Leg used for attributes shared by all legs."""
        return self.legs[0]

    @property
    def trade_type(self) -> TradeType:
        return self.sample.trade_type

    @property
    def input_currency(self) -> Currency:
        return self.sample.input_amount.currency

    @property
    def output_currency(self) -> Currency:
        return self.sample.output_amount.currency

    @property
    def input_is_native(self) -> bool:
        return self.input_currency.is_native

    @property
    def output_is_native(self) -> bool:
        return self.output_currency.is_native

    @property
    def chain_id(self) -> int:
        return self.sample.route.chain_id


def coerce_trade_input(trades: TradeInput | Sequence[LegTrade]) -> TradeInput:
    """Wrap a plain sequence of legs into a TradeList."""
    if isinstance(trades, (list, tuple)):
        return TradeList(tuple(trades))
    return trades  # type: ignore[return-value]


def _unbundle_swap(swap: Swap, trade_type: TradeType) -> LegTrade:
    # V2 legs are re-priced through the pairs from the fixed side; V3 and
    # mixed legs keep their quoted amounts
    if swap.route.protocol == Protocol.V2:
        fixed = swap.input_amount if trade_type == TradeType.EXACT_INPUT else swap.output_amount
        return LegTrade.from_route(swap.route, fixed, trade_type)
    return LegTrade(swap.route, swap.input_amount, swap.output_amount, trade_type)


def _unbundle(trade: AggregateTrade) -> tuple[LegTrade, ...]:
    return tuple(_unbundle_swap(swap, trade.trade_type) for swap in trade.swaps)


def _flatten(trades: TradeInput) -> tuple[LegTrade, ...]:
    if trades.shape == TradeShape.AGGREGATE:
        return _unbundle(trades)  # type: ignore[arg-type]
    if trades.shape == TradeShape.LIST:
        return trades.legs  # type: ignore[union-attr]
    return (trades,)  # type: ignore[return-value]


def _check_protocol(leg: LegTrade) -> Protocol:
    try:
        return Protocol(leg.protocol)
    except ValueError:
        raise UnsupportedProtocolError(f"Unsupported protocol: {leg.protocol}") from None


def normalize_trades(trades: TradeInput | Sequence[LegTrade]) -> NormalizedTrades:
    """Flatten a trade input into homogeneous single-protocol legs.

    Args:
        trades: A LegTrade, AggregateTrade, TradeList or sequence of LegTrades

    Returns:
        NormalizedTrades with legs in input order

    Raises:
        NoTradesError: If there are no legs
        UnsupportedProtocolError: If a leg's protocol is not V2, V3 or MIXED
        TokenInMismatchError: If legs have different input currencies
        TokenOutMismatchError: If legs have different output currencies
        TradeTypeMismatchError: If legs have different trade types
    """
    legs = _flatten(coerce_trade_input(trades))
    if not legs:
        raise NoTradesError("At least one trade is required")

    for leg in legs:
        _check_protocol(leg)
    leg_count = len(legs)

    sample = legs[0]
    if not all(leg.input_amount.currency.equals(sample.input_amount.currency) for leg in legs):
        raise TokenInMismatchError("All trades must have the same input currency")
    if not all(leg.output_amount.currency.equals(sample.output_amount.currency) for leg in legs):
        raise TokenOutMismatchError("All trades must have the same output currency")
    if not all(leg.trade_type == sample.trade_type for leg in legs):
        raise TradeTypeMismatchError("All trades must have the same trade type")

    logger.debug(
        "trades_normalized",
        leg_count=leg_count,
        legs=len(legs),
        trade_type=sample.trade_type.value,
    )
    return NormalizedTrades(legs=legs, leg_count=leg_count)
