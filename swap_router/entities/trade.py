"""Trade entities accepted by the router compiler.

Three input shapes are accepted, each tagged with an explicit `shape`
discriminant set at construction:

- SINGLE: one LegTrade, a single-protocol trade over one route
- AGGREGATE: an AggregateTrade holding heterogeneous-protocol swaps
- LIST: a TradeList of single-protocol LegTrades
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from swap_router.entities.amounts import CurrencyAmount
from swap_router.entities.fractions import ZERO_PERCENT, Percent
from swap_router.entities.pools import Protocol
from swap_router.entities.route import Route
from swap_router.errors import InvalidRouteError, InvalidSlippageToleranceError


class TradeType(str, Enum):
    """Which side of the trade is fixed."""

    EXACT_INPUT = "exactInput"
    EXACT_OUTPUT = "exactOutput"


class TradeShape(str, Enum):
    """Discriminant for the accepted trade input shapes."""

    SINGLE = "single"
    AGGREGATE = "aggregate"
    LIST = "list"


def _check_slippage(slippage_tolerance: Percent) -> None:
    if slippage_tolerance.is_negative():
        raise InvalidSlippageToleranceError(f"Slippage tolerance is negative: {slippage_tolerance}")


@dataclass(frozen=True)
class LegTrade:
    """A single-protocol trade along one route.

    Both amounts are the quoted (nominal) amounts; the fixed side is the
    input for EXACT_INPUT trades and the output for EXACT_OUTPUT trades.
    """

    route: Route
    input_amount: CurrencyAmount
    output_amount: CurrencyAmount
    trade_type: TradeType
    shape: TradeShape = field(default=TradeShape.SINGLE, init=False)

    def __post_init__(self) -> None:
        if not self.input_amount.currency.equals(self.route.input):
            raise InvalidRouteError("Input amount currency does not match route input")
        if not self.output_amount.currency.equals(self.route.output):
            raise InvalidRouteError("Output amount currency does not match route output")

    @classmethod
    def from_route(cls, route: Route, amount: CurrencyAmount, trade_type: TradeType) -> LegTrade:
        """Build a V2 trade by computing the floating side through the pairs.

        Args:
            route: A route made only of V2 pairs
            amount: Input amount (EXACT_INPUT) or output amount (EXACT_OUTPUT)
            trade_type: Which side `amount` fixes

        Raises:
            InvalidRouteError: If the route contains non-V2 pools
        """
        pairs = route.pools
        if any(pool.protocol != Protocol.V2 for pool in pairs):
            raise InvalidRouteError("Only V2 routes can be simulated locally")

        if trade_type == TradeType.EXACT_INPUT:
            current = amount.wrapped
            for pair in pairs:
                current = pair.get_output_amount(current)  # type: ignore[union-attr]
            output = CurrencyAmount(route.output, current.raw)
            return cls(route, amount, output, trade_type)

        current = amount.wrapped
        for pair in reversed(pairs):
            current = pair.get_input_amount(current)  # type: ignore[union-attr]
        input_amount = CurrencyAmount(route.input, current.raw)
        return cls(route, input_amount, amount, trade_type)

    @property
    def protocol(self) -> Protocol | str:
        protocol = self.route.protocol
        if protocol is None:
            raise InvalidRouteError("Route has no protocol tag")
        return protocol

    @property
    def hop_count(self) -> int:
        return self.route.hop_count

    def minimum_amount_out(self, slippage_tolerance: Percent) -> CurrencyAmount:
        """Worst-case output at the given slippage: out / (1 + slippage)."""
        _check_slippage(slippage_tolerance)
        if self.trade_type == TradeType.EXACT_OUTPUT:
            return self.output_amount
        factor = slippage_tolerance.add(1).invert()
        raw = self.output_amount.raw * factor.numerator // factor.denominator
        return CurrencyAmount(self.output_amount.currency, raw)

    def maximum_amount_in(self, slippage_tolerance: Percent) -> CurrencyAmount:
        """Worst-case input at the given slippage: in * (1 + slippage)."""
        _check_slippage(slippage_tolerance)
        if self.trade_type == TradeType.EXACT_INPUT:
            return self.input_amount
        factor = slippage_tolerance.add(1)
        raw = self.input_amount.raw * factor.numerator // factor.denominator
        return CurrencyAmount(self.input_amount.currency, raw)

    @property
    def price_impact(self) -> Percent:
        """Relative shortfall of the quoted output against the mid price."""
        quoted_output = self.route.mid_price * self.input_amount.raw
        if quoted_output == 0:
            return ZERO_PERCENT
        return Percent.from_fraction((quoted_output - self.output_amount.raw) / quoted_output)


@dataclass(frozen=True)
class Swap:
    """One leg of an aggregate trade: a route with its quoted amounts."""

    route: Route
    input_amount: CurrencyAmount
    output_amount: CurrencyAmount


@dataclass(frozen=True)
class AggregateTrade:
    """A trade split across routes of possibly different protocols.

    All swaps share one input currency, one output currency and the
    aggregate's trade type.
    """

    swaps: tuple[Swap, ...]
    trade_type: TradeType
    shape: TradeShape = field(default=TradeShape.AGGREGATE, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "swaps", tuple(self.swaps))


@dataclass(frozen=True)
class TradeList:
    """An explicit ordered list of single-protocol trades."""

    legs: tuple[LegTrade, ...]
    shape: TradeShape = field(default=TradeShape.LIST, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "legs", tuple(self.legs))


TradeInput = LegTrade | AggregateTrade | TradeList
