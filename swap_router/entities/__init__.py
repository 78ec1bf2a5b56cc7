"""Domain entities: currencies, amounts, pools, routes, trades and positions."""

from swap_router.entities.amounts import CurrencyAmount
from swap_router.entities.currency import WETH9, Currency, NativeCurrency, Token, wrapped_native
from swap_router.entities.fractions import ONE_HUNDRED_PERCENT, ZERO_PERCENT, Percent
from swap_router.entities.pools import (
    V3_FEE_HIGH,
    V3_FEE_LOW,
    V3_FEE_LOWEST,
    V3_FEE_MEDIUM,
    V3_TICK_SPACING,
    AnyPool,
    Pair,
    Pool,
    Protocol,
)
from swap_router.entities.position import MintAmounts, Position
from swap_router.entities.route import Route
from swap_router.entities.trade import (
    AggregateTrade,
    LegTrade,
    Swap,
    TradeInput,
    TradeList,
    TradeShape,
    TradeType,
)

__all__ = [
    # Currencies and amounts
    "Currency",
    "Token",
    "NativeCurrency",
    "WETH9",
    "wrapped_native",
    "CurrencyAmount",
    "Percent",
    "ZERO_PERCENT",
    "ONE_HUNDRED_PERCENT",
    # Pools and routes
    "Protocol",
    "Pair",
    "Pool",
    "AnyPool",
    "Route",
    "V3_FEE_LOWEST",
    "V3_FEE_LOW",
    "V3_FEE_MEDIUM",
    "V3_FEE_HIGH",
    "V3_TICK_SPACING",
    # Trades
    "TradeType",
    "TradeShape",
    "LegTrade",
    "Swap",
    "AggregateTrade",
    "TradeList",
    "TradeInput",
    # Positions
    "Position",
    "MintAmounts",
]
