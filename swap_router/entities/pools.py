"""Pool entities for the two exchange protocol generations.

Pair (V2) uses the constant product formula x * y = k with a fee on the
input amount. Pool (V3) holds concentrated liquidity state; swap
simulation is not done locally, only mid prices and position math.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from enum import Enum
from fractions import Fraction
from typing import ClassVar

from swap_router.entities.amounts import UINT256_MAX, CurrencyAmount
from swap_router.entities.currency import Token
from swap_router.math.tick_math import Q192, get_tick_at_sqrt_ratio


class Protocol(str, Enum):
    """Exchange protocol a route (or a pool) belongs to."""

    V2 = "V2"
    V3 = "V3"
    MIXED = "MIXED"


# V3 fee tiers in hundredths of a basis point (3000 = 0.3%)
V3_FEE_LOWEST = 100
V3_FEE_LOW = 500
V3_FEE_MEDIUM = 3000
V3_FEE_HIGH = 10000

V3_TICK_SPACING = {
    V3_FEE_LOWEST: 1,
    V3_FEE_LOW: 10,
    V3_FEE_MEDIUM: 60,
    V3_FEE_HIGH: 200,
}


@dataclass(frozen=True)
class Pair:
    """A UniswapV2 liquidity pair.

    Tokens are stored sorted by address regardless of construction order,
    with reserves following their tokens.
    """

    protocol: ClassVar[Protocol] = Protocol.V2

    token0: Token
    token1: Token
    reserve0: int
    reserve1: int
    # Fee in basis points (30 = 0.3%)
    fee_bps: int = 30

    def __post_init__(self) -> None:
        if self.token0.chain_id != self.token1.chain_id:
            raise ValueError("Pair tokens are on different chains")
        if not self.token0.sorts_before(self.token1):
            token0, token1 = self.token1, self.token0
            reserve0, reserve1 = self.reserve1, self.reserve0
            object.__setattr__(self, "token0", token0)
            object.__setattr__(self, "token1", token1)
            object.__setattr__(self, "reserve0", reserve0)
            object.__setattr__(self, "reserve1", reserve1)
        if self.reserve0 < 0 or self.reserve1 < 0:
            raise ValueError("Pair reserves cannot be negative")

    @property
    def chain_id(self) -> int:
        return self.token0.chain_id

    @property
    def fee_multiplier(self) -> int:
        """Fee multiplier for AMM math (10000 - fee_bps), 9970 for 30 bps."""
        return 10000 - self.fee_bps

    def involves_token(self, token: Token) -> bool:
        return self.token0.equals(token) or self.token1.equals(token)

    def other_token(self, token: Token) -> Token:
        if self.token0.equals(token):
            return self.token1
        if self.token1.equals(token):
            return self.token0
        raise ValueError(f"Token {token} not in pair")

    def get_reserves(self, token_in: Token) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        if self.token0.equals(token_in):
            return self.reserve0, self.reserve1
        if self.token1.equals(token_in):
            return self.reserve1, self.reserve0
        raise ValueError(f"Token {token_in} not in pair")

    def price_of(self, token: Token) -> Fraction:
        """Mid price of `token` in units of the other token (raw amounts)."""
        reserve_in, reserve_out = self.get_reserves(token)
        if reserve_in == 0:
            raise ZeroDivisionError("Pair has no liquidity")
        return Fraction(reserve_out, reserve_in)

    def get_output_amount(self, input_amount: CurrencyAmount) -> CurrencyAmount:
        """Output for an exact input.

        Formula: amount_out = (in * fee * res_out) / (res_in * 10000 + in * fee)
        """
        token_in = input_amount.currency.wrapped
        reserve_in, reserve_out = self.get_reserves(token_in)
        token_out = self.other_token(token_in)
        if input_amount.raw == 0 or reserve_in == 0 or reserve_out == 0:
            return CurrencyAmount.zero(token_out)

        amount_in_with_fee = input_amount.raw * self.fee_multiplier
        numerator = amount_in_with_fee * reserve_out
        denominator = reserve_in * 10000 + amount_in_with_fee
        return CurrencyAmount(token_out, numerator // denominator)

    def get_input_amount(self, output_amount: CurrencyAmount) -> CurrencyAmount:
        """Required input for an exact output.

        Formula: amount_in = (res_in * out * 10000) / ((res_out - out) * fee) + 1
        """
        token_out = output_amount.currency.wrapped
        reserve_out, reserve_in = self.get_reserves(token_out)
        token_in = self.other_token(token_out)
        if output_amount.raw == 0:
            return CurrencyAmount.zero(token_in)
        if output_amount.raw >= reserve_out:
            # Can't extract more than the reserve
            return CurrencyAmount(token_in, UINT256_MAX)

        numerator = reserve_in * output_amount.raw * 10000
        denominator = (reserve_out - output_amount.raw) * self.fee_multiplier
        return CurrencyAmount(token_in, numerator // denominator + 1)


@dataclass(frozen=True)
class Pool:
    """A UniswapV3 concentrated liquidity pool.

    The current tick is derived from sqrt_price_x96 and the tick spacing
    from the fee tier when not supplied.
    """

    protocol: ClassVar[Protocol] = Protocol.V3

    token0: Token
    token1: Token
    fee: int  # Fee in Uniswap units (e.g., 3000 for 0.3%)
    sqrt_price_x96: int  # Current sqrt(price) * 2^96
    liquidity: int  # Current active liquidity
    tick_current: InitVar[int | None] = None
    tick_spacing: InitVar[int | None] = None
    tick: int = field(init=False)
    spacing: int = field(init=False)

    def __post_init__(self, tick_current: int | None, tick_spacing: int | None) -> None:
        if self.token0.chain_id != self.token1.chain_id:
            raise ValueError("Pool tokens are on different chains")
        if not 0 < self.fee < 1_000_000:
            raise ValueError(f"Invalid pool fee: {self.fee}")
        if not self.token0.sorts_before(self.token1):
            token0, token1 = self.token1, self.token0
            object.__setattr__(self, "token0", token0)
            object.__setattr__(self, "token1", token1)
        if tick_current is None:
            tick_current = get_tick_at_sqrt_ratio(self.sqrt_price_x96)
        if tick_spacing is None:
            tick_spacing = V3_TICK_SPACING.get(self.fee, 60)
        object.__setattr__(self, "tick", tick_current)
        object.__setattr__(self, "spacing", tick_spacing)

    @property
    def chain_id(self) -> int:
        return self.token0.chain_id

    @property
    def token0_price(self) -> Fraction:
        """Price of token0 in token1 raw units: sqrtP^2 / 2^192."""
        return Fraction(self.sqrt_price_x96 * self.sqrt_price_x96, Q192)

    def involves_token(self, token: Token) -> bool:
        return self.token0.equals(token) or self.token1.equals(token)

    def other_token(self, token: Token) -> Token:
        if self.token0.equals(token):
            return self.token1
        if self.token1.equals(token):
            return self.token0
        raise ValueError(f"Token {token} not in pool")

    def price_of(self, token: Token) -> Fraction:
        """Mid price of `token` in units of the other token (raw amounts)."""
        if self.token0.equals(token):
            return self.token0_price
        if self.token1.equals(token):
            return 1 / self.token0_price
        raise ValueError(f"Token {token} not in pool")


AnyPool = Pair | Pool
