"""Pydantic models for the HTTP compile API.

Requests describe already-quoted legs (pools plus both amounts); the API
turns them into domain entities and returns router method parameters.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from swap_router.entities.amounts import CurrencyAmount
from swap_router.entities.currency import Currency, NativeCurrency, Token
from swap_router.entities.fractions import Percent
from swap_router.entities.pools import AnyPool, Pair, Pool
from swap_router.entities.route import Route
from swap_router.entities.trade import LegTrade, TradeList, TradeType
from swap_router.models.options import FeeOptions, PermitOptions, SwapOptions
from swap_router.models.types import Address, Bytes32, Uint256


class TokenCurrency(BaseModel):
    """An ERC20 token."""

    kind: Literal["token"] = "token"
    address: Address
    decimals: int = Field(default=18, ge=0, le=77)
    symbol: str | None = None


class NativeCurrencySpec(BaseModel):
    """The chain's native currency."""

    kind: Literal["native"] = "native"


CurrencySpec = Annotated[TokenCurrency | NativeCurrencySpec, Field(discriminator="kind")]


class V2PairSpec(BaseModel):
    """A V2 pair with its reserves."""

    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["v2"] = "v2"
    token0: Address
    token1: Address
    reserve0: Uint256
    reserve1: Uint256


class V3PoolSpec(BaseModel):
    """A V3 pool with its current state."""

    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["v3"] = "v3"
    token0: Address
    token1: Address
    fee: int = Field(gt=0, lt=1_000_000, description="Fee in hundredths of a bip")
    sqrt_price_x96: Uint256 = Field(alias="sqrtPriceX96")
    liquidity: Uint256
    tick: int | None = None


PoolSpec = Annotated[V2PairSpec | V3PoolSpec, Field(discriminator="kind")]


class LegSpec(BaseModel):
    """One quoted leg: a route of pools with its input and output amounts."""

    model_config = ConfigDict(populate_by_name=True)

    pools: list[PoolSpec] = Field(min_length=1)
    input_amount: Uint256 = Field(alias="inputAmount")
    output_amount: Uint256 = Field(alias="outputAmount")


class FeeSpec(BaseModel):
    """Output fee in basis points paid to `recipient`."""

    bips: int = Field(ge=0, le=10_000)
    recipient: Address


class SwapOptionsSpec(BaseModel):
    """Swap options in API form."""

    model_config = ConfigDict(populate_by_name=True)

    slippage_bps: int = Field(alias="slippageBps", ge=0, le=10_000)
    recipient: Address | None = None
    deadline: Uint256 | None = None
    previous_blockhash: Bytes32 | None = Field(default=None, alias="previousBlockhash")
    input_token_permit: PermitOptions | None = Field(default=None, alias="inputTokenPermit")
    fee: FeeSpec | None = None

    def to_options(self) -> SwapOptions:
        validation = self.previous_blockhash if self.previous_blockhash is not None else self.deadline
        fee = None
        if self.fee is not None:
            fee = FeeOptions(fee=Percent.from_bips(self.fee.bips), recipient=self.fee.recipient)
        return SwapOptions(
            slippage_tolerance=Percent.from_bips(self.slippage_bps),
            recipient=self.recipient,
            deadline_or_previous_blockhash=validation,
            input_token_permit=self.input_token_permit,
            fee=fee,
        )


class SwapRequest(BaseModel):
    """Request to compile quoted legs into router calldata.

    Example:
        {
            "chainId": 1,
            "tradeType": "exactInput",
            "tokenIn": {"kind": "native"},
            "tokenOut": {"kind": "token", "address": "0x..."},
            "legs": [{"pools": [...], "inputAmount": "1000", "outputAmount": "990"}],
            "options": {"slippageBps": 50}
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    chain_id: int = Field(alias="chainId", gt=0)
    trade_type: TradeType = Field(alias="tradeType")
    token_in: CurrencySpec = Field(alias="tokenIn")
    token_out: CurrencySpec = Field(alias="tokenOut")
    legs: list[LegSpec]
    options: SwapOptionsSpec

    def _currency(self, spec: TokenCurrency | NativeCurrencySpec) -> Currency:
        if spec.kind == "native":
            return NativeCurrency(self.chain_id)
        return Token(self.chain_id, spec.address, spec.decimals, spec.symbol)

    def _pool(self, spec: V2PairSpec | V3PoolSpec) -> AnyPool:
        token0 = Token(self.chain_id, spec.token0)
        token1 = Token(self.chain_id, spec.token1)
        if spec.kind == "v2":
            return Pair(token0, token1, spec.reserve0, spec.reserve1)
        return Pool(token0, token1, spec.fee, spec.sqrt_price_x96, spec.liquidity, spec.tick)

    def to_trades(self) -> TradeList:
        """Build the domain legs described by this request.

        Raises:
            RouterError: If a token address or route is invalid
        """
        currency_in = self._currency(self.token_in)
        currency_out = self._currency(self.token_out)
        legs = []
        for leg in self.legs:
            route = Route(tuple(self._pool(pool) for pool in leg.pools), currency_in, currency_out)
            legs.append(
                LegTrade(
                    route,
                    CurrencyAmount(currency_in, leg.input_amount),
                    CurrencyAmount(currency_out, leg.output_amount),
                    self.trade_type,
                )
            )
        return TradeList(tuple(legs))


class SwapResponse(BaseModel):
    """Router method parameters."""

    calldata: str
    value: str
    calldatas: list[str]


class ErrorResponse(BaseModel):
    """Body returned for rejected compile requests."""

    detail: str
    error: str


__all__ = [
    "TokenCurrency",
    "NativeCurrencySpec",
    "CurrencySpec",
    "V2PairSpec",
    "V3PoolSpec",
    "PoolSpec",
    "LegSpec",
    "FeeSpec",
    "SwapOptionsSpec",
    "SwapRequest",
    "SwapResponse",
    "ErrorResponse",
]
