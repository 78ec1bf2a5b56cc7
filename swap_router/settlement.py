"""Settlement policy: custody, aggregated slippage, unwrap/sweep and refunds."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from swap_router.config import DEFAULT_ROUTER_CONFIG, RouterConfig
from swap_router.encoding.payments import encode_refund_eth, encode_sweep_token, encode_unwrap_weth9
from swap_router.encoding.permit import encode_permit
from swap_router.entities.amounts import CurrencyAmount
from swap_router.entities.trade import LegTrade, TradeInput, TradeType
from swap_router.errors import NonTokenPermitError
from swap_router.leg_encoder import encode_leg
from swap_router.models.options import SwapOptions
from swap_router.normalizer import NormalizedTrades, normalize_trades
from swap_router.risk import (
    needs_aggregated_slippage_check,
    risk_of_partial_fill,
    router_must_custody,
    sum_amounts,
)

logger = structlog.get_logger()


@dataclass(frozen=True)
class SwapEncoding:
    """Swap calls plus the settlement facts the later steps need.

    Attributes:
        calldatas: Permit (if any) followed by the per-leg swap calls
        trades: The normalized legs
        router_must_custody: Whether swap output is held by the router
        total_amount_in: Sum of the legs' maximum inputs
        minimum_amount_out: Sum of the legs' minimum outputs
        quote_amount_out: Sum of the legs' quoted outputs
    """

    calldatas: tuple[str, ...]
    trades: NormalizedTrades
    router_must_custody: bool
    total_amount_in: CurrencyAmount
    minimum_amount_out: CurrencyAmount
    quote_amount_out: CurrencyAmount

    @property
    def sample(self) -> LegTrade:
        return self.trades.sample

    @property
    def input_is_native(self) -> bool:
        return self.trades.input_is_native

    @property
    def output_is_native(self) -> bool:
        return self.trades.output_is_native


def encode_swaps(
    trades: TradeInput | Sequence[LegTrade],
    options: SwapOptions,
    is_swap_and_add: bool = False,
    config: RouterConfig = DEFAULT_ROUTER_CONFIG,
) -> SwapEncoding:
    """Normalize trades and encode the permit and per-leg swap calls.

    Args:
        trades: Any accepted trade input
        options: Swap options
        is_swap_and_add: Whether the output feeds a liquidity deposit
        config: Compiler configuration

    Returns:
        SwapEncoding with the calls and the aggregated amounts

    Raises:
        NonTokenPermitError: If an input permit is given for a native input
        RouterError: Any normalization or encoding error
    """
    normalized = normalize_trades(trades)
    slippage = options.slippage_tolerance

    aggregated_slippage_check = needs_aggregated_slippage_check(
        normalized.trade_type, normalized.leg_count, config.aggregated_slippage_leg_threshold
    )
    must_custody = router_must_custody(
        normalized.output_is_native,
        options.fee is not None,
        is_swap_and_add,
        aggregated_slippage_check,
    )
    logger.debug(
        "swap_custody_decided",
        router_must_custody=must_custody,
        aggregated_slippage_check=aggregated_slippage_check,
        leg_count=normalized.leg_count,
    )

    calldatas: list[str] = []
    if options.input_token_permit is not None:
        if not normalized.input_currency.is_token:
            raise NonTokenPermitError("Input permit requires a token input")
        calldatas.append(encode_permit(normalized.input_currency, options.input_token_permit))

    for leg in normalized.legs:
        calldatas.extend(encode_leg(leg, options, must_custody, aggregated_slippage_check, config))

    input_currency = normalized.input_currency
    output_currency = normalized.output_currency
    return SwapEncoding(
        calldatas=tuple(calldatas),
        trades=normalized,
        router_must_custody=must_custody,
        total_amount_in=sum_amounts(
            normalized.legs, input_currency, lambda leg: leg.maximum_amount_in(slippage)
        ),
        minimum_amount_out=sum_amounts(
            normalized.legs, output_currency, lambda leg: leg.minimum_amount_out(slippage)
        ),
        quote_amount_out=sum_amounts(
            normalized.legs, output_currency, lambda leg: leg.output_amount
        ),
    )


def settle_swap(
    encoding: SwapEncoding,
    options: SwapOptions,
    config: RouterConfig = DEFAULT_ROUTER_CONFIG,
) -> list[str]:
    """Append the custody release and native refund calls to a plain swap.

    Returns:
        The full ordered call list of the swap
    """
    calldatas = list(encoding.calldatas)

    if encoding.router_must_custody:
        minimum_out = encoding.minimum_amount_out.quotient
        if encoding.output_is_native:
            calldatas.append(encode_unwrap_weth9(minimum_out, options.recipient, options.fee))
        else:
            calldatas.append(
                encode_sweep_token(
                    encoding.sample.output_amount.currency.wrapped,
                    minimum_out,
                    options.recipient,
                    options.fee,
                )
            )

    if encoding.input_is_native:
        partial_fill = risk_of_partial_fill(
            encoding.trades.legs, config.refund_price_impact_threshold
        )
        if encoding.trades.trade_type == TradeType.EXACT_OUTPUT or partial_fill:
            calldatas.append(encode_refund_eth())
            logger.debug(
                "refund_eth_appended",
                trade_type=encoding.trades.trade_type.value,
                risk_of_partial_fill=partial_fill,
            )

    return calldatas


def swap_value(encoding: SwapEncoding) -> int:
    """Native value to attach to a plain swap."""
    if encoding.input_is_native:
        return encoding.total_amount_in.quotient
    return 0


__all__ = ["SwapEncoding", "encode_swaps", "settle_swap", "swap_value"]
