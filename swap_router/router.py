"""Compiler entry points producing router method parameters."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from swap_router.config import DEFAULT_ROUTER_CONFIG, RouterConfig
from swap_router.encoding.abi import to_hex
from swap_router.encoding.multicall import encode_multicall
from swap_router.entities.position import Position
from swap_router.entities.trade import LegTrade, TradeInput
from swap_router.liquidity import encode_add_liquidity_steps
from swap_router.models.options import (
    AddLiquidityOptions,
    ApprovalType,
    SwapAndAddOptions,
    SwapOptions,
)
from swap_router.settlement import encode_swaps, settle_swap, swap_value

logger = structlog.get_logger()


@dataclass(frozen=True)
class MethodParameters:
    """Calldata and native value of one router transaction.

    Attributes:
        calldata: Hex calldata for the router (a single call or a multicall)
        value: Native value to attach, as a hex integer string
        calldatas: Every assembled call in execution order
    """

    calldata: str
    value: str
    calldatas: tuple[str, ...]


def _method_parameters(calldatas: list[str], value: int, options: SwapOptions) -> MethodParameters:
    calldata = encode_multicall(calldatas, options.deadline_or_previous_blockhash)
    logger.debug("method_parameters_built", calls=len(calldatas), value=value)
    return MethodParameters(calldata=calldata, value=to_hex(value), calldatas=tuple(calldatas))


def swap_call_parameters(
    trades: TradeInput | Sequence[LegTrade],
    options: SwapOptions,
    config: RouterConfig | None = None,
) -> MethodParameters:
    """Produce the calldata and value for executing trades on the router.

    Args:
        trades: A LegTrade, AggregateTrade, TradeList or sequence of LegTrades
        options: Swap options
        config: Compiler configuration (DEFAULT_ROUTER_CONFIG if None)

    Returns:
        MethodParameters for the transaction

    Raises:
        RouterError: If the trades cannot be settled together
    """
    config = config or DEFAULT_ROUTER_CONFIG
    encoding = encode_swaps(trades, options, is_swap_and_add=False, config=config)
    calldatas = settle_swap(encoding, options, config)
    return _method_parameters(calldatas, swap_value(encoding), options)


def swap_and_add_call_parameters(
    trades: TradeInput | Sequence[LegTrade],
    options: SwapAndAddOptions,
    position: Position,
    add_liquidity_options: AddLiquidityOptions,
    token_in_approval_type: ApprovalType,
    token_out_approval_type: ApprovalType,
    config: RouterConfig | None = None,
) -> MethodParameters:
    """Produce the calldata and value for swapping and adding liquidity.

    Args:
        trades: Trades whose output feeds the position
        options: Swap-and-add options
        position: Desired position after the swap
        add_liquidity_options: Mint a new position or increase an existing one
        token_in_approval_type: Position manager approval of the input token
        token_out_approval_type: Position manager approval of the output token
        config: Compiler configuration (DEFAULT_ROUTER_CONFIG if None)

    Returns:
        MethodParameters for the transaction

    Raises:
        RouterError: If the trades or options cannot be settled together
    """
    config = config or DEFAULT_ROUTER_CONFIG
    encoding = encode_swaps(trades, options, is_swap_and_add=True, config=config)
    calldatas, value = encode_add_liquidity_steps(
        encoding,
        options,
        position,
        add_liquidity_options,
        token_in_approval_type,
        token_out_approval_type,
    )
    return _method_parameters(calldatas, value, options)


__all__ = ["MethodParameters", "swap_call_parameters", "swap_and_add_call_parameters"]
