"""Swap-and-add: deposit swap output into a V3 liquidity position.

The swap leaves its output in the router. The remaining position amounts
are pulled or wrapped in, the position manager is approved, liquidity is
added and leftover balances of both tokens are swept back.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from swap_router.encoding.approve_and_call import encode_add_liquidity, encode_approve
from swap_router.encoding.payments import (
    encode_pull,
    encode_sweep_token,
    encode_unwrap_weth9,
    encode_wrap_eth,
)
from swap_router.encoding.permit import encode_permit
from swap_router.entities.amounts import CurrencyAmount
from swap_router.entities.currency import Token, wrapped_native
from swap_router.entities.position import Position
from swap_router.errors import NonTokenPermitOutputError
from swap_router.models.options import (
    AddLiquidityOptions,
    ApprovalType,
    SwapAndAddOptions,
)
from swap_router.settlement import SwapEncoding

logger = structlog.get_logger()


@dataclass(frozen=True)
class PositionAmounts:
    """Mint amounts of a position split by swap role."""

    amount_in: CurrencyAmount
    amount_out: CurrencyAmount


def position_amounts(position: Position, zero_for_one: bool) -> PositionAmounts:
    """Map the position's mint amounts onto the swap's input and output tokens."""
    mint = position.mint_amounts
    amount0 = CurrencyAmount(position.pool.token0, mint.amount0)
    amount1 = CurrencyAmount(position.pool.token1, mint.amount1)
    if zero_for_one:
        return PositionAmounts(amount0, amount1)
    return PositionAmounts(amount1, amount0)


def minimal_position(position: Position, zero_for_one: bool, minimum_amount_out: int) -> Position:
    """The position obtained if the swap fills at its worst allowed price.

    The swap-fed side uses the swap's minimum output; the other side keeps
    the position's own amount.
    """
    if zero_for_one:
        amount0, amount1 = position.amount0.raw, minimum_amount_out
    else:
        amount0, amount1 = minimum_amount_out, position.amount1.raw
    return Position.from_amounts(
        position.pool,
        position.tick_lower,
        position.tick_upper,
        amount0,
        amount1,
        use_full_precision=False,
    )


def _sweep_dust(token: Token, is_native: bool) -> str:
    if is_native:
        return encode_unwrap_weth9(0)
    return encode_sweep_token(token, 0)


def encode_add_liquidity_steps(
    encoding: SwapEncoding,
    options: SwapAndAddOptions,
    position: Position,
    add_liquidity_options: AddLiquidityOptions,
    token_in_approval_type: ApprovalType,
    token_out_approval_type: ApprovalType,
) -> tuple[list[str], int]:
    """Extend swap calls with the liquidity deposit.

    Args:
        encoding: Result of encoding the swaps with router custody
        options: Swap-and-add options
        position: Desired position after the swap
        add_liquidity_options: Mint a new position or increase an existing one
        token_in_approval_type: Approval of the swap input token
        token_out_approval_type: Approval of the swap output token

    Returns:
        (full ordered call list, native value to attach)

    Raises:
        NonTokenPermitOutputError: If an output permit is given for a native output
    """
    calldatas = list(encoding.calldatas)
    quote_amount_out = encoding.quote_amount_out

    if options.output_token_permit is not None:
        if not quote_amount_out.currency.is_token:
            raise NonTokenPermitOutputError("Output permit requires a token output")
        calldatas.append(encode_permit(quote_amount_out.currency, options.output_token_permit))

    chain_id = encoding.trades.chain_id
    zero_for_one = position.pool.token0.equals(encoding.total_amount_in.currency.wrapped)
    amounts = position_amounts(position, zero_for_one)

    token_in = wrapped_native(chain_id) if encoding.input_is_native else amounts.amount_in.currency.wrapped
    token_out = wrapped_native(chain_id) if encoding.output_is_native else amounts.amount_out.currency.wrapped

    # May be negative when the swap quote covers more than the position needs
    amount_out_remaining = amounts.amount_out.difference(quote_amount_out.wrapped)
    if amount_out_remaining > 0:
        if encoding.output_is_native:
            calldatas.append(encode_wrap_eth(amount_out_remaining))
        else:
            calldatas.append(encode_pull(token_out, amount_out_remaining))

    if encoding.input_is_native:
        calldatas.append(encode_wrap_eth(amounts.amount_in.raw))
    else:
        calldatas.append(encode_pull(token_in, amounts.amount_in.raw))

    if token_in_approval_type != ApprovalType.NOT_REQUIRED:
        calldatas.append(encode_approve(token_in, token_in_approval_type))
    if token_out_approval_type != ApprovalType.NOT_REQUIRED:
        calldatas.append(encode_approve(token_out, token_out_approval_type))

    minimal = minimal_position(position, zero_for_one, encoding.minimum_amount_out.quotient)
    calldatas.append(
        encode_add_liquidity(position, minimal, add_liquidity_options, options.slippage_tolerance)
    )

    calldatas.append(_sweep_dust(token_in, encoding.input_is_native))
    calldatas.append(_sweep_dust(token_out, encoding.output_is_native))

    if encoding.input_is_native:
        value = encoding.total_amount_in.quotient + amounts.amount_in.raw
    elif encoding.output_is_native:
        value = max(amount_out_remaining, 0)
    else:
        value = 0

    logger.debug(
        "liquidity_steps_encoded",
        zero_for_one=zero_for_one,
        amount_out_remaining=amount_out_remaining,
        add_liquidity=add_liquidity_options.kind,
    )
    return calldatas, value


__all__ = [
    "PositionAmounts",
    "position_amounts",
    "minimal_position",
    "encode_add_liquidity_steps",
]
