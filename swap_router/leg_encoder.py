"""Per-leg swap call encoding.

The call variant is chosen from the leg's protocol tag, its trade type and
whether the input or output currency is native.
"""

from __future__ import annotations

from itertools import groupby

import structlog

from swap_router.config import DEFAULT_ROUTER_CONFIG, RouterConfig
from swap_router.constants import ADDRESS_THIS, CONTRACT_BALANCE, MSG_SENDER
from swap_router.encoding import v2, v3
from swap_router.entities.currency import Token
from swap_router.entities.pools import AnyPool, Protocol
from swap_router.entities.trade import LegTrade, TradeType
from swap_router.errors import MixedRouteExactOutputError
from swap_router.models.options import SwapOptions
from swap_router.models.types import validate_and_parse_address

logger = structlog.get_logger()


def resolve_recipient(options: SwapOptions, router_must_custody: bool) -> str:
    """Recipient of a leg's output.

    The router itself when it must custody the output, else the caller's
    recipient, else msg.sender.

    Raises:
        InvalidAddressError: If the explicit recipient is malformed
    """
    if router_must_custody:
        return ADDRESS_THIS
    if options.recipient is None:
        return MSG_SENDER
    return validate_and_parse_address(options.recipient)


def _swap_amounts(leg: LegTrade, options: SwapOptions) -> tuple[int, int]:
    amount_in = leg.maximum_amount_in(options.slippage_tolerance).quotient
    amount_out = leg.minimum_amount_out(options.slippage_tolerance).quotient
    return amount_in, amount_out


def _encode_v2(
    leg: LegTrade,
    options: SwapOptions,
    recipient: str,
    aggregated_slippage_check: bool,
    config: RouterConfig,
) -> list[str]:
    amount_in, amount_out = _swap_amounts(leg, options)
    path = [token.address for token in leg.route.path]
    deadline = options.deadline if options.deadline is not None else config.default_deadline
    input_is_native = leg.input_amount.currency.is_native
    output_is_native = leg.output_amount.currency.is_native

    if leg.trade_type == TradeType.EXACT_INPUT:
        return [
            v2.encode_exact_input(
                amount_in,
                0 if aggregated_slippage_check else amount_out,
                path,
                recipient,
                deadline,
                input_is_native,
                output_is_native,
            )
        ]
    return [
        v2.encode_exact_output(
            amount_out, amount_in, path, recipient, deadline, input_is_native, output_is_native
        )
    ]


def _encode_v3(
    leg: LegTrade,
    options: SwapOptions,
    recipient: str,
    aggregated_slippage_check: bool,
) -> list[str]:
    amount_in, amount_out = _swap_amounts(leg, options)
    tokens = [token.address for token in leg.route.path]
    fees = [pool.fee for pool in leg.route.pools]  # type: ignore[union-attr]
    exact_input = leg.trade_type == TradeType.EXACT_INPUT
    minimum_out = 0 if aggregated_slippage_check else amount_out

    if len(fees) == 1:
        if exact_input:
            return [
                v3.encode_exact_input_single(
                    tokens[0], tokens[1], fees[0], recipient, amount_in, minimum_out
                )
            ]
        return [
            v3.encode_exact_output_single(
                tokens[0], tokens[1], fees[0], recipient, amount_out, amount_in
            )
        ]

    if exact_input:
        return [v3.encode_exact_input(v3.encode_path(tokens, fees), recipient, amount_in, minimum_out)]
    return [
        v3.encode_exact_output(
            v3.encode_path(tokens, fees, exact_output=True), recipient, amount_out, amount_in
        )
    ]


def partition_by_protocol(
    pools: tuple[AnyPool, ...], path: tuple[Token, ...]
) -> list[tuple[Protocol, list[AnyPool], list[Token]]]:
    """Split a route into consecutive same-protocol sections.

    Returns:
        (protocol, pools, tokens) per section; each section's tokens run
        from its input to its output token
    """
    sections = []
    start = 0
    for protocol, group in groupby(pools, key=lambda pool: pool.protocol):
        section_pools = list(group)
        end = start + len(section_pools)
        sections.append((protocol, section_pools, list(path[start : end + 1])))
        start = end
    return sections


def _encode_mixed(
    leg: LegTrade,
    options: SwapOptions,
    recipient: str,
    aggregated_slippage_check: bool,
) -> list[str]:
    if leg.trade_type != TradeType.EXACT_INPUT:
        raise MixedRouteExactOutputError("Mixed routes only support exact input trades")

    amount_in, amount_out = _swap_amounts(leg, options)
    sections = partition_by_protocol(leg.route.pools, leg.route.path)

    calldatas = []
    for i, (protocol, pools, tokens) in enumerate(sections):
        is_first = i == 0
        is_last = i == len(sections) - 1
        section_recipient = recipient if is_last else ADDRESS_THIS
        section_amount_in = amount_in if is_first else CONTRACT_BALANCE
        section_minimum_out = amount_out if is_last and not aggregated_slippage_check else 0
        addresses = [token.address for token in tokens]

        if protocol == Protocol.V3:
            path = v3.encode_path(addresses, [pool.fee for pool in pools])  # type: ignore[union-attr]
            calldatas.append(
                v3.encode_exact_input(path, section_recipient, section_amount_in, section_minimum_out)
            )
        else:
            calldatas.append(
                v2.encode_balance_exact_input(
                    section_amount_in, section_minimum_out, addresses, section_recipient
                )
            )
    return calldatas


def encode_leg(
    leg: LegTrade,
    options: SwapOptions,
    router_must_custody: bool,
    aggregated_slippage_check: bool,
    config: RouterConfig = DEFAULT_ROUTER_CONFIG,
) -> list[str]:
    """Encode the swap call(s) for one leg.

    Args:
        leg: Single-protocol leg
        options: Swap options (slippage, recipient, deadline)
        router_must_custody: Send output to the router instead of the recipient
        aggregated_slippage_check: Replace the leg's minimum output by 0;
            the summed output is checked once by the final sweep/unwrap
        config: Compiler configuration

    Returns:
        One call for V2 and V3 legs, one call per protocol section for mixed legs

    Raises:
        MixedRouteExactOutputError: For exact output mixed legs
        InvalidAddressError: If the explicit recipient is malformed
    """
    recipient = resolve_recipient(options, router_must_custody)
    protocol = Protocol(leg.protocol)

    if protocol == Protocol.V2:
        calldatas = _encode_v2(leg, options, recipient, aggregated_slippage_check, config)
    elif protocol == Protocol.V3:
        calldatas = _encode_v3(leg, options, recipient, aggregated_slippage_check)
    else:
        calldatas = _encode_mixed(leg, options, recipient, aggregated_slippage_check)

    logger.debug(
        "leg_encoded",
        protocol=protocol.value,
        trade_type=leg.trade_type.value,
        hops=leg.hop_count,
        calls=len(calldatas),
        recipient=recipient,
    )
    return calldatas
