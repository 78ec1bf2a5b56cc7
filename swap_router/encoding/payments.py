"""Router payment calls: unwrapping, sweeping, refunds, wraps and pulls.

Unwrap and sweep have one overload per combination of explicit recipient
and fee. Without a recipient the router pays msg.sender.
"""

from __future__ import annotations

from swap_router.encoding.abi import encode_function_data
from swap_router.entities.currency import Token
from swap_router.models.options import FeeOptions
from swap_router.models.types import validate_and_parse_address

UNWRAP_WETH9 = "unwrapWETH9(uint256)"
UNWRAP_WETH9_TO = "unwrapWETH9(uint256,address)"
UNWRAP_WETH9_WITH_FEE = "unwrapWETH9WithFee(uint256,uint256,address)"
UNWRAP_WETH9_WITH_FEE_TO = "unwrapWETH9WithFee(uint256,address,uint256,address)"

SWEEP_TOKEN = "sweepToken(address,uint256)"
SWEEP_TOKEN_TO = "sweepToken(address,uint256,address)"
SWEEP_TOKEN_WITH_FEE = "sweepTokenWithFee(address,uint256,uint256,address)"
SWEEP_TOKEN_WITH_FEE_TO = "sweepTokenWithFee(address,uint256,address,uint256,address)"

REFUND_ETH = "refundETH()"
WRAP_ETH = "wrapETH(uint256)"
PULL = "pull(address,uint256)"


def _fee_args(fee: FeeOptions) -> list[object]:
    return [fee.fee_bips, validate_and_parse_address(fee.recipient)]


def encode_unwrap_weth9(
    amount_minimum: int, recipient: str | None = None, fee: FeeOptions | None = None
) -> str:
    """Unwrap the router's wrapped native balance and send it on.

    Args:
        amount_minimum: Minimum balance to unwrap (reverts below it)
        recipient: Receiver; msg.sender when None
        fee: Optional fee taken from the unwrapped amount

    Raises:
        InvalidAddressError: If the recipient or fee recipient is malformed
    """
    if recipient is None:
        if fee is None:
            return encode_function_data(UNWRAP_WETH9, [amount_minimum])
        return encode_function_data(UNWRAP_WETH9_WITH_FEE, [amount_minimum, *_fee_args(fee)])

    to = validate_and_parse_address(recipient)
    if fee is None:
        return encode_function_data(UNWRAP_WETH9_TO, [amount_minimum, to])
    return encode_function_data(UNWRAP_WETH9_WITH_FEE_TO, [amount_minimum, to, *_fee_args(fee)])


def encode_sweep_token(
    token: Token,
    amount_minimum: int,
    recipient: str | None = None,
    fee: FeeOptions | None = None,
) -> str:
    """Send the router's whole balance of `token` on.

    Args:
        token: Token to sweep
        amount_minimum: Minimum balance to sweep (reverts below it)
        recipient: Receiver; msg.sender when None
        fee: Optional fee taken from the swept amount

    Raises:
        InvalidAddressError: If the recipient or fee recipient is malformed
    """
    if recipient is None:
        if fee is None:
            return encode_function_data(SWEEP_TOKEN, [token.address, amount_minimum])
        return encode_function_data(
            SWEEP_TOKEN_WITH_FEE, [token.address, amount_minimum, *_fee_args(fee)]
        )

    to = validate_and_parse_address(recipient)
    if fee is None:
        return encode_function_data(SWEEP_TOKEN_TO, [token.address, amount_minimum, to])
    return encode_function_data(
        SWEEP_TOKEN_WITH_FEE_TO, [token.address, amount_minimum, to, *_fee_args(fee)]
    )


def encode_refund_eth() -> str:
    """Refund any native value left in the router to msg.sender."""
    return encode_function_data(REFUND_ETH, [])


def encode_wrap_eth(amount: int) -> str:
    """Wrap `amount` of the attached native value."""
    return encode_function_data(WRAP_ETH, [amount])


def encode_pull(token: Token, amount: int) -> str:
    """Transfer `amount` of `token` from msg.sender into the router."""
    return encode_function_data(PULL, [token.address, amount])


__all__ = [
    "UNWRAP_WETH9",
    "UNWRAP_WETH9_TO",
    "UNWRAP_WETH9_WITH_FEE",
    "UNWRAP_WETH9_WITH_FEE_TO",
    "SWEEP_TOKEN",
    "SWEEP_TOKEN_TO",
    "SWEEP_TOKEN_WITH_FEE",
    "SWEEP_TOKEN_WITH_FEE_TO",
    "REFUND_ETH",
    "WRAP_ETH",
    "PULL",
    "encode_unwrap_weth9",
    "encode_sweep_token",
    "encode_refund_eth",
    "encode_wrap_eth",
    "encode_pull",
]
