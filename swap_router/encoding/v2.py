"""V2 router calldata encoding.

Six variants cover {exact input, exact output} x {native in, native out,
token to token}. The balance-aware four-argument swapExactTokensForTokens
is used for V2 sections of mixed routes, where amountIn may be the
router's contract balance.
"""

from __future__ import annotations

from collections.abc import Sequence

from swap_router.encoding.abi import encode_function_data

# Exact input
SWAP_EXACT_ETH_FOR_TOKENS = "swapExactETHForTokens(uint256,address[],address,uint256)"
SWAP_EXACT_TOKENS_FOR_ETH = "swapExactTokensForETH(uint256,uint256,address[],address,uint256)"
SWAP_EXACT_TOKENS_FOR_TOKENS = "swapExactTokensForTokens(uint256,uint256,address[],address,uint256)"

# Exact output
SWAP_ETH_FOR_EXACT_TOKENS = "swapETHForExactTokens(uint256,uint256,address[],address,uint256)"
SWAP_TOKENS_FOR_EXACT_ETH = "swapTokensForExactETH(uint256,uint256,address[],address,uint256)"
SWAP_TOKENS_FOR_EXACT_TOKENS = "swapTokensForExactTokens(uint256,uint256,address[],address,uint256)"

# Mixed route V2 section (no deadline, contract balance aware)
SWAP_EXACT_TOKENS_FOR_TOKENS_BALANCE = "swapExactTokensForTokens(uint256,uint256,address[],address)"


def encode_exact_input(
    amount_in: int,
    amount_out_min: int,
    path: Sequence[str],
    recipient: str,
    deadline: int,
    input_is_native: bool,
    output_is_native: bool,
) -> str:
    """Encode an exact input V2 swap.

    Args:
        amount_in: Exact input amount (ignored when paying with native value)
        amount_out_min: Minimum output (slippage protection), 0 to defer
        path: Token addresses along the route
        recipient: Address to receive output
        deadline: Unix timestamp after which the swap reverts
        input_is_native: Input is paid as native value
        output_is_native: Output is paid out as native currency

    Returns:
        Hex calldata
    """
    path = list(path)
    if input_is_native:
        return encode_function_data(
            SWAP_EXACT_ETH_FOR_TOKENS, [amount_out_min, path, recipient, deadline]
        )
    params = [amount_in, amount_out_min, path, recipient, deadline]
    if output_is_native:
        return encode_function_data(SWAP_EXACT_TOKENS_FOR_ETH, params)
    return encode_function_data(SWAP_EXACT_TOKENS_FOR_TOKENS, params)


def encode_exact_output(
    amount_out: int,
    amount_in_max: int,
    path: Sequence[str],
    recipient: str,
    deadline: int,
    input_is_native: bool,
    output_is_native: bool,
) -> str:
    """Encode an exact output V2 swap.

    Args:
        amount_out: Exact output amount
        amount_in_max: Maximum input (slippage protection)
        path: Token addresses along the route
        recipient: Address to receive output
        deadline: Unix timestamp after which the swap reverts
        input_is_native: Input is paid as native value
        output_is_native: Output is paid out as native currency

    Returns:
        Hex calldata
    """
    params = [amount_out, amount_in_max, list(path), recipient, deadline]
    if input_is_native:
        return encode_function_data(SWAP_ETH_FOR_EXACT_TOKENS, params)
    if output_is_native:
        return encode_function_data(SWAP_TOKENS_FOR_EXACT_ETH, params)
    return encode_function_data(SWAP_TOKENS_FOR_EXACT_TOKENS, params)


def encode_balance_exact_input(
    amount_in: int, amount_out_min: int, path: Sequence[str], recipient: str
) -> str:
    """Encode a V2 section of a mixed route (amount_in 0 = router balance)."""
    return encode_function_data(
        SWAP_EXACT_TOKENS_FOR_TOKENS_BALANCE, [amount_in, amount_out_min, list(path), recipient]
    )


__all__ = [
    "SWAP_EXACT_ETH_FOR_TOKENS",
    "SWAP_EXACT_TOKENS_FOR_ETH",
    "SWAP_EXACT_TOKENS_FOR_TOKENS",
    "SWAP_ETH_FOR_EXACT_TOKENS",
    "SWAP_TOKENS_FOR_EXACT_ETH",
    "SWAP_TOKENS_FOR_EXACT_TOKENS",
    "SWAP_EXACT_TOKENS_FOR_TOKENS_BALANCE",
    "encode_exact_input",
    "encode_exact_output",
    "encode_balance_exact_input",
]
