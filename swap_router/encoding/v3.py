"""Router calldata encoding for V3 swaps.

Single-hop swaps use exactInputSingle / exactOutputSingle; multi-hop swaps
use exactInput / exactOutput with a packed path of
token (20 bytes) | fee (3 bytes) | token (20 bytes) | ...
"""

from __future__ import annotations

from collections.abc import Sequence

from swap_router.encoding.abi import encode_function_data
from swap_router.models.types import normalize_address

# exactInputSingle((tokenIn,tokenOut,fee,recipient,amountIn,amountOutMinimum,sqrtPriceLimitX96))
EXACT_INPUT_SINGLE = "exactInputSingle((address,address,uint24,address,uint256,uint256,uint160))"

# exactOutputSingle((tokenIn,tokenOut,fee,recipient,amountOut,amountInMaximum,sqrtPriceLimitX96))
EXACT_OUTPUT_SINGLE = "exactOutputSingle((address,address,uint24,address,uint256,uint256,uint160))"

# exactInput((path,recipient,amountIn,amountOutMinimum))
EXACT_INPUT = "exactInput((bytes,address,uint256,uint256))"

# exactOutput((path,recipient,amountOut,amountInMaximum))
EXACT_OUTPUT = "exactOutput((bytes,address,uint256,uint256))"


def encode_path(tokens: Sequence[str], fees: Sequence[int], exact_output: bool = False) -> bytes:
    """Pack a V3 multi-hop path.

    Args:
        tokens: Token addresses in swap order, len(fees) + 1 entries
        fees: Pool fee tier for each hop
        exact_output: If True, the path is packed in reverse (output first)

    Returns:
        Packed path bytes

    Raises:
        ValueError: If the token and fee counts do not line up
    """
    if len(tokens) != len(fees) + 1:
        raise ValueError(f"Path needs {len(fees) + 1} tokens for {len(fees)} fees")

    tokens = list(tokens)
    fees = list(fees)
    if exact_output:
        tokens.reverse()
        fees.reverse()

    packed = bytes.fromhex(normalize_address(tokens[0])[2:])
    for fee, token in zip(fees, tokens[1:], strict=True):
        packed += fee.to_bytes(3, "big") + bytes.fromhex(normalize_address(token)[2:])
    return packed


def encode_exact_input_single(
    token_in: str,
    token_out: str,
    fee: int,
    recipient: str,
    amount_in: int,
    amount_out_minimum: int,
    sqrt_price_limit_x96: int = 0,
) -> str:
    """Encode exactInputSingle.

    Args:
        token_in: Input token address
        token_out: Output token address
        fee: Pool fee tier (e.g., 3000 for 0.3%)
        recipient: Address to receive output tokens
        amount_in: Amount of input tokens
        amount_out_minimum: Minimum output amount (slippage protection)
        sqrt_price_limit_x96: Price limit (0 = no limit)

    Returns:
        Hex calldata
    """
    return encode_function_data(
        EXACT_INPUT_SINGLE,
        [
            (
                token_in,
                token_out,
                fee,
                recipient,
                amount_in,
                amount_out_minimum,
                sqrt_price_limit_x96,
            )
        ],
    )


def encode_exact_output_single(
    token_in: str,
    token_out: str,
    fee: int,
    recipient: str,
    amount_out: int,
    amount_in_maximum: int,
    sqrt_price_limit_x96: int = 0,
) -> str:
    """Encode exactOutputSingle.

    Args:
        token_in: Input token address
        token_out: Output token address
        fee: Pool fee tier (e.g., 3000 for 0.3%)
        recipient: Address to receive output tokens
        amount_out: Exact amount of output tokens desired
        amount_in_maximum: Maximum input amount (slippage protection)
        sqrt_price_limit_x96: Price limit (0 = no limit)

    Returns:
        Hex calldata
    """
    return encode_function_data(
        EXACT_OUTPUT_SINGLE,
        [
            (
                token_in,
                token_out,
                fee,
                recipient,
                amount_out,
                amount_in_maximum,
                sqrt_price_limit_x96,
            )
        ],
    )


def encode_exact_input(path: bytes, recipient: str, amount_in: int, amount_out_minimum: int) -> str:
    """Encode exactInput over a packed path."""
    return encode_function_data(EXACT_INPUT, [(path, recipient, amount_in, amount_out_minimum)])


def encode_exact_output(path: bytes, recipient: str, amount_out: int, amount_in_maximum: int) -> str:
    """Encode exactOutput over a reversed packed path."""
    return encode_function_data(EXACT_OUTPUT, [(path, recipient, amount_out, amount_in_maximum)])


__all__ = [
    "EXACT_INPUT_SINGLE",
    "EXACT_OUTPUT_SINGLE",
    "EXACT_INPUT",
    "EXACT_OUTPUT",
    "encode_path",
    "encode_exact_input_single",
    "encode_exact_output_single",
    "encode_exact_input",
    "encode_exact_output",
]
