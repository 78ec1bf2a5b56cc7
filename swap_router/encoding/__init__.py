"""Calldata encoders for the router contract."""

from swap_router.encoding.abi import encode_function_data, function_selector, to_hex
from swap_router.encoding.multicall import encode_multicall

__all__ = [
    "encode_function_data",
    "function_selector",
    "to_hex",
    "encode_multicall",
]
