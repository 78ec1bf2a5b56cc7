"""Function call encoding on top of eth_abi.

Calls are described by their canonical signature, e.g.
"swapExactTokensForTokens(uint256,uint256,address[],address,uint256)".
The 4-byte selector is the keccak hash prefix of the signature and the
argument types are parsed from it with eth_abi's type grammar, so each
encoder only names its signature.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from typing import Any

from eth_abi import encode  # type: ignore[attr-defined]
from eth_abi.exceptions import ParseError
from eth_abi.grammar import parse
from eth_utils import function_signature_to_4byte_selector


@lru_cache(maxsize=None)
def argument_types(signature: str) -> tuple[str, ...]:
    """Top-level argument types of a canonical function signature.

    Tuple types are kept intact:
    "mint((address,uint24),uint256)" -> ("(address,uint24)", "uint256")

    Raises:
        ValueError: If the signature is not a valid ABI function signature
    """
    open_idx = signature.find("(")
    if open_idx <= 0:
        raise ValueError(f"Malformed function signature: {signature}")
    try:
        arguments = parse(signature[open_idx:])
    except ParseError as err:
        raise ValueError(f"Malformed function signature: {signature}") from err
    return tuple(component.to_type_str() for component in arguments.components)


@lru_cache(maxsize=None)
def function_selector(signature: str) -> bytes:
    """4-byte selector for a canonical function signature."""
    return bytes(function_signature_to_4byte_selector(signature))


def encode_function_data(signature: str, args: Sequence[Any]) -> str:
    """Encode a call as 0x-prefixed calldata (selector + ABI encoded args).

    Args:
        signature: Canonical function signature
        args: Argument values in signature order; addresses as 0x strings,
            tuples for struct arguments

    Returns:
        Hex calldata string

    Raises:
        ValueError: If the number of arguments does not match the signature
    """
    types = argument_types(signature)
    if len(types) != len(args):
        raise ValueError(f"{signature} expects {len(types)} arguments, got {len(args)}")

    encoded_args = encode(list(types), list(args)) if types else b""
    return "0x" + (function_selector(signature) + encoded_args).hex()


def hex_to_bytes(value: str) -> bytes:
    """Convert a 0x-prefixed hex string (calldata, hashes) to bytes."""
    if value.startswith("0x"):
        value = value[2:]
    return bytes.fromhex(value)


def to_hex(value: int) -> str:
    """Render a non-negative integer as a 0x-prefixed hex string."""
    if value < 0:
        raise ValueError(f"Cannot hex-encode negative value: {value}")
    return hex(value)


__all__ = [
    "argument_types",
    "function_selector",
    "encode_function_data",
    "hex_to_bytes",
    "to_hex",
]
