"""Request option models and shared field types.

Option models live in swap_router.models.options; they depend on the
entities package, which itself depends on the address types below.
"""

from swap_router.models.types import (
    Address,
    Bytes32,
    Uint256,
    is_valid_address,
    is_valid_blockhash,
    normalize_address,
    validate_and_parse_address,
)

__all__ = [
    "Address",
    "Bytes32",
    "Uint256",
    "normalize_address",
    "is_valid_address",
    "is_valid_blockhash",
    "validate_and_parse_address",
]
