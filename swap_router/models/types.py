"""Shared type definitions for router request models.

These types are used across options and API models.
"""

from typing import Annotated, Any

from eth_utils import is_address, is_checksum_address, to_checksum_address
from pydantic import BeforeValidator, Field

from swap_router.errors import InvalidAddressError

# Maximum uint256 value
UINT256_MAX = 2**256 - 1


def validate_uint256(value: Any) -> int:
    """Validate that a value is a valid uint256.

    Args:
        value: Value to validate (decimal string, 0x-prefixed hex string or int)

    Returns:
        The value as an int

    Raises:
        ValueError: If value is not a non-negative integer within uint256 range
    """
    if isinstance(value, bool):
        raise ValueError("Uint256 cannot be a boolean")

    if isinstance(value, str):
        try:
            value = int(value, 16) if value.startswith("0x") else int(value)
        except ValueError as err:
            raise ValueError(f"Uint256 must be an integer string: '{value}'") from err

    if not isinstance(value, int):
        raise ValueError(f"Uint256 must be string or int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"Uint256 cannot be negative: {value}")
    if value > UINT256_MAX:
        raise ValueError(f"Uint256 overflow: {value} > 2^256-1")

    return value


# Ethereum address (40 hex chars after 0x prefix)
Address = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{40}$")]

# 256-bit unsigned integer, accepted as int, decimal string or hex string
Uint256 = Annotated[
    int,
    BeforeValidator(validate_uint256),
    Field(description="256-bit unsigned integer"),
]

# 32-byte hex value (block hashes, signature components)
Bytes32 = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{64}$")]


def normalize_address(address: str) -> str:
    """Normalize an Ethereum address to lowercase.

    Args:
        address: An Ethereum address (with or without 0x prefix)

    Returns:
        Lowercase address with 0x prefix

    Note:
        This does NOT check that the input is a valid address. Use
        validate_and_parse_address() for combined validation and checksumming.
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr
    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid Ethereum address.

    Mixed-case addresses must carry a valid EIP-55 checksum.

    Args:
        address: String to validate

    Returns:
        True if valid Ethereum address format
    """
    if not isinstance(address, str):
        return False
    if not address.startswith("0x") or len(address) != 42:
        return False
    if not is_address(address):
        return False
    body = address[2:]
    if body == body.lower() or body == body.upper():
        return True
    return bool(is_checksum_address(address))


def validate_and_parse_address(address: str) -> str:
    """Validate an address and return its checksummed form.

    Raises:
        InvalidAddressError: If the address is malformed or has a bad checksum
    """
    if not is_valid_address(address):
        raise InvalidAddressError(f"Invalid address: {address}")
    return str(to_checksum_address(address))


def is_valid_blockhash(value: object) -> bool:
    """True if value is a 0x-prefixed 32-byte hex string."""
    if not isinstance(value, str) or not value.startswith("0x") or len(value) != 66:
        return False
    try:
        int(value, 16)
        return True
    except ValueError:
        return False
