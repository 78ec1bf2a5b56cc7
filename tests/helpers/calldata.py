"""Calldata decoding helpers for assertions."""

from eth_abi import decode

from swap_router.encoding.abi import argument_types, function_selector, hex_to_bytes


def selector_of(calldata: str) -> bytes:
    """The 4-byte selector of hex calldata."""
    return hex_to_bytes(calldata)[:4]


def decode_call(signature: str, calldata: str) -> tuple:
    """Decode calldata against `signature`, asserting the selector matches.

    Returns:
        Decoded arguments in signature order
    """
    data = hex_to_bytes(calldata)
    assert data[:4] == function_selector(signature), f"calldata is not a {signature} call"
    types = argument_types(signature)
    if not types:
        return ()
    return decode(list(types), data[4:])


def same_address(a: str, b: str) -> bool:
    """Case-insensitive address comparison."""
    return a.lower() == b.lower()
