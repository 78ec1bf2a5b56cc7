"""Batching of assembled router calls into one multicall."""

from __future__ import annotations

from collections.abc import Sequence

from swap_router.encoding.abi import encode_function_data, hex_to_bytes
from swap_router.models.types import is_valid_blockhash

MULTICALL = "multicall(bytes[])"
MULTICALL_DEADLINE = "multicall(uint256,bytes[])"
MULTICALL_PREVIOUS_BLOCKHASH = "multicall(bytes32,bytes[])"


def encode_multicall(calldatas: Sequence[str], validation: int | str | None = None) -> str:
    """Combine calls into the transaction's calldata.

    A single call is returned unchanged. Several calls are wrapped in the
    multicall overload matching the validation value: none, a deadline,
    or a 32-byte previous blockhash.

    Raises:
        ValueError: If there are no calls
    """
    if not calldatas:
        raise ValueError("No calls to encode")
    if len(calldatas) == 1:
        return calldatas[0]

    data = [hex_to_bytes(calldata) for calldata in calldatas]
    if validation is None:
        return encode_function_data(MULTICALL, [data])
    if is_valid_blockhash(validation):
        return encode_function_data(
            MULTICALL_PREVIOUS_BLOCKHASH, [hex_to_bytes(str(validation)), data]
        )
    return encode_function_data(MULTICALL_DEADLINE, [int(validation), data])


__all__ = ["MULTICALL", "MULTICALL_DEADLINE", "MULTICALL_PREVIOUS_BLOCKHASH", "encode_multicall"]
