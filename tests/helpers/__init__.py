"""Test helpers module for shared test utilities.

- constants: Token addresses, accounts and validation values
- factories: Token, pool, leg and option factory functions
- calldata: Decoding helpers for calldata assertions
"""

from tests.helpers.calldata import decode_call, same_address, selector_of
from tests.helpers.constants import (
    DAI,
    DEADLINE,
    FEE_RECIPIENT,
    PREVIOUS_BLOCKHASH,
    RECIPIENT,
    USDC,
    USDT,
    WETH,
)
from tests.helpers.factories import (
    DEEP,
    ETHER,
    make_leg,
    make_options,
    make_pair,
    make_pool,
    make_token,
)

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "USDT",
    "RECIPIENT",
    "FEE_RECIPIENT",
    "DEADLINE",
    "PREVIOUS_BLOCKHASH",
    # Factories
    "ETHER",
    "DEEP",
    "make_token",
    "make_pair",
    "make_pool",
    "make_leg",
    "make_options",
    # Calldata
    "decode_call",
    "selector_of",
    "same_address",
]
