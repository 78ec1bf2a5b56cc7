"""Shared token constants for tests.

Addresses are lowercase; Token checksums them on construction.

Usage:
    from tests.helpers import WETH, USDC
    # or
    from tests.helpers.constants import WETH, USDC
"""

# =============================================================================
# Mainnet tokens
# =============================================================================

WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"  # Wrapped Ether (18 decimals)
USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"  # USD Coin (6 decimals)
DAI = "0x6b175474e89094c44da98b954eedeac495271d0f"  # Dai Stablecoin (18 decimals)
USDT = "0xdac17f958d2ee523a2206206994597c13d831ec7"  # Tether USD (6 decimals)

# Sorted by address: DAI < USDC < WETH < USDT

# =============================================================================
# Accounts
# =============================================================================

RECIPIENT = "0x00000000000000000000000000000000000000aa"
FEE_RECIPIENT = "0x00000000000000000000000000000000000000bb"

# =============================================================================
# Validation values
# =============================================================================

DEADLINE = 1_700_000_000
PREVIOUS_BLOCKHASH = "0x" + "ab" * 32
