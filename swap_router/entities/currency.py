"""Currencies: ERC20 tokens and each chain's native asset."""

from __future__ import annotations

from dataclasses import dataclass, field

from swap_router.errors import UnsupportedChainError
from swap_router.models.types import validate_and_parse_address


@dataclass(frozen=True)
class Token:
    """An ERC20 token on a specific chain.

    The address is validated and stored in checksummed form.
    """

    chain_id: int
    address: str
    decimals: int = 18
    symbol: str | None = field(default=None, compare=False)
    name: str | None = field(default=None, compare=False)

    is_native = False
    is_token = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", validate_and_parse_address(self.address))
        if not 0 <= self.decimals < 255:
            raise ValueError(f"Invalid token decimals: {self.decimals}")

    @property
    def wrapped(self) -> Token:
        return self

    def equals(self, other: Currency) -> bool:
        return (
            other.is_token
            and self.chain_id == other.chain_id
            and self.address.lower() == other.wrapped.address.lower()
        )

    def sorts_before(self, other: Token) -> bool:
        """True if this token is token0 in a pool with `other`."""
        if self.chain_id != other.chain_id:
            raise ValueError("Tokens are on different chains")
        if self.address.lower() == other.address.lower():
            raise ValueError("Tokens have the same address")
        return self.address.lower() < other.address.lower()

    def __str__(self) -> str:
        return self.symbol or self.address


@dataclass(frozen=True)
class NativeCurrency:
    """The native asset of a chain (e.g. ETH on mainnet)."""

    chain_id: int
    decimals: int = 18
    symbol: str = field(default="ETH", compare=False)
    name: str = field(default="Ether", compare=False)

    is_native = True
    is_token = False

    @property
    def wrapped(self) -> Token:
        return wrapped_native(self.chain_id)

    def equals(self, other: Currency) -> bool:
        return other.is_native and self.chain_id == other.chain_id

    def __str__(self) -> str:
        return self.symbol


Currency = Token | NativeCurrency


# Wrapped native token per chain id
WETH9: dict[int, Token] = {
    1: Token(1, "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2", 18, "WETH", "Wrapped Ether"),
    5: Token(5, "0xb4fbf271143f4fbf7b91a5ded31805e42b2208d6", 18, "WETH", "Wrapped Ether"),
    10: Token(10, "0x4200000000000000000000000000000000000006", 18, "WETH", "Wrapped Ether"),
    8453: Token(8453, "0x4200000000000000000000000000000000000006", 18, "WETH", "Wrapped Ether"),
    42161: Token(42161, "0x82af49447d8a07e3bd95bd0d56f35241523fbab1", 18, "WETH", "Wrapped Ether"),
    11155111: Token(
        11155111, "0xfff9976782d46cc05630d1f6ebab18b2324d6b14", 18, "WETH", "Wrapped Ether"
    ),
}


def wrapped_native(chain_id: int) -> Token:
    """Look up the wrapped native token for a chain.

    Raises:
        UnsupportedChainError: If the chain has no known wrapped native token
    """
    try:
        return WETH9[chain_id]
    except KeyError:
        raise UnsupportedChainError(f"No wrapped native currency for chain {chain_id}") from None
