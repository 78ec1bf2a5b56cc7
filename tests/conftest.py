"""Pytest configuration and fixtures."""

import pytest

from swap_router.entities import Token
from tests.helpers import DAI, USDC, USDT, WETH, make_token


@pytest.fixture
def weth() -> Token:
    """Mainnet WETH."""
    return make_token(WETH, symbol="WETH")


@pytest.fixture
def usdc() -> Token:
    """Mainnet USDC (decimals kept at 18 for simple amounts)."""
    return make_token(USDC, symbol="USDC")


@pytest.fixture
def dai() -> Token:
    """Mainnet DAI."""
    return make_token(DAI, symbol="DAI")


@pytest.fixture
def usdt() -> Token:
    """Mainnet USDT (decimals kept at 18 for simple amounts)."""
    return make_token(USDT, symbol="USDT")
