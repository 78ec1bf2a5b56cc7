"""Tests for shared address and integer types."""

import pytest

from swap_router.errors import InvalidAddressError
from swap_router.models.types import (
    UINT256_MAX,
    is_valid_address,
    is_valid_blockhash,
    validate_and_parse_address,
    validate_uint256,
)
from tests.helpers import WETH

WETH_CHECKSUMMED = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
WETH_BAD_CHECKSUM = "0xC02AAA39b223FE8D0A0e5C4F27eAD9083C756Cc2"


class TestIsValidAddress:
    """Address format and EIP-55 checksum validation."""

    def test_lowercase(self):
        """All-lowercase addresses carry no checksum and are accepted."""
        assert is_valid_address(WETH)

    def test_uppercase(self):
        """All-uppercase addresses carry no checksum and are accepted."""
        assert is_valid_address("0x" + WETH[2:].upper())

    def test_valid_checksum(self):
        """Mixed-case addresses with a correct checksum are accepted."""
        assert is_valid_address(WETH_CHECKSUMMED)

    def test_bad_checksum(self):
        """Mixed-case addresses with a wrong checksum are rejected."""
        assert not is_valid_address(WETH_BAD_CHECKSUM)

    def test_digits_only(self):
        """Addresses without letters are valid in any case."""
        assert is_valid_address("0x" + "0" * 39 + "2")

    @pytest.mark.parametrize("value", ["0x1234", WETH[2:], "0x" + "g" * 40, 42])
    def test_malformed(self, value):
        """Wrong length, missing prefix, non-hex and non-strings are rejected."""
        assert not is_valid_address(value)


class TestValidateAndParseAddress:
    """Checksumming validated addresses."""

    def test_checksums_lowercase(self):
        """Lowercase input is returned in EIP-55 form."""
        assert validate_and_parse_address(WETH) == WETH_CHECKSUMMED

    def test_bad_checksum_raises(self):
        """A broken checksum is not silently re-checksummed."""
        with pytest.raises(InvalidAddressError):
            validate_and_parse_address(WETH_BAD_CHECKSUM)


class TestUint256:
    """uint256 validation."""

    def test_accepts_decimal_and_hex(self):
        """Decimal and 0x-prefixed strings are parsed."""
        assert validate_uint256("255") == 255
        assert validate_uint256("0xff") == 255

    @pytest.mark.parametrize("value", [-1, UINT256_MAX + 1, True, "abc", 1.5])
    def test_rejects(self, value):
        """Negative, overflowing, boolean and non-integer values are rejected."""
        with pytest.raises(ValueError):
            validate_uint256(value)


class TestBlockhash:
    """Previous blockhash detection."""

    def test_blockhash(self):
        """32-byte hex strings are blockhashes."""
        assert is_valid_blockhash("0x" + "ab" * 32)

    def test_not_blockhash(self):
        """Integers and short strings are not."""
        assert not is_valid_blockhash(123)
        assert not is_valid_blockhash("0x" + "ab" * 31)
