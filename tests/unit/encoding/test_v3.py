"""Tests for V3 router call encoding."""

import pytest

from swap_router.encoding import v3
from tests.helpers import DAI, RECIPIENT, USDC, WETH, decode_call, same_address


class TestEncodePath:
    """Tests for packed V3 paths."""

    def test_single_hop_layout(self):
        """token (20) | fee (3) | token (20)."""
        path = v3.encode_path([WETH, USDC], [3000])
        assert len(path) == 43
        assert path[:20].hex() == WETH[2:]
        assert int.from_bytes(path[20:23], "big") == 3000
        assert path[23:].hex() == USDC[2:]

    def test_multi_hop_length(self):
        """Each extra hop adds 23 bytes."""
        assert len(v3.encode_path([WETH, USDC, DAI], [500, 100])) == 66

    def test_exact_output_reversed(self):
        """Exact output paths start at the output token."""
        forward = v3.encode_path([WETH, USDC, DAI], [500, 100])
        reverse = v3.encode_path([WETH, USDC, DAI], [500, 100], exact_output=True)
        assert reverse == v3.encode_path([DAI, USDC, WETH], [100, 500])
        assert reverse != forward

    def test_mismatched_counts(self):
        """Token count must be fee count plus one."""
        with pytest.raises(ValueError):
            v3.encode_path([WETH, USDC], [500, 100])


class TestSwapCalls:
    """Tests for V3 swap calls."""

    def test_exact_input_single(self):
        """The struct carries a zero price limit."""
        calldata = v3.encode_exact_input_single(WETH, USDC, 500, RECIPIENT, 100, 90)
        (params,) = decode_call(v3.EXACT_INPUT_SINGLE, calldata)
        token_in, token_out, fee, to, amount_in, amount_out_min, limit = params
        assert same_address(token_in, WETH)
        assert same_address(token_out, USDC)
        assert (fee, amount_in, amount_out_min, limit) == (500, 100, 90, 0)
        assert same_address(to, RECIPIENT)

    def test_exact_output_single(self):
        """Exact output carries amount out then maximum in."""
        calldata = v3.encode_exact_output_single(WETH, USDC, 500, RECIPIENT, 100, 110)
        (params,) = decode_call(v3.EXACT_OUTPUT_SINGLE, calldata)
        assert params[4:] == (100, 110, 0)

    def test_exact_input(self):
        """Multi-hop exact input carries the packed path."""
        path = v3.encode_path([WETH, USDC, DAI], [500, 100])
        (params,) = decode_call(v3.EXACT_INPUT, v3.encode_exact_input(path, RECIPIENT, 100, 90))
        assert params[0] == path
        assert params[2:] == (100, 90)
