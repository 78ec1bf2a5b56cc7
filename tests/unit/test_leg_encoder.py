"""Tests for per-leg call encoding."""

import pytest

from swap_router.config import DEFAULT_DEADLINE, RouterConfig
from swap_router.constants import ADDRESS_THIS, MSG_SENDER
from swap_router.encoding import v2, v3
from swap_router.entities import TradeType
from swap_router.errors import InvalidAddressError, MixedRouteExactOutputError
from swap_router.leg_encoder import encode_leg, partition_by_protocol, resolve_recipient
from tests.helpers import (
    DEADLINE,
    ETHER,
    PREVIOUS_BLOCKHASH,
    RECIPIENT,
    decode_call,
    make_leg,
    make_options,
    make_pair,
    make_pool,
    same_address,
)


class TestResolveRecipient:
    """Recipient selection."""

    def test_custody_overrides_recipient(self):
        """The router keeps the output when it must custody."""
        assert resolve_recipient(make_options(recipient=RECIPIENT), True) == ADDRESS_THIS

    def test_explicit_recipient(self):
        """An explicit recipient is checksummed."""
        assert same_address(resolve_recipient(make_options(recipient=RECIPIENT), False), RECIPIENT)

    def test_defaults_to_msg_sender(self):
        """Without recipient the caller receives the output."""
        assert resolve_recipient(make_options(), False) == MSG_SENDER

    def test_bad_checksum_rejected(self):
        """Recipients with a broken checksum raise."""
        options = make_options(recipient="0xC02AAA39b223FE8D0A0e5C4F27eAD9083C756Cc2")
        with pytest.raises(InvalidAddressError):
            resolve_recipient(options, False)


class TestV2Legs:
    """V2 variant selection and arguments."""

    def test_exact_input_tokens(self, weth, usdc):
        """Token to token exact input with slippage-adjusted minimum."""
        leg = make_leg([make_pair(weth, usdc)], weth, usdc, 1000, 1000)
        options = make_options(recipient=RECIPIENT, deadline_or_previous_blockhash=DEADLINE)
        (calldata,) = encode_leg(leg, options, False, False)
        amount_in, amount_out_min, path, to, deadline = decode_call(
            v2.SWAP_EXACT_TOKENS_FOR_TOKENS, calldata
        )
        assert (amount_in, amount_out_min, deadline) == (1000, 995, DEADLINE)
        assert same_address(path[0], weth.address)
        assert same_address(path[1], usdc.address)
        assert same_address(to, RECIPIENT)

    def test_default_deadline(self, weth, usdc):
        """Without a deadline the far-future default is used."""
        leg = make_leg([make_pair(weth, usdc)], weth, usdc, 1000, 1000)
        (calldata,) = encode_leg(leg, make_options(), False, False)
        assert decode_call(v2.SWAP_EXACT_TOKENS_FOR_TOKENS, calldata)[4] == DEFAULT_DEADLINE

    def test_blockhash_validation_uses_default_deadline(self, weth, usdc):
        """A previous blockhash is not a deadline."""
        leg = make_leg([make_pair(weth, usdc)], weth, usdc, 1000, 1000)
        options = make_options(deadline_or_previous_blockhash=PREVIOUS_BLOCKHASH)
        (calldata,) = encode_leg(leg, options, False, False)
        assert decode_call(v2.SWAP_EXACT_TOKENS_FOR_TOKENS, calldata)[4] == DEFAULT_DEADLINE

    def test_configured_deadline(self, weth, usdc):
        """The default deadline is configurable."""
        leg = make_leg([make_pair(weth, usdc)], weth, usdc, 1000, 1000)
        (calldata,) = encode_leg(leg, make_options(), False, False, RouterConfig(default_deadline=77))
        assert decode_call(v2.SWAP_EXACT_TOKENS_FOR_TOKENS, calldata)[4] == 77

    def test_aggregated_check_zeroes_minimum(self, weth, usdc):
        """Per-leg minimum output is zero under the aggregated check."""
        leg = make_leg([make_pair(weth, usdc)], weth, usdc, 1000, 1000)
        (calldata,) = encode_leg(leg, make_options(), True, True)
        _, amount_out_min, _, to, _ = decode_call(v2.SWAP_EXACT_TOKENS_FOR_TOKENS, calldata)
        assert amount_out_min == 0
        assert to == ADDRESS_THIS

    @pytest.mark.parametrize(
        "native_in,native_out,trade_type,signature",
        [
            (True, False, TradeType.EXACT_INPUT, v2.SWAP_EXACT_ETH_FOR_TOKENS),
            (False, True, TradeType.EXACT_INPUT, v2.SWAP_EXACT_TOKENS_FOR_ETH),
            (False, False, TradeType.EXACT_INPUT, v2.SWAP_EXACT_TOKENS_FOR_TOKENS),
            (True, False, TradeType.EXACT_OUTPUT, v2.SWAP_ETH_FOR_EXACT_TOKENS),
            (False, True, TradeType.EXACT_OUTPUT, v2.SWAP_TOKENS_FOR_EXACT_ETH),
            (False, False, TradeType.EXACT_OUTPUT, v2.SWAP_TOKENS_FOR_EXACT_TOKENS),
        ],
    )
    def test_variant_selection(self, weth, usdc, native_in, native_out, trade_type, signature):
        """Each nativeness and trade type combination picks its variant."""
        input_currency = ETHER if native_in else (usdc if native_out else weth)
        output_currency = ETHER if native_out else usdc
        leg = make_leg(
            [make_pair(weth, usdc)], input_currency, output_currency, 1000, 1000, trade_type=trade_type
        )
        (calldata,) = encode_leg(leg, make_options(), native_out, False)
        decode_call(signature, calldata)

    def test_exact_output_arguments(self, weth, usdc):
        """Exact output passes amount out then maximum in."""
        leg = make_leg(
            [make_pair(weth, usdc)], weth, usdc, 1000, 500, trade_type=TradeType.EXACT_OUTPUT
        )
        (calldata,) = encode_leg(leg, make_options(), False, False)
        assert decode_call(v2.SWAP_TOKENS_FOR_EXACT_TOKENS, calldata)[:2] == (500, 1005)


class TestV3Legs:
    """V3 single and multi-hop encoding."""

    def test_single_hop_exact_input(self, weth, usdc):
        """One pool uses exactInputSingle with the pool's fee."""
        leg = make_leg([make_pool(weth, usdc, fee=500)], weth, usdc, 1000, 1000)
        (calldata,) = encode_leg(leg, make_options(recipient=RECIPIENT), False, False)
        (params,) = decode_call(v3.EXACT_INPUT_SINGLE, calldata)
        assert same_address(params[0], weth.address)
        assert params[2] == 500
        assert params[4:] == (1000, 995, 0)

    def test_single_hop_exact_output(self, weth, usdc):
        """One pool exact output uses exactOutputSingle."""
        leg = make_leg(
            [make_pool(weth, usdc)], weth, usdc, 1000, 500, trade_type=TradeType.EXACT_OUTPUT
        )
        (calldata,) = encode_leg(leg, make_options(), False, False)
        (params,) = decode_call(v3.EXACT_OUTPUT_SINGLE, calldata)
        assert params[4:6] == (500, 1005)

    def test_multi_hop_exact_input(self, weth, usdc, dai):
        """Several pools use exactInput with the packed path."""
        leg = make_leg(
            [make_pool(weth, usdc, fee=500), make_pool(usdc, dai, fee=100)], weth, dai, 1000, 1000
        )
        (calldata,) = encode_leg(leg, make_options(), False, True)
        (params,) = decode_call(v3.EXACT_INPUT, calldata)
        expected_path = v3.encode_path([weth.address, usdc.address, dai.address], [500, 100])
        assert params[0] == expected_path
        assert params[2:] == (1000, 0)

    def test_multi_hop_exact_output_reversed(self, weth, usdc, dai):
        """Exact output paths are packed output first."""
        leg = make_leg(
            [make_pool(weth, usdc, fee=500), make_pool(usdc, dai, fee=100)],
            weth,
            dai,
            1000,
            500,
            trade_type=TradeType.EXACT_OUTPUT,
        )
        (calldata,) = encode_leg(leg, make_options(), False, False)
        (params,) = decode_call(v3.EXACT_OUTPUT, calldata)
        assert params[0] == v3.encode_path([dai.address, usdc.address, weth.address], [100, 500])
        assert params[2:] == (500, 1005)


class TestMixedLegs:
    """Mixed-route sections."""

    def test_partition(self, weth, usdc, dai, usdt):
        """Consecutive same-protocol pools form one section."""
        pools = (make_pair(weth, usdc), make_pair(usdc, dai), make_pool(dai, usdt))
        sections = partition_by_protocol(pools, (weth, usdc, dai, usdt))
        assert [(protocol, len(section)) for protocol, section, _ in sections] == [
            ("V2", 2),
            ("V3", 1),
        ]
        assert sections[0][2] == [weth, usdc, dai]
        assert sections[1][2] == [dai, usdt]

    def test_sections_chain_through_router(self, weth, usdc, dai):
        """Only the first section spends input; only the last pays out."""
        leg = make_leg([make_pair(weth, usdc), make_pool(usdc, dai, fee=500)], weth, dai, 1000, 1000)
        first, last = encode_leg(leg, make_options(recipient=RECIPIENT), False, False)

        amount_in, amount_out_min, path, to = decode_call(v2.SWAP_EXACT_TOKENS_FOR_TOKENS_BALANCE, first)
        assert (amount_in, amount_out_min) == (1000, 0)
        assert len(path) == 2
        assert to == ADDRESS_THIS

        (params,) = decode_call(v3.EXACT_INPUT, last)
        assert params[0] == v3.encode_path([usdc.address, dai.address], [500])
        assert same_address(params[1], RECIPIENT)
        assert params[2:] == (0, 995)

    def test_exact_output_rejected(self, weth, usdc, dai):
        """Mixed routes only support exact input."""
        leg = make_leg(
            [make_pair(weth, usdc), make_pool(usdc, dai)],
            weth,
            dai,
            1000,
            1000,
            trade_type=TradeType.EXACT_OUTPUT,
        )
        with pytest.raises(MixedRouteExactOutputError):
            encode_leg(leg, make_options(), False, False)
