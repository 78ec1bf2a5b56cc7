"""Position manager approvals and add-liquidity calls made by the router."""

from __future__ import annotations

from swap_router.encoding.abi import encode_function_data
from swap_router.entities.currency import Token
from swap_router.entities.fractions import Percent
from swap_router.entities.position import Position
from swap_router.models.options import ApprovalType, IncreaseOptions, MintOptions
from swap_router.models.types import validate_and_parse_address

APPROVE_SIGNATURES = {
    ApprovalType.MAX: "approveMax(address)",
    ApprovalType.MAX_MINUS_ONE: "approveMaxMinusOne(address)",
    ApprovalType.ZERO_THEN_MAX: "approveZeroThenMax(address)",
    ApprovalType.ZERO_THEN_MAX_MINUS_ONE: "approveZeroThenMaxMinusOne(address)",
}

# mint((token0,token1,fee,tickLower,tickUpper,amount0Min,amount1Min,recipient))
MINT = "mint((address,address,uint24,int24,int24,uint256,uint256,address))"

# increaseLiquidity((token0,token1,tokenId,amount0Min,amount1Min))
INCREASE_LIQUIDITY = "increaseLiquidity((address,address,uint256,uint256,uint256))"


def encode_approve(token: Token, approval_type: ApprovalType) -> str:
    """Encode the router approving the position manager to spend `token`.

    Raises:
        ValueError: If approval_type is NOT_REQUIRED
    """
    if approval_type == ApprovalType.NOT_REQUIRED:
        raise ValueError("No approval call for NOT_REQUIRED")
    return encode_function_data(APPROVE_SIGNATURES[approval_type], [token.address])


def encode_add_liquidity(
    position: Position,
    minimal_position: Position,
    options: MintOptions | IncreaseOptions,
    slippage_tolerance: Percent,
) -> str:
    """Encode mint or increaseLiquidity for `position`.

    Amount minimums come from the position's slippage-adjusted mint
    amounts, lowered to the minimal position's amounts where those are
    smaller (slippage-adjusted amounts are unreliable for e.g. range orders).
    """
    slippage_amounts = position.mint_amounts_with_slippage(slippage_tolerance)
    amount0_min = min(slippage_amounts.amount0, minimal_position.amount0.raw)
    amount1_min = min(slippage_amounts.amount1, minimal_position.amount1.raw)

    pool = position.pool
    if options.kind == "mint":
        return encode_function_data(
            MINT,
            [
                (
                    pool.token0.address,
                    pool.token1.address,
                    pool.fee,
                    position.tick_lower,
                    position.tick_upper,
                    amount0_min,
                    amount1_min,
                    validate_and_parse_address(options.recipient),
                )
            ],
        )
    return encode_function_data(
        INCREASE_LIQUIDITY,
        [(pool.token0.address, pool.token1.address, options.token_id, amount0_min, amount1_min)],
    )


__all__ = [
    "APPROVE_SIGNATURES",
    "MINT",
    "INCREASE_LIQUIDITY",
    "encode_approve",
    "encode_add_liquidity",
]
