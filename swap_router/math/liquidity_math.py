"""Token amount and liquidity conversions for concentrated liquidity ranges."""

from __future__ import annotations

from swap_router.math.tick_math import Q96


def mul_div_rounding_up(a: int, b: int, denominator: int) -> int:
    """Compute ceil(a * b / denominator)."""
    if denominator == 0:
        raise ZeroDivisionError("mul_div_rounding_up by zero")
    return -((-a * b) // denominator)


def get_amount0_delta(sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int, round_up: bool) -> int:
    """Amount of token0 between two sqrt prices for a given liquidity.

    amount0 = L * 2^96 * (sqrtB - sqrtA) / (sqrtB * sqrtA)
    """
    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        sqrt_ratio_a_x96, sqrt_ratio_b_x96 = sqrt_ratio_b_x96, sqrt_ratio_a_x96
    if sqrt_ratio_a_x96 == 0:
        raise ZeroDivisionError("sqrt ratio cannot be zero")

    numerator1 = liquidity << 96
    numerator2 = sqrt_ratio_b_x96 - sqrt_ratio_a_x96

    if round_up:
        return mul_div_rounding_up(
            mul_div_rounding_up(numerator1, numerator2, sqrt_ratio_b_x96), 1, sqrt_ratio_a_x96
        )
    return (numerator1 * numerator2 // sqrt_ratio_b_x96) // sqrt_ratio_a_x96


def get_amount1_delta(sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int, round_up: bool) -> int:
    """Amount of token1 between two sqrt prices for a given liquidity.

    amount1 = L * (sqrtB - sqrtA) / 2^96
    """
    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        sqrt_ratio_a_x96, sqrt_ratio_b_x96 = sqrt_ratio_b_x96, sqrt_ratio_a_x96

    if round_up:
        return mul_div_rounding_up(liquidity, sqrt_ratio_b_x96 - sqrt_ratio_a_x96, Q96)
    return liquidity * (sqrt_ratio_b_x96 - sqrt_ratio_a_x96) // Q96


def _max_liquidity_for_amount0_imprecise(sqrt_a: int, sqrt_b: int, amount0: int) -> int:
    # Matches the periphery contract's LiquidityAmounts rounding
    if sqrt_a > sqrt_b:
        sqrt_a, sqrt_b = sqrt_b, sqrt_a
    intermediate = sqrt_a * sqrt_b // Q96
    return amount0 * intermediate // (sqrt_b - sqrt_a)


def _max_liquidity_for_amount0_precise(sqrt_a: int, sqrt_b: int, amount0: int) -> int:
    if sqrt_a > sqrt_b:
        sqrt_a, sqrt_b = sqrt_b, sqrt_a
    return amount0 * sqrt_a * sqrt_b // Q96 // (sqrt_b - sqrt_a)


def _max_liquidity_for_amount1(sqrt_a: int, sqrt_b: int, amount1: int) -> int:
    if sqrt_a > sqrt_b:
        sqrt_a, sqrt_b = sqrt_b, sqrt_a
    return amount1 * Q96 // (sqrt_b - sqrt_a)


def max_liquidity_for_amounts(
    sqrt_ratio_current_x96: int,
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount0: int,
    amount1: int,
    use_full_precision: bool,
) -> int:
    """Maximum liquidity mintable in [A, B] with the given token amounts.

    Args:
        sqrt_ratio_current_x96: Current pool sqrt price
        sqrt_ratio_a_x96: Sqrt price at one range boundary
        sqrt_ratio_b_x96: Sqrt price at the other range boundary
        amount0: Available token0
        amount1: Available token1
        use_full_precision: If False, reproduce the on-chain (imprecise)
            token0 liquidity computation used by the position manager

    Returns:
        Liquidity that can be minted without exceeding either amount
    """
    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        sqrt_ratio_a_x96, sqrt_ratio_b_x96 = sqrt_ratio_b_x96, sqrt_ratio_a_x96

    for_amount0 = (
        _max_liquidity_for_amount0_precise
        if use_full_precision
        else _max_liquidity_for_amount0_imprecise
    )

    if sqrt_ratio_current_x96 <= sqrt_ratio_a_x96:
        return for_amount0(sqrt_ratio_a_x96, sqrt_ratio_b_x96, amount0)
    if sqrt_ratio_current_x96 < sqrt_ratio_b_x96:
        liquidity0 = for_amount0(sqrt_ratio_current_x96, sqrt_ratio_b_x96, amount0)
        liquidity1 = _max_liquidity_for_amount1(sqrt_ratio_a_x96, sqrt_ratio_current_x96, amount1)
        return min(liquidity0, liquidity1)
    return _max_liquidity_for_amount1(sqrt_ratio_a_x96, sqrt_ratio_b_x96, amount1)
