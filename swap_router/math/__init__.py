"""Concentrated liquidity math."""

from swap_router.math.liquidity_math import (
    get_amount0_delta,
    get_amount1_delta,
    max_liquidity_for_amounts,
    mul_div_rounding_up,
)
from swap_router.math.tick_math import (
    MAX_SQRT_RATIO,
    MAX_TICK,
    MIN_SQRT_RATIO,
    MIN_TICK,
    Q96,
    Q192,
    encode_sqrt_ratio_x96,
    get_sqrt_ratio_at_tick,
    get_tick_at_sqrt_ratio,
)

__all__ = [
    "MIN_TICK",
    "MAX_TICK",
    "MIN_SQRT_RATIO",
    "MAX_SQRT_RATIO",
    "Q96",
    "Q192",
    "get_sqrt_ratio_at_tick",
    "get_tick_at_sqrt_ratio",
    "encode_sqrt_ratio_x96",
    "get_amount0_delta",
    "get_amount1_delta",
    "max_liquidity_for_amounts",
    "mul_div_rounding_up",
]
