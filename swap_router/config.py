"""Compiler configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from swap_router.entities.fractions import Percent

# Far-future deadline used by V2 router calls when none is supplied
DEFAULT_DEADLINE = 2**32 - 1


@dataclass(frozen=True)
class RouterConfig:
    """Centralized policy thresholds for the compiler.

    Attributes:
        aggregated_slippage_leg_threshold: EXACT_INPUT trades with more legs
            than this defer slippage protection to a single check over the
            summed output (default: 2)
        refund_price_impact_threshold: Non-V2 legs with a price impact above
            this risk a partial fill, which forces a native refund (default: 50%)
        default_deadline: Deadline for V2 router calls when the options carry
            none (default: 2^32 - 1)
    """

    aggregated_slippage_leg_threshold: int = 2
    refund_price_impact_threshold: Percent = field(default_factory=lambda: Percent(50, 100))
    default_deadline: int = DEFAULT_DEADLINE

    @classmethod
    def from_env(cls) -> RouterConfig:
        """Build a config from environment variables, falling back to defaults.

        - SWAP_ROUTER_AGGREGATED_SLIPPAGE_LEGS: leg threshold
        - SWAP_ROUTER_REFUND_IMPACT_BPS: refund price impact threshold in bps
        - SWAP_ROUTER_DEFAULT_DEADLINE: default V2 deadline
        """
        defaults = cls()
        legs = os.environ.get("SWAP_ROUTER_AGGREGATED_SLIPPAGE_LEGS")
        impact_bps = os.environ.get("SWAP_ROUTER_REFUND_IMPACT_BPS")
        deadline = os.environ.get("SWAP_ROUTER_DEFAULT_DEADLINE")
        return cls(
            aggregated_slippage_leg_threshold=(
                int(legs) if legs else defaults.aggregated_slippage_leg_threshold
            ),
            refund_price_impact_threshold=(
                Percent.from_bips(int(impact_bps))
                if impact_bps
                else defaults.refund_price_impact_threshold
            ),
            default_deadline=int(deadline) if deadline else defaults.default_deadline,
        )


# Default configuration instance
DEFAULT_ROUTER_CONFIG = RouterConfig()
