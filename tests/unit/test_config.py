"""Tests for RouterConfig."""

from swap_router.config import DEFAULT_DEADLINE, DEFAULT_ROUTER_CONFIG, RouterConfig
from swap_router.entities import Percent


class TestRouterConfig:
    """Defaults and environment overrides."""

    def test_defaults(self):
        """Defaults: two legs, 50% impact, far-future deadline."""
        assert DEFAULT_ROUTER_CONFIG.aggregated_slippage_leg_threshold == 2
        assert DEFAULT_ROUTER_CONFIG.refund_price_impact_threshold == Percent(1, 2)
        assert DEFAULT_ROUTER_CONFIG.default_deadline == DEFAULT_DEADLINE == 2**32 - 1

    def test_from_env(self, monkeypatch):
        """Environment variables override the defaults."""
        monkeypatch.setenv("SWAP_ROUTER_AGGREGATED_SLIPPAGE_LEGS", "4")
        monkeypatch.setenv("SWAP_ROUTER_REFUND_IMPACT_BPS", "2500")
        monkeypatch.setenv("SWAP_ROUTER_DEFAULT_DEADLINE", "1000")
        config = RouterConfig.from_env()
        assert config.aggregated_slippage_leg_threshold == 4
        assert config.refund_price_impact_threshold == Percent(1, 4)
        assert config.default_deadline == 1000

    def test_from_env_defaults(self, monkeypatch):
        """Unset variables keep the defaults."""
        monkeypatch.delenv("SWAP_ROUTER_AGGREGATED_SLIPPAGE_LEGS", raising=False)
        monkeypatch.delenv("SWAP_ROUTER_REFUND_IMPACT_BPS", raising=False)
        monkeypatch.delenv("SWAP_ROUTER_DEFAULT_DEADLINE", raising=False)
        assert RouterConfig.from_env() == RouterConfig()
