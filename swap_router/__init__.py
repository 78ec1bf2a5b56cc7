"""Swap router calldata compiler."""

from swap_router.config import DEFAULT_ROUTER_CONFIG, RouterConfig
from swap_router.router import (
    MethodParameters,
    swap_and_add_call_parameters,
    swap_call_parameters,
)

__version__ = "0.1.0"
__all__ = [
    "MethodParameters",
    "RouterConfig",
    "DEFAULT_ROUTER_CONFIG",
    "swap_call_parameters",
    "swap_and_add_call_parameters",
    "__version__",
]
