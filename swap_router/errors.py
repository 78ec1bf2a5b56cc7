"""Router compiler error classes.

Every validation failure aborts the compile call with one of these. Errors
that describe malformed input values also derive from ValueError.
"""


class RouterError(Exception):
    """Base error for swap router compilation."""

    pass


class NoTradesError(RouterError, ValueError):
    """At least one trade is required."""

    pass


class UnsupportedProtocolError(RouterError):
    """A leg's route protocol is not V2, V3 or MIXED."""

    pass


class TokenInMismatchError(RouterError):
    """Legs do not share the same input currency."""

    pass


class TokenOutMismatchError(RouterError):
    """Legs do not share the same output currency."""

    pass


class TradeTypeMismatchError(RouterError):
    """Legs do not share the same trade type."""

    pass


class NonTokenPermitError(RouterError):
    """Input token permit supplied for a native input currency."""

    pass


class NonTokenPermitOutputError(RouterError):
    """Output token permit supplied for a native output currency."""

    pass


class MixedRouteExactOutputError(RouterError):
    """Mixed routes can only be encoded as exact input swaps."""

    pass


class InvalidAddressError(RouterError, ValueError):
    """Address is not a well-formed Ethereum address."""

    pass


class InvalidRouteError(RouterError, ValueError):
    """Route pools do not connect the input and output currencies."""

    pass


class InvalidTickError(RouterError, ValueError):
    """Position ticks are out of range, unordered or misaligned."""

    pass


class CurrencyMismatchError(RouterError, ValueError):
    """Arithmetic between amounts of different currencies."""

    pass


class NegativeAmountError(RouterError, ValueError):
    """Currency amounts cannot be negative."""

    pass


class InvalidSlippageToleranceError(RouterError, ValueError):
    """Slippage tolerance must be non-negative."""

    pass


class UnsupportedChainError(RouterError, ValueError):
    """No wrapped native currency is known for the chain."""

    pass
