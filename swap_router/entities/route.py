"""Routes: an ordered path of pools between two currencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction

from swap_router.entities.currency import Currency, Token
from swap_router.entities.pools import AnyPool, Protocol
from swap_router.errors import InvalidRouteError


@dataclass(frozen=True)
class Route:
    """An ordered sequence of pools from input to output currency.

    The protocol tag is decided once at construction from the pools (all
    V2 pairs -> V2, all V3 pools -> V3, otherwise MIXED) unless the route
    builder supplies one explicitly. Native currencies travel the pools
    in their wrapped form.

    Attributes:
        pools: Pools traversed in order
        input: Currency entering the first pool
        output: Currency leaving the last pool
        protocol: Protocol tag (a Protocol value, or a raw tag string
            supplied by an external route builder)
        path: Wrapped tokens visited, len(pools) + 1 entries
    """

    pools: tuple[AnyPool, ...]
    input: Currency
    output: Currency
    protocol: Protocol | str | None = None
    path: tuple[Token, ...] = field(init=False)

    def __post_init__(self) -> None:
        pools = tuple(self.pools)
        object.__setattr__(self, "pools", pools)
        if not pools:
            raise InvalidRouteError("Route requires at least one pool")

        chain_id = pools[0].chain_id
        if any(pool.chain_id != chain_id for pool in pools):
            raise InvalidRouteError("Route pools are on different chains")

        wrapped_input = self.input.wrapped
        if not pools[0].involves_token(wrapped_input):
            raise InvalidRouteError(f"Input {self.input} not in first pool")

        path = [wrapped_input]
        for i, pool in enumerate(pools):
            current = path[-1]
            if not pool.involves_token(current):
                raise InvalidRouteError(f"Pool {i} does not contain {current}")
            path.append(pool.other_token(current))

        if not path[-1].equals(self.output.wrapped):
            raise InvalidRouteError(f"Route does not end in {self.output}")

        object.__setattr__(self, "path", tuple(path))

        if self.protocol is None:
            protocols = {pool.protocol for pool in pools}
            tag = protocols.pop() if len(protocols) == 1 else Protocol.MIXED
            object.__setattr__(self, "protocol", tag)

    @property
    def chain_id(self) -> int:
        return self.pools[0].chain_id

    @property
    def mid_price(self) -> Fraction:
        """Output per unit of input (raw amounts) at the pools' mid prices."""
        price = Fraction(1)
        for token, pool in zip(self.path, self.pools, strict=False):
            price *= pool.price_of(token)
        return price

    @property
    def hop_count(self) -> int:
        return len(self.pools)
