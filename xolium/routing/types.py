"""Type definitions for routing module.

These are the in-memory value objects the route search works on. Wire
payloads are validated by the pydantic models in xolium.models.liquidity
and converted into these before routing.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

# Separator for canonical edge keys; not valid in base58 or venue ids
EDGE_KEY_SEPARATOR = "|"
# Separator between edges in a path key
PATH_KEY_SEPARATOR = "~"


@dataclass(frozen=True)
class Edge:
    """A directed, venue-specific tradeable link between two assets."""

    from_mint: str
    to_mint: str
    venue: str
    liquidity_usd: float
    volatility_bps: int

    @property
    def sort_key(self) -> str:
        """Canonical ordering key: from|to|venue."""
        return EDGE_KEY_SEPARATOR.join((self.from_mint, self.to_mint, self.venue))

    @property
    def state_label(self) -> str:
        """Label used when keying search states: from>to@venue."""
        return f"{self.from_mint}>{self.to_mint}@{self.venue}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "fromMint": self.from_mint,
            "toMint": self.to_mint,
            "venue": self.venue,
            "liquidityUsd": self.liquidity_usd,
            "volatilityBps": self.volatility_bps,
        }


@dataclass(frozen=True)
class Graph:
    """Timestamped snapshot of known edges. Edge order carries no meaning."""

    as_of_ms: int
    edges: tuple[Edge, ...] = ()

    def __post_init__(self) -> None:
        # Own the collection; callers may pass a list
        object.__setattr__(self, "edges", tuple(self.edges))


@dataclass(frozen=True)
class VolatilityFilter:
    """Upper bound on per-edge volatility."""

    max_bps: int


@dataclass(frozen=True)
class RoutingPolicy:
    """Filters and hop bound constraining eligible routes.

    Structural validity is checked by validate_routing_policy, not here,
    so that malformed policies surface as InvalidInputError at the call
    boundary instead of at construction.
    """

    min_liquidity_usd: float
    volatility_filter: VolatilityFilter
    max_hops: int
    allow_venues: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        # A bare string is left as-is for validate_routing_policy to reject
        if not isinstance(self.allow_venues, tuple | str):
            object.__setattr__(self, "allow_venues", tuple(self.allow_venues))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RoutingPolicy:
        """Build a policy from its camelCase wire shape.

        Missing keys become None and are rejected by policy validation.
        """
        volatility = data.get("volatilityFilter") or {}
        venues = data.get("allowVenues")
        return cls(
            min_liquidity_usd=data.get("minLiquidityUsd"),  # type: ignore[arg-type]
            volatility_filter=VolatilityFilter(
                max_bps=volatility.get("maxBps") if isinstance(volatility, Mapping) else None  # type: ignore[arg-type]
            ),
            max_hops=data.get("maxHops"),  # type: ignore[arg-type]
            allow_venues=venues if isinstance(venues, str | Iterable) else (),
        )


@dataclass(frozen=True)
class Route:
    """A completed path plus its score."""

    path: tuple[Edge, ...]
    score: int

    @property
    def hops(self) -> int:
        return len(self.path)

    @property
    def path_key(self) -> str:
        """Tie-break key: edge sort keys joined in path order."""
        return PATH_KEY_SEPARATOR.join(edge.sort_key for edge in self.path)

    def to_dict(self) -> dict[str, Any]:
        return {"path": [edge.to_dict() for edge in self.path], "score": self.score}


__all__ = [
    "EDGE_KEY_SEPARATOR",
    "PATH_KEY_SEPARATOR",
    "Edge",
    "Graph",
    "Route",
    "RoutingPolicy",
    "VolatilityFilter",
]
