"""Pydantic models for liquidity graph payloads.

These validate the graph snapshot served by the network API. Use
LiquidityGraph.to_graph() to hand a validated snapshot to the router.
"""

from pydantic import BaseModel, Field, StrictInt

from xolium.constants import MAX_EDGE_VOLATILITY_BPS
from xolium.models.types import MintAddress, NonEmptyStr, Number, TimestampMs
from xolium.routing.types import Edge, Graph


class LiquidityEdge(BaseModel):
    """A directed edge between two mints at a venue."""

    from_mint: MintAddress = Field(alias="fromMint")
    to_mint: MintAddress = Field(alias="toMint")
    venue: NonEmptyStr
    liquidity_usd: Number = Field(alias="liquidityUsd", ge=0, allow_inf_nan=False)
    volatility_bps: StrictInt = Field(alias="volatilityBps", ge=0, le=MAX_EDGE_VOLATILITY_BPS)

    model_config = {"populate_by_name": True, "extra": "forbid", "frozen": True}

    def to_edge(self) -> Edge:
        return Edge(
            from_mint=self.from_mint,
            to_mint=self.to_mint,
            venue=self.venue,
            liquidity_usd=self.liquidity_usd,
            volatility_bps=self.volatility_bps,
        )


class LiquidityGraph(BaseModel):
    """A timestamped liquidity graph snapshot."""

    as_of_ms: TimestampMs = Field(alias="asOfMs")
    edges: list[LiquidityEdge]

    model_config = {"populate_by_name": True, "extra": "forbid"}

    def to_graph(self) -> Graph:
        """Convert to the routing value object."""
        return Graph(as_of_ms=self.as_of_ms, edges=tuple(e.to_edge() for e in self.edges))


__all__ = ["LiquidityEdge", "LiquidityGraph"]
