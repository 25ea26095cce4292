"""Candidate edge filtering and canonical ordering."""

from __future__ import annotations

from xolium.routing.types import Edge, Graph, RoutingPolicy


def is_eligible(edge: Edge, policy: RoutingPolicy) -> bool:
    """Check an edge against all four policy filters."""
    return (
        edge.venue in policy.allow_venues
        and edge.liquidity_usd >= policy.min_liquidity_usd
        and edge.volatility_bps <= policy.volatility_filter.max_bps
    )


def eligible_edges(graph: Graph, policy: RoutingPolicy) -> tuple[Edge, ...]:
    """Return the policy-eligible edges in canonical order.

    Edges are sorted by their from|to|venue key using plain string
    comparison, so the result does not depend on the order the graph
    producer emitted them in. The graph itself is left untouched.
    """
    candidates = [edge for edge in graph.edges if is_eligible(edge, policy)]
    return tuple(sorted(candidates, key=lambda edge: edge.sort_key))


__all__ = ["eligible_edges", "is_eligible"]
