"""Liquidity routing.

This package computes deterministic best-execution routes through a
multi-venue liquidity graph. It performs no I/O.

Module structure:
- types.py: Edge, Graph, RoutingPolicy and Route value objects
- policy.py: Structural policy validation
- filtering.py: Policy filters and canonical edge ordering
- pathfinding.py: BFS route enumeration and best-route selection
- scoring.py: Route score
- router.py: compute_route entry point
"""

from xolium.routing.filtering import eligible_edges
from xolium.routing.pathfinding import find_best_route
from xolium.routing.policy import validate_routing_policy
from xolium.routing.router import compute_route
from xolium.routing.scoring import score_route
from xolium.routing.types import Edge, Graph, Route, RoutingPolicy, VolatilityFilter

__all__ = [
    "Edge",
    "Graph",
    "Route",
    "RoutingPolicy",
    "VolatilityFilter",
    "compute_route",
    "eligible_edges",
    "find_best_route",
    "score_route",
    "validate_routing_policy",
]
