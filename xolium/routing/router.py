"""Liquidity route computation entry point."""

from __future__ import annotations

import structlog

from xolium.errors import ExecutionDeniedError
from xolium.routing.filtering import eligible_edges
from xolium.routing.pathfinding import find_best_route
from xolium.routing.policy import ensure_distinct_mints, validate_routing_policy
from xolium.routing.types import Graph, Route, RoutingPolicy

logger = structlog.get_logger()


def compute_route(
    graph: Graph,
    policy: RoutingPolicy,
    from_mint: str,
    to_mint: str,
) -> Route:
    """Compute the best route from from_mint to to_mint under a policy.

    The result is a pure function of the four inputs. Mint identifiers are
    assumed to be well-formed; only their distinctness is checked here.

    Raises:
        InvalidInputError: Malformed policy, or from_mint == to_mint.
            Raised before the graph is looked at.
        ExecutionDeniedError: No simple path within policy.max_hops
    """
    validate_routing_policy(policy)
    ensure_distinct_mints(from_mint, to_mint)

    edges = eligible_edges(graph, policy)
    route = find_best_route(edges, from_mint, to_mint, policy.max_hops)
    if route is None:
        logger.info(
            "no_route_found",
            from_mint=from_mint,
            to_mint=to_mint,
            max_hops=policy.max_hops,
            eligible_edges=len(edges),
            total_edges=len(graph.edges),
        )
        raise ExecutionDeniedError(
            "Liquidity safety rejection: no valid route",
            {"from_mint": from_mint, "to_mint": to_mint, "max_hops": policy.max_hops},
        )

    logger.info(
        "route_selected",
        from_mint=from_mint,
        to_mint=to_mint,
        hops=route.hops,
        score=route.score,
        venues=[edge.venue for edge in route.path],
    )
    return route


__all__ = ["compute_route"]
