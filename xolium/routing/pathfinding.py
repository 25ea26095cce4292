"""Deterministic route search over a liquidity graph.

This module enumerates simple paths from a source mint to a destination
mint with a breadth-first search over canonically ordered edges, then
picks the best one by score. Determinism comes from two places:

- Edges arrive sorted by their from|to|venue key (see filtering.py), so
  expansion order never depends on the producer's edge order.
- Score ties are broken by the path's joined edge keys, so the winner is
  a pure function of the candidate set.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

import structlog

from xolium.routing.scoring import score_route
from xolium.routing.types import Edge, Route

logger = structlog.get_logger()

# (current mint, edges taken so far)
SearchState = tuple[str, tuple[Edge, ...]]


def _outgoing_index(edges: Sequence[Edge]) -> dict[str, list[Edge]]:
    """Group edges by from_mint, keeping their relative (canonical) order."""
    index: dict[str, list[Edge]] = {}
    for edge in edges:
        index.setdefault(edge.from_mint, []).append(edge)
    return index


def _state_key(mint: str, path: tuple[Edge, ...]) -> tuple[str, tuple[str, ...]]:
    return mint, tuple(edge.state_label for edge in path)


def enumerate_candidate_routes(
    edges: Sequence[Edge],
    from_mint: str,
    to_mint: str,
    max_hops: int,
) -> list[Route]:
    """Collect every simple path from from_mint that first reaches to_mint.

    Uses BFS in level order over hop count. A path stops as soon as it
    arrives at to_mint; the destination is never used as a pass-through.
    No mint may appear twice on a path, the source included.

    Args:
        edges: Eligible edges in canonical order
        from_mint: Source mint
        to_mint: Destination mint
        max_hops: Maximum path length (already validated)

    Returns:
        Candidate routes in discovery order. Empty if none.
    """
    outgoing = _outgoing_index(edges)
    queue: deque[SearchState] = deque([(from_mint, ())])
    seen: set[tuple[str, tuple[str, ...]]] = set()
    candidates: list[Route] = []
    explored = 0

    while queue:
        mint, path = queue.popleft()
        hops = len(path)
        if hops > max_hops:
            continue

        key = _state_key(mint, path)
        if key in seen:
            continue
        seen.add(key)
        explored += 1

        if mint == to_mint and path:
            candidates.append(Route(path=path, score=score_route(path)))
            continue

        if hops == max_hops:
            continue

        visited = {from_mint, *(edge.to_mint for edge in path)}
        for edge in outgoing.get(mint, ()):
            # Cycle prevention: never revisit a mint already on the path
            if edge.to_mint in visited:
                continue
            queue.append((edge.to_mint, path + (edge,)))

    logger.debug(
        "route_search_complete",
        from_mint=from_mint,
        to_mint=to_mint,
        max_hops=max_hops,
        explored_states=explored,
        candidate_count=len(candidates),
    )
    return candidates


def select_best_route(candidates: Sequence[Route]) -> Route | None:
    """Pick the highest-scoring route, ties going to the smallest path key."""
    if not candidates:
        return None
    ranked = sorted(candidates, key=lambda route: (-route.score, route.path_key))
    return ranked[0]


def find_best_route(
    edges: Sequence[Edge],
    from_mint: str,
    to_mint: str,
    max_hops: int,
) -> Route | None:
    """Find the best simple route within max_hops.

    Args:
        edges: Eligible edges in canonical order
        from_mint: Source mint
        to_mint: Destination mint
        max_hops: Maximum number of edges on the route

    Returns:
        The winning Route, or None if no path connects the mints
    """
    candidates = enumerate_candidate_routes(edges, from_mint, to_mint, max_hops)
    return select_best_route(candidates)


__all__ = ["enumerate_candidate_routes", "find_best_route", "select_best_route"]
