"""Structural validation of routing policies.

Runs before any filtering or search so that a malformed policy is reported
as InvalidInputError rather than silently producing an empty route set.
"""

from __future__ import annotations

import math
from numbers import Integral, Real

from xolium.constants import MAX_ROUTE_HOPS, MIN_ROUTE_HOPS
from xolium.errors import InvalidInputError
from xolium.routing.types import RoutingPolicy


def _is_integer(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _is_finite_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def validate_routing_policy(policy: RoutingPolicy) -> None:
    """Validate a routing policy.

    Args:
        policy: The policy to check

    Raises:
        InvalidInputError: On the first violated constraint, with the
            offending field in details
    """
    if not _is_finite_number(policy.min_liquidity_usd) or policy.min_liquidity_usd < 0:
        raise InvalidInputError(
            "minLiquidityUsd must be a non-negative number",
            {"min_liquidity_usd": policy.min_liquidity_usd},
        )

    max_bps = getattr(policy.volatility_filter, "max_bps", None)
    if not _is_integer(max_bps) or max_bps < 0:
        raise InvalidInputError(
            "volatilityFilter.maxBps must be a non-negative integer",
            {"max_bps": max_bps},
        )

    if not _is_integer(policy.max_hops) or not (
        MIN_ROUTE_HOPS <= policy.max_hops <= MAX_ROUTE_HOPS
    ):
        raise InvalidInputError(
            f"maxHops must be an integer in [{MIN_ROUTE_HOPS},{MAX_ROUTE_HOPS}]",
            {"max_hops": policy.max_hops},
        )

    if isinstance(policy.allow_venues, str):
        raise InvalidInputError(
            "allowVenues must be a collection of venue ids", {"allow_venues": policy.allow_venues}
        )
    venues = list(policy.allow_venues)
    if not venues:
        raise InvalidInputError("allowVenues must be non-empty", {"allow_venues": venues})
    for venue in venues:
        if not isinstance(venue, str) or not venue:
            raise InvalidInputError("allowVenues contains invalid entry", {"venue": venue})


def ensure_distinct_mints(from_mint: str, to_mint: str) -> None:
    """Reject a zero-length route request."""
    if from_mint == to_mint:
        raise InvalidInputError(
            "fromMint and toMint must be different",
            {"from_mint": from_mint, "to_mint": to_mint},
        )


__all__ = ["ensure_distinct_mints", "validate_routing_policy"]
