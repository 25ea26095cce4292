"""Route scoring."""

from __future__ import annotations

import math
from collections.abc import Sequence

from xolium.routing.types import Edge


def score_route(path: Sequence[Edge]) -> int:
    """Score a path: floor(total liquidity) minus total volatility.

    Higher is better. Units are not normalized (USD vs bps) and longer
    paths are not penalized beyond the volatility their edges add.
    """
    liquidity = sum(edge.liquidity_usd for edge in path)
    volatility = sum(edge.volatility_bps for edge in path)
    return math.floor(liquidity) - volatility


__all__ = ["score_route"]
