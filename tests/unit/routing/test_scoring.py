"""Tests for route scoring."""

from xolium.routing.scoring import score_route
from tests.helpers import make_edge


def test_single_edge() -> None:
    assert score_route([make_edge("A", "B", liquidity_usd=1000, volatility_bps=10)]) == 990


def test_liquidity_sum_is_floored_before_subtraction() -> None:
    path = [
        make_edge("A", "B", liquidity_usd=100.6, volatility_bps=1),
        make_edge("B", "C", liquidity_usd=100.6, volatility_bps=2),
    ]
    # floor(201.2) - 3
    assert score_route(path) == 198


def test_score_can_be_negative() -> None:
    assert score_route([make_edge("A", "B", liquidity_usd=5, volatility_bps=50)]) == -45


def test_no_hop_normalization() -> None:
    one = [make_edge("A", "B", liquidity_usd=100, volatility_bps=0)]
    two = one + [make_edge("B", "C", liquidity_usd=100, volatility_bps=0)]
    assert score_route(two) == 2 * score_route(one)


def test_returns_int() -> None:
    assert isinstance(score_route([make_edge("A", "B", liquidity_usd=10.5)]), int)
