"""Compute a liquidity route from JSON files.

Usage:
    xolium-route --graph graph.json --policy policy.json --from <mint> --to <mint>

The graph file holds a liquidity graph payload ({"asOfMs", "edges"}); the
policy file holds a routing policy ({"minLiquidityUsd", "volatilityFilter",
"maxHops", "allowVenues"}). The route is printed as JSON on stdout. On a
routing error the error JSON goes to stderr and the exit code is 1.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import structlog

from xolium.errors import InvalidInputError, XoliumError
from xolium.models.liquidity import LiquidityGraph
from xolium.models.validation import parse_input
from xolium.routing.policy import ensure_distinct_mints, validate_routing_policy
from xolium.routing.router import compute_route
from xolium.routing.types import RoutingPolicy


def _load_json(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise InvalidInputError(f"Cannot read JSON from {path}", {"error": str(e)}) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute a deterministic liquidity route")
    parser.add_argument("--graph", type=Path, required=True, help="Liquidity graph JSON file")
    parser.add_argument("--policy", type=Path, required=True, help="Routing policy JSON file")
    parser.add_argument("--from", dest="from_mint", required=True, help="Source mint")
    parser.add_argument("--to", dest="to_mint", required=True, help="Destination mint")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        wrapper_class=structlog.make_filtering_bound_logger(10 if args.verbose else 30),
    )

    try:
        policy_data = _load_json(args.policy)
        if not isinstance(policy_data, dict):
            raise InvalidInputError("Routing policy must be a JSON object", {"path": str(args.policy)})
        policy = RoutingPolicy.from_dict(policy_data)
        # Policy and mint errors take precedence over graph errors
        validate_routing_policy(policy)
        ensure_distinct_mints(args.from_mint, args.to_mint)
        graph_data = _load_json(args.graph)
        graph = parse_input(LiquidityGraph, graph_data, "Invalid liquidity graph").to_graph()
        route = compute_route(graph, policy, args.from_mint, args.to_mint)
    except XoliumError as e:
        print(json.dumps(e.to_dict(), indent=2), file=sys.stderr)
        return 1

    print(json.dumps(route.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
