"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Mint addresses and venue names
- factories: Edge, graph, policy and config factory functions
"""

from tests.helpers.constants import (
    ORCA,
    RAYDIUM,
    SOL,
    SYSTEM_PROGRAM,
    USDC,
    USDT,
)
from tests.helpers.factories import (
    make_client_config_payload,
    make_edge,
    make_edge_payload,
    make_execution_api_payload,
    make_graph,
    make_graph_payload,
    make_network_api_payload,
    make_policy,
    make_retry_payload,
)

__all__ = [
    # Constants
    "SOL",
    "USDC",
    "USDT",
    "SYSTEM_PROGRAM",
    "ORCA",
    "RAYDIUM",
    # Factories
    "make_client_config_payload",
    "make_edge",
    "make_edge_payload",
    "make_execution_api_payload",
    "make_graph",
    "make_graph_payload",
    "make_network_api_payload",
    "make_policy",
    "make_retry_payload",
]
