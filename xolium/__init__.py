"""Xolium SDK - client for the Xolium venue aggregation service."""

from xolium.clients import ExecutionClient, NetworkClient, XoliumClient
from xolium.errors import (
    ContractMismatchError,
    ErrorCode,
    ExecutionDeniedError,
    InvalidInputError,
    NetworkUnavailableError,
    RiskLimitExceededError,
    UnauthorizedSignerError,
    XoliumError,
)
from xolium.routing import Edge, Graph, Route, RoutingPolicy, VolatilityFilter, compute_route

__version__ = "0.1.0"
__all__ = [
    "ContractMismatchError",
    "Edge",
    "ErrorCode",
    "ExecutionClient",
    "ExecutionDeniedError",
    "Graph",
    "InvalidInputError",
    "NetworkClient",
    "NetworkUnavailableError",
    "RiskLimitExceededError",
    "Route",
    "RoutingPolicy",
    "UnauthorizedSignerError",
    "VolatilityFilter",
    "XoliumClient",
    "XoliumError",
    "__version__",
    "compute_route",
]
