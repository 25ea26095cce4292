"""Pydantic models for Xolium API payloads and configuration."""

from xolium.models.config import (
    ApiConfig,
    ExecutionApiConfig,
    NetworkApiConfig,
    RetryPolicy,
    XoliumClientConfig,
)
from xolium.models.execution import (
    ExecutionCreditBalance,
    ExecutionExecuteRequest,
    ExecutionExecuteResponse,
    ExecutionQuoteRequest,
    ExecutionQuoteResponse,
    MevPolicy,
    PriorityRoutingPolicy,
)
from xolium.models.liquidity import LiquidityEdge, LiquidityGraph
from xolium.models.metrics import NetworkHealth, NetworkMetrics
from xolium.models.types import DigitString, MintAddress
from xolium.models.yield_ops import YieldOperationRequest, YieldOperationResult

__all__ = [
    # Types
    "DigitString",
    "MintAddress",
    # Configuration
    "ApiConfig",
    "ExecutionApiConfig",
    "NetworkApiConfig",
    "RetryPolicy",
    "XoliumClientConfig",
    # Execution
    "ExecutionCreditBalance",
    "ExecutionExecuteRequest",
    "ExecutionExecuteResponse",
    "ExecutionQuoteRequest",
    "ExecutionQuoteResponse",
    "MevPolicy",
    "PriorityRoutingPolicy",
    # Liquidity
    "LiquidityEdge",
    "LiquidityGraph",
    # Network
    "NetworkHealth",
    "NetworkMetrics",
    # Yield
    "YieldOperationRequest",
    "YieldOperationResult",
]
