"""Client for the execution API, plus local liquidity route computation."""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from xolium.errors import InvalidInputError, RiskLimitExceededError
from xolium.http.retry import Sleep, json_body, request_with_retry
from xolium.models.config import ExecutionApiConfig, RetryPolicy
from xolium.models.execution import (
    ExecutionCreditBalance,
    ExecutionExecuteRequest,
    ExecutionExecuteResponse,
    ExecutionQuoteRequest,
    ExecutionQuoteResponse,
)
from xolium.models.liquidity import LiquidityGraph
from xolium.models.validation import parse_input, parse_response
from xolium.models.yield_ops import YieldOperationRequest, YieldOperationResult
from xolium.routing.policy import ensure_distinct_mints, validate_routing_policy
from xolium.routing.router import compute_route
from xolium.routing.types import Graph, Route, RoutingPolicy

logger = structlog.get_logger()


class ExecutionClient:
    """Quotes, execution, credits and yield operations.

    Args:
        api: Execution API config (dict or ExecutionApiConfig)
        retry: Retry policy applied to every request
        http: httpx client bound to the API base URL
        sleep: Sleep function used between retries
    """

    def __init__(
        self,
        api: ExecutionApiConfig | dict[str, Any],
        retry: RetryPolicy,
        http: httpx.Client,
        sleep: Sleep = time.sleep,
    ) -> None:
        self.api = parse_input(ExecutionApiConfig, api, "Invalid execution API configuration")
        self.retry = retry
        self._http = http
        self._sleep = sleep

    def _send(self, method: str, path: str, route: str, body: Any = None) -> Any:
        response = request_with_retry(
            self._http,
            method,
            path,
            self.retry,
            {"service": "execution", "route": route},
            json=body,
            sleep=self._sleep,
        )
        return json_body(response)

    def credits(self) -> ExecutionCreditBalance:
        data = self._send("GET", self.api.routes.credits, "credits")
        return parse_response(ExecutionCreditBalance, data, "Execution credits schema mismatch")

    def compute_liquidity_route(
        self,
        graph: Graph | LiquidityGraph | Mapping[str, Any],
        policy: RoutingPolicy | Mapping[str, Any],
        from_mint: str,
        to_mint: str,
    ) -> Route:
        """Compute the best route through a liquidity graph. No I/O.

        Args:
            graph: A Graph, a validated LiquidityGraph, or a raw graph payload
            policy: A RoutingPolicy or its camelCase dict form
            from_mint: Source mint
            to_mint: Destination mint

        Raises:
            InvalidInputError: Malformed policy or graph, or identical mints
            ExecutionDeniedError: No route satisfies the policy
        """
        if isinstance(policy, Mapping):
            policy = RoutingPolicy.from_dict(policy)
        elif not isinstance(policy, RoutingPolicy):
            raise InvalidInputError(
                "policy must be a RoutingPolicy or mapping", {"type": type(policy).__name__}
            )
        validate_routing_policy(policy)
        ensure_distinct_mints(from_mint, to_mint)

        if not isinstance(graph, Graph):
            graph = parse_input(LiquidityGraph, graph, "Invalid liquidity graph").to_graph()

        return compute_route(graph, policy, from_mint, to_mint)

    def quote(self, request: ExecutionQuoteRequest | Mapping[str, Any]) -> ExecutionQuoteResponse:
        parsed = parse_input(ExecutionQuoteRequest, request, "Invalid quote request")
        data = self._send("POST", self.api.routes.quote, "quote", _body(parsed))
        return parse_response(ExecutionQuoteResponse, data, "Execution quote schema mismatch")

    def execute(
        self, request: ExecutionExecuteRequest | Mapping[str, Any]
    ) -> ExecutionExecuteResponse:
        parsed = parse_input(ExecutionExecuteRequest, request, "Invalid execute request")
        logger.info("execute_requested", route_id=parsed.route_id)
        data = self._send("POST", self.api.routes.execute, "execute", _body(parsed))
        return parse_response(ExecutionExecuteResponse, data, "Execution execute schema mismatch")

    def request_yield_operation(
        self, request: YieldOperationRequest | Mapping[str, Any]
    ) -> YieldOperationResult:
        """Submit a yield operation after checking it against its exposure cap.

        Raises:
            RiskLimitExceededError: notionalUsd exceeds exposureCapUsd
        """
        parsed = parse_input(YieldOperationRequest, request, "Invalid yield operation request")
        if parsed.notional_usd > parsed.exposure_cap_usd:
            raise RiskLimitExceededError(
                "notionalUsd exceeds exposureCapUsd",
                {
                    "notional_usd": parsed.notional_usd,
                    "exposure_cap_usd": parsed.exposure_cap_usd,
                },
            )
        data = self._send("POST", self.api.routes.yield_, "yield", _body(parsed))
        return parse_response(YieldOperationResult, data, "Yield operation schema mismatch")


def _body(model: Any) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True)


__all__ = ["ExecutionClient"]
