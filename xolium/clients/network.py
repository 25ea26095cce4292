"""Client for the network API (health, metrics, liquidity graph)."""

from __future__ import annotations

import time
from typing import Any

import httpx

from xolium.http.retry import Sleep, json_body, request_with_retry
from xolium.models.config import NetworkApiConfig, RetryPolicy
from xolium.models.liquidity import LiquidityGraph
from xolium.models.metrics import NetworkHealth, NetworkMetrics
from xolium.models.validation import parse_input, parse_response


class NetworkClient:
    """Read-only access to network state.

    Args:
        api: Network API config (dict or NetworkApiConfig)
        retry: Retry policy applied to every request
        http: httpx client bound to the API base URL
        sleep: Sleep function used between retries
    """

    def __init__(
        self,
        api: NetworkApiConfig | dict[str, Any],
        retry: RetryPolicy,
        http: httpx.Client,
        sleep: Sleep = time.sleep,
    ) -> None:
        self.api = parse_input(NetworkApiConfig, api, "Invalid network API configuration")
        self.retry = retry
        self._http = http
        self._sleep = sleep

    def _get(self, path: str, route: str) -> Any:
        response = request_with_retry(
            self._http,
            "GET",
            path,
            self.retry,
            {"service": "network", "route": route},
            sleep=self._sleep,
        )
        return json_body(response)

    def health_check(self) -> NetworkHealth:
        data = self._get(self.api.routes.health, "health")
        return parse_response(NetworkHealth, data, "Network health schema mismatch")

    def metrics(self) -> NetworkMetrics:
        data = self._get(self.api.routes.metrics, "metrics")
        return parse_response(NetworkMetrics, data, "Network metrics schema mismatch")

    def liquidity_graph(self) -> LiquidityGraph:
        """Fetch the current liquidity graph snapshot."""
        data = self._get(self.api.routes.liquidity_graph, "liquidityGraph")
        return parse_response(LiquidityGraph, data, "Liquidity graph schema mismatch")


__all__ = ["NetworkClient"]
