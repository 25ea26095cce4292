"""Top-level SDK client."""

from __future__ import annotations

import time
from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx
import structlog

from xolium.clients.execution import ExecutionClient
from xolium.clients.network import NetworkClient
from xolium.connection import RpcConnection, create_rpc_connection
from xolium.errors import ExecutionDeniedError
from xolium.http.retry import Sleep, create_http_client
from xolium.models.config import XoliumClientConfig
from xolium.models.validation import parse_input

logger = structlog.get_logger()


class XoliumClient:
    """Entry point bundling the RPC connection and the API clients.

    The whole configuration is validated up front; an invalid config raises
    InvalidInputError before any connection is created.

    Usage:
        with XoliumClient(config) as client:
            graph = client.network.liquidity_graph()
            route = client.execution.compute_liquidity_route(graph, policy, a, b)

    Args:
        config: XoliumClientConfig or its camelCase dict form
        transport: Optional httpx transport shared by all HTTP clients
            (e.g. httpx.MockTransport in tests)
        sleep: Sleep function used between retries
    """

    def __init__(
        self,
        config: XoliumClientConfig | Mapping[str, Any],
        *,
        transport: httpx.BaseTransport | None = None,
        sleep: Sleep = time.sleep,
    ) -> None:
        self.config = parse_input(XoliumClientConfig, config, "Invalid XoliumClient configuration")
        self.signer = self.config.signer
        self.connection: RpcConnection = create_rpc_connection(
            str(self.config.rpc_endpoint), self.config.commitment, transport=transport
        )

        apis = self.config.apis
        self._http_clients = [
            create_http_client(apis.network, transport=transport),
            create_http_client(apis.execution, transport=transport),
        ]
        self.network = NetworkClient(
            api=apis.network,
            retry=self.config.retry,
            http=self._http_clients[0],
            sleep=sleep,
        )
        self.execution = ExecutionClient(
            api=apis.execution,
            retry=self.config.retry,
            http=self._http_clients[1],
            sleep=sleep,
        )
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Release HTTP resources. Idempotent."""
        if self._disposed:
            return
        self._disposed = True
        for http in self._http_clients:
            http.close()
        self.connection.close()
        logger.debug("client_disposed")

    def assert_not_disposed(self) -> None:
        if self._disposed:
            raise ExecutionDeniedError("Client is disposed")

    def __enter__(self) -> XoliumClient:
        self.assert_not_disposed()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()


__all__ = ["XoliumClient"]
