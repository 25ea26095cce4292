"""JSON-RPC connection to the settlement chain."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from xolium.errors import ContractMismatchError, InvalidInputError, NetworkUnavailableError
from xolium.http.retry import describe_http_error

logger = structlog.get_logger()

DEFAULT_RPC_TIMEOUT_S = 30.0


class RpcConnection:
    """Minimal JSON-RPC 2.0 client bound to an endpoint and commitment level.

    Usage:
        connection = create_rpc_connection("https://rpc.example", "finalized")
        slot = connection.get_slot()
    """

    def __init__(
        self,
        rpc_endpoint: str,
        commitment: str,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.rpc_endpoint = rpc_endpoint
        self.commitment = commitment
        self._http = httpx.Client(timeout=DEFAULT_RPC_TIMEOUT_S, transport=transport)
        self._next_id = 1

    def close(self) -> None:
        self._http.close()

    def request(self, method: str, params: list[Any] | None = None) -> Any:
        """Issue one JSON-RPC call and return its result.

        Raises:
            NetworkUnavailableError: Transport/HTTP failure or an RPC error object
            ContractMismatchError: Response is not a JSON-RPC envelope
        """
        payload = {"jsonrpc": "2.0", "id": self._next_id, "method": method, "params": params or []}
        self._next_id += 1
        try:
            response = self._http.post(self.rpc_endpoint, json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as e:
            raise NetworkUnavailableError(
                "RPC request failed", {"method": method, "http": describe_http_error(e)}
            ) from e
        except ValueError as e:
            raise ContractMismatchError("RPC response is not JSON", {"method": method}) from e

        if not isinstance(body, dict):
            raise ContractMismatchError("RPC response is not an object", {"method": method})
        if "error" in body:
            logger.warning("rpc_error", method=method, error=body["error"])
            raise NetworkUnavailableError("RPC returned an error", {"method": method, "error": body["error"]})
        if "result" not in body:
            raise ContractMismatchError("RPC response missing result", {"method": method})
        return body["result"]

    def get_health(self) -> str:
        """Node health ("ok" when healthy)."""
        return self.request("getHealth")

    def get_slot(self) -> int:
        """Current slot at the configured commitment."""
        result = self.request("getSlot", [{"commitment": self.commitment}])
        if not isinstance(result, int) or isinstance(result, bool):
            raise ContractMismatchError("getSlot result is not an integer", {"result": result})
        return result


def create_rpc_connection(
    rpc_endpoint: str,
    commitment: str,
    transport: httpx.BaseTransport | None = None,
) -> RpcConnection:
    """Create an RpcConnection after basic argument checks."""
    if not isinstance(rpc_endpoint, str) or not rpc_endpoint:
        raise InvalidInputError("rpcEndpoint must be a non-empty string", {"rpc_endpoint": rpc_endpoint})
    if not isinstance(commitment, str) or not commitment:
        raise InvalidInputError("commitment must be a non-empty string", {"commitment": commitment})
    return RpcConnection(rpc_endpoint, commitment, transport=transport)


__all__ = ["RpcConnection", "create_rpc_connection"]
