"""Tests for the JSON-RPC connection."""

import json

import httpx
import pytest

from xolium.connection import RpcConnection, create_rpc_connection
from xolium.errors import ContractMismatchError, InvalidInputError, NetworkUnavailableError
from tests.helpers.transports import sequence_transport

RPC_URL = "https://rpc.example.com"


def rpc_result(result) -> httpx.Response:
    return httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "result": result})


class TestCreateRpcConnection:
    def test_valid(self) -> None:
        connection = create_rpc_connection(RPC_URL, "confirmed")
        assert isinstance(connection, RpcConnection)
        assert connection.rpc_endpoint == RPC_URL
        assert connection.commitment == "confirmed"
        connection.close()

    @pytest.mark.parametrize(("endpoint", "commitment"), [("", "finalized"), (RPC_URL, ""), (None, "finalized")])
    def test_invalid(self, endpoint, commitment) -> None:
        with pytest.raises(InvalidInputError):
            create_rpc_connection(endpoint, commitment)


class TestRequests:
    def test_get_slot_sends_commitment(self) -> None:
        calls: list[httpx.Request] = []
        connection = RpcConnection(RPC_URL, "processed", transport=sequence_transport([rpc_result(42)], calls))

        assert connection.get_slot() == 42
        body = json.loads(calls[0].content)
        assert body["jsonrpc"] == "2.0"
        assert body["method"] == "getSlot"
        assert body["params"] == [{"commitment": "processed"}]

    def test_request_ids_increment(self) -> None:
        calls: list[httpx.Request] = []
        connection = RpcConnection(RPC_URL, "finalized", transport=sequence_transport([rpc_result("ok")], calls))

        connection.get_health()
        connection.get_health()

        assert [json.loads(c.content)["id"] for c in calls] == [1, 2]

    def test_rpc_error_object(self) -> None:
        error = {"code": -32005, "message": "Node is behind"}
        transport = sequence_transport([httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "error": error})])
        connection = RpcConnection(RPC_URL, "finalized", transport=transport)

        with pytest.raises(NetworkUnavailableError) as exc_info:
            connection.get_health()
        assert exc_info.value.details == {"method": "getHealth", "error": error}

    def test_http_failure(self) -> None:
        connection = RpcConnection(RPC_URL, "finalized", transport=sequence_transport([httpx.Response(502)]))
        with pytest.raises(NetworkUnavailableError) as exc_info:
            connection.get_slot()
        assert exc_info.value.details["http"]["status"] == 502

    def test_not_json(self) -> None:
        transport = sequence_transport([httpx.Response(200, text="nope")])
        with pytest.raises(ContractMismatchError, match="not JSON"):
            RpcConnection(RPC_URL, "finalized", transport=transport).get_health()

    def test_missing_result(self) -> None:
        transport = sequence_transport([httpx.Response(200, json={"jsonrpc": "2.0", "id": 1})])
        with pytest.raises(ContractMismatchError, match="missing result"):
            RpcConnection(RPC_URL, "finalized", transport=transport).get_health()

    @pytest.mark.parametrize("result", ["12", 1.5, True, None])
    def test_slot_must_be_integer(self, result) -> None:
        transport = sequence_transport([rpc_result(result)])
        with pytest.raises(ContractMismatchError):
            RpcConnection(RPC_URL, "finalized", transport=transport).get_slot()
