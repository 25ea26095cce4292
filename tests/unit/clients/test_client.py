"""Tests for XoliumClient construction and lifecycle."""

import json

import httpx
import pytest

from xolium import XoliumClient
from xolium.clients import ExecutionClient, NetworkClient
from xolium.errors import ExecutionDeniedError, InvalidInputError
from xolium.models import XoliumClientConfig
from tests.helpers import make_client_config_payload


def service_transport(calls: list[httpx.Request]) -> httpx.MockTransport:
    """One transport answering the RPC node and both APIs by host."""

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        host = request.url.host
        if host == "rpc.example.com":
            body = json.loads(request.content)
            return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": 321})
        if host == "network.example.com" and request.url.path == "/health":
            return httpx.Response(200, json={"status": "ok", "timestampMs": 1})
        if host == "execution.example.com" and request.url.path == "/credits":
            return httpx.Response(200, json={"credits": 3, "asOfMs": 1})
        return httpx.Response(404)

    return httpx.MockTransport(handler)


class TestConstruction:
    def test_builds_sub_clients(self) -> None:
        signer = object()
        client = XoliumClient(make_client_config_payload(signer=signer))

        assert isinstance(client.config, XoliumClientConfig)
        assert isinstance(client.network, NetworkClient)
        assert isinstance(client.execution, ExecutionClient)
        assert client.signer is signer
        assert client.connection.commitment == "finalized"
        assert not client.disposed
        client.dispose()

    def test_accepts_validated_config(self) -> None:
        config = XoliumClientConfig.model_validate(make_client_config_payload())
        client = XoliumClient(config)
        assert client.config is config
        client.dispose()

    def test_invalid_config(self) -> None:
        with pytest.raises(InvalidInputError, match="Invalid XoliumClient configuration") as exc_info:
            XoliumClient(make_client_config_payload(rpcEndpoint="ftp:/nowhere"))
        assert exc_info.value.details["issues"]

    def test_missing_signer(self) -> None:
        payload = make_client_config_payload()
        payload["signer"] = None
        with pytest.raises(InvalidInputError):
            XoliumClient(payload)


class TestRequestsThroughSharedTransport:
    def test_routes_to_each_service(self) -> None:
        calls: list[httpx.Request] = []
        with XoliumClient(make_client_config_payload(), transport=service_transport(calls)) as client:
            assert client.connection.get_slot() == 321
            assert client.network.health_check().status == "ok"
            assert client.execution.credits().credits == 3

        assert [c.url.host for c in calls] == [
            "rpc.example.com",
            "network.example.com",
            "execution.example.com",
        ]

    def test_api_headers_are_sent(self) -> None:
        calls: list[httpx.Request] = []
        payload = make_client_config_payload()
        payload["apis"]["network"]["headers"] = {"x-api-key": "k-123"}

        with XoliumClient(payload, transport=service_transport(calls)) as client:
            client.network.health_check()

        assert calls[0].headers["x-api-key"] == "k-123"


class TestLifecycle:
    def test_dispose_is_idempotent(self) -> None:
        client = XoliumClient(make_client_config_payload())
        client.dispose()
        client.dispose()
        assert client.disposed

    def test_assert_not_disposed(self) -> None:
        client = XoliumClient(make_client_config_payload())
        client.assert_not_disposed()
        client.dispose()

        with pytest.raises(ExecutionDeniedError, match="Client is disposed"):
            client.assert_not_disposed()

    def test_context_manager_disposes(self) -> None:
        with XoliumClient(make_client_config_payload()) as client:
            assert not client.disposed
        assert client.disposed

    def test_cannot_reenter_after_dispose(self) -> None:
        client = XoliumClient(make_client_config_payload())
        client.dispose()
        with pytest.raises(ExecutionDeniedError):
            with client:
                pass
