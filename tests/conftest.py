"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog
from fastapi.testclient import TestClient

from xolium.models.config import RetryPolicy
from tests.helpers import make_retry_payload
from tests.helpers.transports import (
    RecordingSleep,
    StubServiceState,
    build_stub_service,
    default_stub_graph,
)


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog.configure() done by the code under test (e.g. the CLI)."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def retry_policy() -> RetryPolicy:
    """Three attempts, 100ms base, retrying 500/503."""
    return RetryPolicy.model_validate(make_retry_payload())


# =============================================================================
# Stub aggregation service
# =============================================================================


@pytest.fixture
def stub_state() -> StubServiceState:
    return StubServiceState(graph=default_stub_graph())


@pytest.fixture
def stub_http(stub_state: StubServiceState) -> Iterator[TestClient]:
    """An httpx.Client (TestClient) bound to the stub service."""
    with TestClient(build_stub_service(stub_state), base_url="https://stub.example.com") as client:
        yield client
