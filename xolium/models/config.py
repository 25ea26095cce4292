"""Pydantic models for SDK configuration.

All configuration models forbid unknown keys so that typos in a config
file fail loudly instead of being ignored.
"""

from typing import Any, Literal

from pydantic import AnyHttpUrl, BaseModel, Field, StrictInt, field_validator, model_validator

from xolium.constants import (
    MAX_API_TIMEOUT_MS,
    MAX_BASE_DELAY_MS,
    MAX_RETRY_ATTEMPTS,
    MAX_RETRY_DELAY_MS,
)
from xolium.models.types import NonEmptyStr

Commitment = Literal["processed", "confirmed", "finalized"]


class RetryPolicy(BaseModel):
    """Bounded exponential back-off for HTTP requests."""

    max_attempts: StrictInt = Field(alias="maxAttempts", ge=1, le=MAX_RETRY_ATTEMPTS)
    base_delay_ms: StrictInt = Field(alias="baseDelayMs", ge=1, le=MAX_BASE_DELAY_MS)
    max_delay_ms: StrictInt = Field(alias="maxDelayMs", ge=1, le=MAX_RETRY_DELAY_MS)
    retryable_http_status_codes: list[StrictInt] = Field(
        alias="retryableHttpStatusCodes",
        min_length=1,
        description="HTTP statuses worth retrying. Transport errors always retry.",
    )

    model_config = {"populate_by_name": True, "extra": "forbid", "frozen": True}

    @field_validator("retryable_http_status_codes")
    @classmethod
    def _check_status_codes(cls, codes: list[int]) -> list[int]:
        for code in codes:
            if not 100 <= code <= 599:
                raise ValueError(f"HTTP status code out of range: {code}")
        return codes

    @model_validator(mode="after")
    def _check_delay_bounds(self) -> "RetryPolicy":
        if self.max_delay_ms < self.base_delay_ms:
            raise ValueError("maxDelayMs must be >= baseDelayMs")
        return self


class ApiConfig(BaseModel):
    """Connection settings for one remote API."""

    base_url: AnyHttpUrl = Field(alias="baseUrl")
    timeout_ms: StrictInt = Field(alias="timeoutMs", ge=1, le=MAX_API_TIMEOUT_MS)
    headers: dict[str, str]
    routes: dict[str, NonEmptyStr]

    model_config = {"populate_by_name": True, "extra": "forbid"}


class NetworkRoutes(BaseModel):
    health: NonEmptyStr
    metrics: NonEmptyStr
    liquidity_graph: NonEmptyStr = Field(alias="liquidityGraph")

    model_config = {"populate_by_name": True, "extra": "forbid"}


class ExecutionRoutes(BaseModel):
    credits: NonEmptyStr
    quote: NonEmptyStr
    execute: NonEmptyStr
    yield_: NonEmptyStr = Field(alias="yield")

    model_config = {"populate_by_name": True, "extra": "forbid"}


class NetworkApiConfig(ApiConfig):
    routes: NetworkRoutes  # type: ignore[assignment]


class ExecutionApiConfig(ApiConfig):
    routes: ExecutionRoutes  # type: ignore[assignment]


class ApisConfig(BaseModel):
    network: NetworkApiConfig
    execution: ExecutionApiConfig

    model_config = {"populate_by_name": True, "extra": "forbid"}


class XoliumClientConfig(BaseModel):
    """Top-level client configuration."""

    rpc_endpoint: AnyHttpUrl = Field(alias="rpcEndpoint")
    commitment: Commitment
    signer: Any = Field(description="Signing keypair or wallet adapter")
    retry: RetryPolicy
    apis: ApisConfig

    model_config = {"populate_by_name": True, "extra": "forbid"}

    @field_validator("signer")
    @classmethod
    def _check_signer(cls, value: Any) -> Any:
        if value is None or isinstance(value, str | bytes | int | float | bool):
            raise ValueError("signer must be an object")
        return value


__all__ = [
    "ApiConfig",
    "ApisConfig",
    "Commitment",
    "ExecutionApiConfig",
    "ExecutionRoutes",
    "NetworkApiConfig",
    "NetworkRoutes",
    "RetryPolicy",
    "XoliumClientConfig",
]
