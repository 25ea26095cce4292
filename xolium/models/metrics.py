"""Pydantic models for network API payloads."""

from typing import Literal

from pydantic import BaseModel, Field, StrictInt

from xolium.models.types import TimestampMs


class NetworkHealth(BaseModel):
    status: Literal["ok"]
    timestamp_ms: TimestampMs = Field(alias="timestampMs")

    model_config = {"populate_by_name": True, "extra": "forbid"}


class NetworkMetrics(BaseModel):
    """Network metrics. slot and latency are optional."""

    timestamp_ms: TimestampMs = Field(alias="timestampMs")
    slot: StrictInt | None = Field(default=None, ge=0)
    latency_ms: StrictInt | None = Field(default=None, alias="latencyMs", ge=0)

    model_config = {"populate_by_name": True, "extra": "forbid"}


__all__ = ["NetworkHealth", "NetworkMetrics"]
