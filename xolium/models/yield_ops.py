"""Pydantic models for yield operations."""

from pydantic import BaseModel, Field

from xolium.models.types import Bps, ExplicitOptIn, NonEmptyStr, Number, TimestampMs


class YieldOperationRequest(BaseModel):
    """Request to enter a yield strategy.

    notional_usd must not exceed exposure_cap_usd; the client enforces this
    before sending.
    """

    strategy_id: NonEmptyStr = Field(alias="strategyId")
    notional_usd: Number = Field(alias="notionalUsd", gt=0, allow_inf_nan=False)
    risk_ceiling_bps: Bps = Field(alias="riskCeilingBps")
    exposure_cap_usd: Number = Field(alias="exposureCapUsd", gt=0, allow_inf_nan=False)
    explicit_opt_in: ExplicitOptIn = Field(alias="explicitOptIn")

    model_config = {"populate_by_name": True, "extra": "forbid"}


class YieldOperationResult(BaseModel):
    operation_id: NonEmptyStr = Field(alias="operationId")
    accepted_at_ms: TimestampMs = Field(alias="acceptedAtMs")

    model_config = {"populate_by_name": True, "extra": "forbid"}


__all__ = ["YieldOperationRequest", "YieldOperationResult"]
