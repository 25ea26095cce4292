"""Pydantic models for execution API requests and responses."""

from pydantic import BaseModel, Field, StrictBool, StrictInt

from xolium.models.types import (
    Bps,
    DigitString,
    ExplicitOptIn,
    MintAddress,
    NonEmptyStr,
    TimestampMs,
)


class PriorityRoutingPolicy(BaseModel):
    """Priority fee settings for transaction landing."""

    enabled: StrictBool
    max_compute_unit_price_micro_lamports: StrictInt = Field(
        alias="maxComputeUnitPriceMicroLamports", ge=0, le=10_000_000
    )

    model_config = {"populate_by_name": True, "extra": "forbid"}


class MevPolicy(BaseModel):
    """MEV protection preferences."""

    mev_aware: StrictBool = Field(alias="mevAware")
    allow_backrun: StrictBool = Field(alias="allowBackrun")

    model_config = {"populate_by_name": True, "extra": "forbid"}


class ExecutionCreditBalance(BaseModel):
    """Remaining execution credits."""

    credits: StrictInt = Field(ge=0)
    as_of_ms: TimestampMs = Field(alias="asOfMs")

    model_config = {"populate_by_name": True, "extra": "forbid"}


class ExecutionQuoteRequest(BaseModel):
    """Request for a swap quote."""

    from_mint: MintAddress = Field(alias="fromMint")
    to_mint: MintAddress = Field(alias="toMint")
    amount_in: DigitString = Field(alias="amountIn")
    slippage_bps: Bps = Field(alias="slippageBps")
    priority: PriorityRoutingPolicy
    mev: MevPolicy

    model_config = {"populate_by_name": True, "extra": "forbid"}


class ExecutionQuoteResponse(BaseModel):
    """Quote returned by the execution API."""

    route_id: NonEmptyStr = Field(alias="routeId")
    expected_amount_out: DigitString = Field(alias="expectedAmountOut")
    min_amount_out: DigitString = Field(alias="minAmountOut")
    price_impact_bps: Bps = Field(alias="priceImpactBps")
    expires_at_ms: TimestampMs = Field(alias="expiresAtMs")

    model_config = {"populate_by_name": True, "extra": "forbid"}


class ExecutionExecuteRequest(BaseModel):
    """Request to execute a previously quoted route.

    explicit_opt_in must be True; execution is never implied.
    """

    route_id: NonEmptyStr = Field(alias="routeId")
    signer_pubkey: MintAddress = Field(alias="signerPubkey")
    priority: PriorityRoutingPolicy
    mev: MevPolicy
    explicit_opt_in: ExplicitOptIn = Field(alias="explicitOptIn")

    model_config = {"populate_by_name": True, "extra": "forbid"}


class ExecutionExecuteResponse(BaseModel):
    """Submitted transaction."""

    signature: NonEmptyStr
    submitted_at_ms: TimestampMs = Field(alias="submittedAtMs")

    model_config = {"populate_by_name": True, "extra": "forbid"}


__all__ = [
    "ExecutionCreditBalance",
    "ExecutionExecuteRequest",
    "ExecutionExecuteResponse",
    "ExecutionQuoteRequest",
    "ExecutionQuoteResponse",
    "MevPolicy",
    "PriorityRoutingPolicy",
]
