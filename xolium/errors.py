"""Typed errors raised by the Xolium SDK.

Every failure surfaced to callers is a XoliumError carrying a stable
ErrorCode and a details dict suitable for logging or JSON rendering.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from pydantic import ValidationError


class ErrorCode(str, Enum):
    """Stable error codes shared with the aggregation service."""

    INVALID_INPUT = "INVALID_INPUT"
    NETWORK_UNAVAILABLE = "NETWORK_UNAVAILABLE"
    EXECUTION_DENIED = "EXECUTION_DENIED"
    RISK_LIMIT_EXCEEDED = "RISK_LIMIT_EXCEEDED"
    CONTRACT_MISMATCH = "CONTRACT_MISMATCH"
    UNAUTHORIZED_SIGNER = "UNAUTHORIZED_SIGNER"


class XoliumError(Exception):
    """Base error for SDK operations.

    Args:
        message: Human readable description
        details: Structured context (offending values, request context, ...)
        code: Error code; subclasses fix this
    """

    code: ErrorCode = ErrorCode.CONTRACT_MISMATCH

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        code: ErrorCode | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = dict(details) if details else {}
        if code is not None:
            self.code = code

    def to_dict(self) -> dict[str, Any]:
        """Render the error as a JSON-compatible dict."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": _to_jsonable(self.details),
        }

    @classmethod
    def from_unknown(
        cls,
        err: BaseException,
        fallback_message: str,
        details: dict[str, Any] | None = None,
    ) -> XoliumError:
        """Wrap an arbitrary exception, passing XoliumErrors through unchanged."""
        if isinstance(err, XoliumError):
            return err
        message = str(err) or fallback_message
        return ContractMismatchError(
            message,
            {**(details or {}), "original": _serialize_exception(err)},
        )


class InvalidInputError(XoliumError):
    """Caller supplied a malformed request, policy or configuration."""

    code = ErrorCode.INVALID_INPUT


class NetworkUnavailableError(XoliumError):
    """Remote API unreachable or kept failing after retries."""

    code = ErrorCode.NETWORK_UNAVAILABLE


class ExecutionDeniedError(XoliumError):
    """Inputs were valid but the operation cannot proceed (e.g. no route)."""

    code = ErrorCode.EXECUTION_DENIED


class RiskLimitExceededError(XoliumError):
    """Request exceeds a caller-declared risk limit."""

    code = ErrorCode.RISK_LIMIT_EXCEEDED


class ContractMismatchError(XoliumError):
    """Remote payload does not match the expected schema."""

    code = ErrorCode.CONTRACT_MISMATCH


class UnauthorizedSignerError(XoliumError):
    """Signer is not allowed to perform the operation."""

    code = ErrorCode.UNAUTHORIZED_SIGNER


def validation_issues(exc: ValidationError) -> list[dict[str, Any]]:
    """Flatten a pydantic ValidationError into JSON-friendly issue dicts."""
    return [
        {
            "loc": list(error["loc"]),
            "msg": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors(include_url=False)
    ]


def _serialize_exception(err: BaseException) -> dict[str, Any]:
    return {"name": type(err).__name__, "message": str(err)}


def _to_jsonable(value: Any) -> Any:
    try:
        return json.loads(json.dumps(value, default=str))
    except (TypeError, ValueError):
        return {"type": type(value).__name__, "note": "non-serializable"}


__all__ = [
    "ContractMismatchError",
    "ErrorCode",
    "ExecutionDeniedError",
    "InvalidInputError",
    "NetworkUnavailableError",
    "RiskLimitExceededError",
    "UnauthorizedSignerError",
    "XoliumError",
    "validation_issues",
]
