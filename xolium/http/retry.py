"""HTTP requests with bounded, deterministic exponential back-off.

Failures are classified as either transport-level (DNS, connect, timeout,
reset) or HTTP-status-level. Transport failures are always retried;
status failures only when the status is listed in the retry policy.
Delays carry no jitter so retry timing is reproducible.
"""

from __future__ import annotations

import math
import time
from collections.abc import Callable, Mapping
from typing import Any

import httpx
import structlog

from xolium.errors import InvalidInputError, NetworkUnavailableError
from xolium.models.config import ApiConfig, RetryPolicy
from xolium.models.validation import parse_input

logger = structlog.get_logger()

Sleep = Callable[[float], None]


def parse_retry_policy(data: Any) -> RetryPolicy:
    """Validate a retry policy (dict or RetryPolicy)."""
    return parse_input(RetryPolicy, data, "Invalid retry policy")


def compute_deterministic_delay_ms(attempt_index: int, base_delay_ms: int, max_delay_ms: int) -> int:
    """Delay before retrying after attempt_index: base * 2**attempt, capped.

    Raises:
        InvalidInputError: If attempt_index is not a non-negative integer
    """
    if isinstance(attempt_index, bool) or not isinstance(attempt_index, int) or attempt_index < 0:
        raise InvalidInputError(
            "attemptIndex must be a non-negative integer", {"attempt_index": attempt_index}
        )
    return min(max_delay_ms, base_delay_ms * 2**attempt_index)


def sleep_ms(ms: float, sleep: Sleep = time.sleep) -> None:
    """Block for ms milliseconds."""
    if isinstance(ms, bool) or not isinstance(ms, int | float) or not math.isfinite(ms) or ms < 0:
        raise InvalidInputError("sleepMs requires a non-negative finite ms", {"ms": ms})
    sleep(ms / 1000)


def describe_http_error(exc: httpx.HTTPError) -> dict[str, Any]:
    """Summarize an httpx failure for error details and logs."""
    summary: dict[str, Any] = {"name": type(exc).__name__, "message": str(exc)}
    if isinstance(exc, httpx.HTTPStatusError):
        summary["status"] = exc.response.status_code
    try:
        request = exc.request
    except RuntimeError:
        # Request not attached (error raised outside a send)
        return summary
    summary["url"] = str(request.url)
    summary["method"] = request.method
    return summary


def is_retryable(exc: httpx.HTTPError, policy: RetryPolicy) -> bool:
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in policy.retryable_http_status_codes
    # No status: transport failure
    return isinstance(exc, httpx.RequestError)


def request_with_retry(
    http: httpx.Client,
    method: str,
    url: str,
    retry_policy: RetryPolicy | Mapping[str, Any],
    context: Mapping[str, Any],
    *,
    json: Any = None,
    sleep: Sleep = time.sleep,
) -> httpx.Response:
    """Send a request, retrying per policy.

    Args:
        http: Client to send through (carries base URL, timeout, headers)
        method: HTTP method
        url: Path relative to the client's base URL
        retry_policy: Retry policy (validated here)
        context: Extra fields for logs and error details (service, route)
        json: Optional JSON body
        sleep: Sleep function, injectable for tests

    Returns:
        The 2xx response

    Raises:
        InvalidInputError: If the retry policy is malformed
        NetworkUnavailableError: On a non-retryable failure, or when
            attempts are exhausted
    """
    policy = parse_retry_policy(retry_policy)

    for attempt in range(policy.max_attempts):
        try:
            response = http.request(method, url, json=json)
            response.raise_for_status()
            return response
        except httpx.HTTPError as e:
            failure = describe_http_error(e)
            final_attempt = attempt == policy.max_attempts - 1
            if not is_retryable(e, policy) or final_attempt:
                logger.warning(
                    "request_failed",
                    **context,
                    attempt=attempt,
                    max_attempts=policy.max_attempts,
                    error=failure,
                )
                raise NetworkUnavailableError(
                    "Network request failed",
                    {
                        **context,
                        "attempt": attempt,
                        "max_attempts": policy.max_attempts,
                        "http": failure,
                    },
                ) from e

            delay_ms = compute_deterministic_delay_ms(
                attempt, policy.base_delay_ms, policy.max_delay_ms
            )
            logger.info(
                "request_retry_scheduled",
                **context,
                attempt=attempt,
                delay_ms=delay_ms,
                error=failure,
            )
            sleep_ms(delay_ms, sleep)

    # max_attempts >= 1, so the loop always returns or raises
    raise NetworkUnavailableError("Network request failed", dict(context))


def json_body(response: httpx.Response) -> Any:
    """Decode a JSON body; non-JSON bodies become None and fail schema checks."""
    try:
        return response.json()
    except ValueError:
        return None


def create_http_client(
    api: ApiConfig,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Build an httpx client for one API config."""
    return httpx.Client(
        base_url=str(api.base_url),
        timeout=api.timeout_ms / 1000,
        headers=api.headers,
        transport=transport,
    )


__all__ = [
    "compute_deterministic_delay_ms",
    "create_http_client",
    "describe_http_error",
    "is_retryable",
    "json_body",
    "parse_retry_policy",
    "request_with_retry",
    "sleep_ms",
]
