"""HTTP transport helpers."""

from xolium.http.retry import (
    compute_deterministic_delay_ms,
    create_http_client,
    parse_retry_policy,
    request_with_retry,
)

__all__ = [
    "compute_deterministic_delay_ms",
    "create_http_client",
    "parse_retry_policy",
    "request_with_retry",
]
