"""Client configuration from environment variables.

Variables:
- XOLIUM_RPC_ENDPOINT: RPC URL (required)
- XOLIUM_COMMITMENT: processed | confirmed | finalized (default: finalized)
- XOLIUM_NETWORK_API_URL: Network API base URL (required)
- XOLIUM_EXECUTION_API_URL: Execution API base URL (required)
- XOLIUM_API_TIMEOUT_MS: Per-request timeout (default: 10000)
- XOLIUM_API_KEY: Sent as x-api-key on both APIs when set
- XOLIUM_RETRY_MAX_ATTEMPTS: default 3
- XOLIUM_RETRY_BASE_DELAY_MS: default 100
- XOLIUM_RETRY_MAX_DELAY_MS: default 2000
- XOLIUM_RETRY_STATUS_CODES: comma-separated (default: 429,500,502,503,504)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from xolium.constants import API_KEY_HEADER, DEFAULT_EXECUTION_ROUTES, DEFAULT_NETWORK_ROUTES
from xolium.errors import InvalidInputError
from xolium.models.config import XoliumClientConfig
from xolium.models.validation import parse_input

DEFAULT_COMMITMENT = "finalized"
DEFAULT_TIMEOUT_MS = "10000"
DEFAULT_RETRY_MAX_ATTEMPTS = "3"
DEFAULT_RETRY_BASE_DELAY_MS = "100"
DEFAULT_RETRY_MAX_DELAY_MS = "2000"
DEFAULT_RETRY_STATUS_CODES = "429,500,502,503,504"


def _require(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name, "").strip()
    if not value:
        raise InvalidInputError(f"Missing required environment variable {name}", {"variable": name})
    return value


def _int(environ: Mapping[str, str], name: str, default: str) -> int:
    raw = environ.get(name, default).strip()
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidInputError(f"{name} must be an integer", {"variable": name, "value": raw}) from e


def _status_codes(environ: Mapping[str, str]) -> list[int]:
    raw = environ.get("XOLIUM_RETRY_STATUS_CODES", DEFAULT_RETRY_STATUS_CODES)
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError as e:
        raise InvalidInputError(
            "XOLIUM_RETRY_STATUS_CODES must be comma-separated integers",
            {"variable": "XOLIUM_RETRY_STATUS_CODES", "value": raw},
        ) from e


def load_client_config_from_env(
    signer: Any,
    environ: Mapping[str, str] | None = None,
) -> XoliumClientConfig:
    """Build and validate a client config from environment variables.

    Args:
        signer: Signer to embed in the config (never read from the environment)
        environ: Mapping to read from (default: os.environ)

    Raises:
        InvalidInputError: Missing/malformed variables or an invalid config
    """
    env = os.environ if environ is None else environ

    headers: dict[str, str] = {}
    api_key = env.get("XOLIUM_API_KEY", "").strip()
    if api_key:
        headers[API_KEY_HEADER] = api_key
    timeout_ms = _int(env, "XOLIUM_API_TIMEOUT_MS", DEFAULT_TIMEOUT_MS)

    config: dict[str, Any] = {
        "rpcEndpoint": _require(env, "XOLIUM_RPC_ENDPOINT"),
        "commitment": env.get("XOLIUM_COMMITMENT", DEFAULT_COMMITMENT).strip(),
        "signer": signer,
        "retry": {
            "maxAttempts": _int(env, "XOLIUM_RETRY_MAX_ATTEMPTS", DEFAULT_RETRY_MAX_ATTEMPTS),
            "baseDelayMs": _int(env, "XOLIUM_RETRY_BASE_DELAY_MS", DEFAULT_RETRY_BASE_DELAY_MS),
            "maxDelayMs": _int(env, "XOLIUM_RETRY_MAX_DELAY_MS", DEFAULT_RETRY_MAX_DELAY_MS),
            "retryableHttpStatusCodes": _status_codes(env),
        },
        "apis": {
            "network": {
                "baseUrl": _require(env, "XOLIUM_NETWORK_API_URL"),
                "timeoutMs": timeout_ms,
                "headers": dict(headers),
                "routes": dict(DEFAULT_NETWORK_ROUTES),
            },
            "execution": {
                "baseUrl": _require(env, "XOLIUM_EXECUTION_API_URL"),
                "timeoutMs": timeout_ms,
                "headers": dict(headers),
                "routes": dict(DEFAULT_EXECUTION_ROUTES),
            },
        },
    }
    return parse_input(XoliumClientConfig, config, "Invalid XoliumClient configuration")


__all__ = ["load_client_config_from_env"]
