"""SDK-wide constants.

Centralizes routing bounds, schema limits and default API paths.
"""

# Hop bounds accepted by routing policies
MIN_ROUTE_HOPS = 1
MAX_ROUTE_HOPS = 5

# Upper bound on per-edge volatility accepted from the graph endpoint
MAX_EDGE_VOLATILITY_BPS = 100_000

# Retry policy schema limits
MAX_RETRY_ATTEMPTS = 10
MAX_BASE_DELAY_MS = 60_000
MAX_RETRY_DELAY_MS = 300_000

# API client limits
MAX_API_TIMEOUT_MS = 120_000

# Default route paths for the aggregation service
DEFAULT_NETWORK_ROUTES = {
    "health": "/health",
    "metrics": "/metrics",
    "liquidityGraph": "/liquidity/graph",
}
DEFAULT_EXECUTION_ROUTES = {
    "credits": "/credits",
    "quote": "/quote",
    "execute": "/execute",
    "yield": "/yield",
}

# Header carrying the API key when one is configured
API_KEY_HEADER = "x-api-key"
