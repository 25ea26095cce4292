"""API clients."""

from xolium.clients.client import XoliumClient
from xolium.clients.execution import ExecutionClient
from xolium.clients.network import NetworkClient

__all__ = ["ExecutionClient", "NetworkClient", "XoliumClient"]
