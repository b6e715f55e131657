"""
Adapters - Implementations of ports.

Transport:
- HttpxAuthTransport: Login over HTTP (httpx)
- MemoryAuthTransport: In-memory backend (testing)

Routing:
- RouteTable: Static path -> view table

Capabilities:
- cookies_enabled: Cookie storage probe
"""

# Transport
from auth_front.adapters.httpx_transport import HttpxAuthTransport
from auth_front.adapters.memory_transport import MemoryAuthTransport

# Routing
from auth_front.adapters.route_table import RouteTable, RouteNotFoundError, View

# Capabilities
from auth_front.adapters.cookie_probe import cookies_enabled

__all__ = [
    # Transport
    "HttpxAuthTransport",
    "MemoryAuthTransport",
    # Routing
    "RouteTable",
    "RouteNotFoundError",
    "View",
    # Capabilities
    "cookies_enabled",
]
