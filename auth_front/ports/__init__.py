"""
Ports - Interfaces for the login transport and application routing.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from auth_front.ports.transport_port import AuthTransportPort
from auth_front.ports.router_port import RouterPort

__all__ = [
    "AuthTransportPort",
    "RouterPort",
]
