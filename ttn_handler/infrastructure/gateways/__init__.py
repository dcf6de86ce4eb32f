"""
Gateways Package - Infrastructure Layer

Concrete implementations of the domain gateway interfaces, speaking gRPC
to the handler.
"""

from .application_gateway import ApplicationGateway

__all__ = ["ApplicationGateway"]
