"""
Gateways Package - Domain Layer

Interfaces for talking to the handler. Concrete implementations live in
the infrastructure layer.
"""

from .application_gateway import IApplicationGateway

__all__ = ["IApplicationGateway"]
