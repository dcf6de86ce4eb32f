"""
Infrastructure Layer Package

gRPC implementations of the gateway interfaces defined in the domain layer.
"""

from ttn_handler.infrastructure import gateways, rpc

__all__ = ["gateways", "rpc"]
