"""
Domain Layer Package

Entities, the credential policy and the gateway contract of the handler
client. Nothing here depends on grpc or protobuf.
"""

from ttn_handler.domain import entities, gateways

__all__ = ["entities", "gateways"]
