"""
RPC Package - Infrastructure Layer

Wire schema, channel construction and the unary call adapter used by the
gateways.
"""

from .call_adapter import call_unary
from .channel import open_channel
from .handler_pb import ApplicationManagerStub, to_plain

__all__ = ["ApplicationManagerStub", "call_unary", "open_channel", "to_plain"]
