"""
Handler application client

Async gRPC client facade for a LoRaWAN handler's application manager.

Layer Structure:
- Domain: Entities, credential policy and the gateway contract
- Infrastructure: gRPC wire schema, call adapter and gateway implementation
- Shared: Cross-cutting concerns (logging, constants, secret files)
- Main: Composition root and configuration
"""

__version__ = "0.1.0"
