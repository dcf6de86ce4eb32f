"""
Unary call adapter - Infrastructure Layer

Turns one invocation of a bound gRPC stub method into one awaitable result.
Both flavours of grpc multicallable are accepted:

- ``grpc.aio`` methods return an awaitable call object, which is awaited.
- ``grpc`` methods invoked through ``.future`` return a ``grpc.Future``
  that completes on a grpc thread; its completion callback settles an
  asyncio future on the caller's loop.

Errors are raised exactly as grpc produced them. Nothing is retried.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

import grpc


async def call_unary(method: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """
    Invoke ``method(*args, **kwargs)`` once and wait for its response.

    Args:
        method: Stub method bound to its channel, e.g. ``stub.GetApplication``
            or ``stub.GetApplication.future``.

    Returns:
        The response message.

    Raises:
        grpc.RpcError: Whatever the call failed with, unchanged.
    """
    outcome = method(*args, **kwargs)
    if isinstance(outcome, grpc.Future):
        return await _from_grpc_future(outcome)
    return await outcome


def _from_grpc_future(rpc_future: grpc.Future) -> Awaitable[Any]:
    loop = asyncio.get_running_loop()
    result: asyncio.Future = loop.create_future()

    def _settle(done: grpc.Future) -> None:
        if result.done():
            return
        if done.cancelled():
            result.cancel()
            return
        error = done.exception()
        if error is not None:
            result.set_exception(error)
        else:
            result.set_result(done.result())

    def _on_done(done: grpc.Future) -> None:
        # grpc runs callbacks on its own threads
        loop.call_soon_threadsafe(_settle, done)

    rpc_future.add_done_callback(_on_done)
    return result
