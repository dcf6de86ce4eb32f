from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

import grpc
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ttn_handler.domain.entities.credentials import (  # noqa: E402
    Announcement,
    Credential,
)

SAMPLE_CERTIFICATE = (
    "-----BEGIN CERTIFICATE-----\nMIIBfakecertificate\n-----END CERTIFICATE-----"
)


class FakeUnaryMethod:
    """Stand-in for a ``grpc.aio`` unary-unary multicallable."""

    def __init__(self, path: str, request_serializer: Callable, response_deserializer: Callable):
        self.path = path
        self.request_serializer = request_serializer
        self.response_deserializer = response_deserializer
        self.requests: List[Any] = []
        self.metadata: List[Any] = []
        self.response: Any = None
        self.error: BaseException | None = None

    def __call__(self, request: Any, *, metadata: Any = None, **kwargs: Any) -> Any:
        self.requests.append(request)
        self.metadata.append(metadata)
        # serialize/deserialize like the real channel would
        wire = self.request_serializer(request)
        return self._respond(wire)

    async def _respond(self, wire: bytes) -> Any:
        if self.error is not None:
            raise self.error
        return self.response


class FakeChannel:
    def __init__(self) -> None:
        self.methods: Dict[str, FakeUnaryMethod] = {}

    def unary_unary(
        self,
        path: str,
        request_serializer: Callable,
        response_deserializer: Callable,
        **kwargs: Any,
    ) -> FakeUnaryMethod:
        method = FakeUnaryMethod(path, request_serializer, response_deserializer)
        self.methods[path.rsplit("/", 1)[-1]] = method
        return method


class _DoneFuture(grpc.Future):
    """Already completed ``grpc.Future``."""

    def __init__(self, result: Any = None, error: BaseException | None = None):
        self._result = result
        self._error = error

    def cancel(self) -> bool:
        return False

    def cancelled(self) -> bool:
        return False

    def running(self) -> bool:
        return False

    def done(self) -> bool:
        return True

    def result(self, timeout: Any = None) -> Any:
        if self._error is not None:
            raise self._error
        return self._result

    def exception(self, timeout: Any = None) -> BaseException | None:
        return self._error

    def traceback(self, timeout: Any = None) -> Any:
        return None

    def add_done_callback(self, fn: Callable[[grpc.Future], Any]) -> None:
        fn(self)


class FakeSyncUnaryMethod(grpc.UnaryUnaryMultiCallable):
    """Stand-in for a sync ``grpc`` unary-unary multicallable."""

    def __init__(self, path: str, request_serializer: Callable, response_deserializer: Callable):
        self.path = path
        self.request_serializer = request_serializer
        self.requests: List[Any] = []
        self.metadata: List[Any] = []
        self.blocking_calls = 0
        self.response: Any = None
        self.error: BaseException | None = None

    def __call__(self, request: Any, *args: Any, **kwargs: Any) -> Any:
        self.blocking_calls += 1
        raise AssertionError("blocking call on the event loop")

    def with_call(self, request: Any, *args: Any, **kwargs: Any) -> Any:
        self.blocking_calls += 1
        raise AssertionError("blocking call on the event loop")

    def future(self, request: Any, *, metadata: Any = None, **kwargs: Any) -> grpc.Future:
        self.requests.append(request)
        self.metadata.append(metadata)
        self.request_serializer(request)
        return _DoneFuture(self.response, self.error)


class FakeSyncChannel:
    def __init__(self) -> None:
        self.methods: Dict[str, FakeSyncUnaryMethod] = {}

    def unary_unary(
        self,
        path: str,
        request_serializer: Callable,
        response_deserializer: Callable,
        **kwargs: Any,
    ) -> FakeSyncUnaryMethod:
        method = FakeSyncUnaryMethod(path, request_serializer, response_deserializer)
        self.methods[path.rsplit("/", 1)[-1]] = method
        return method


class RecordingChannelFactory:
    def __init__(self, channel: Any = None) -> None:
        self.calls: List[Tuple[str, Credential]] = []
        self.channel = channel if channel is not None else FakeChannel()

    def __call__(self, net_address: str, credential: Credential) -> Any:
        self.calls.append((net_address, credential))
        return self.channel


@pytest.fixture()
def channel_factory() -> RecordingChannelFactory:
    return RecordingChannelFactory()


@pytest.fixture()
def sync_channel_factory() -> RecordingChannelFactory:
    return RecordingChannelFactory(FakeSyncChannel())


@pytest.fixture()
def plain_announcement() -> Announcement:
    return Announcement(net_address="handler.local:1904")


@pytest.fixture()
def certified_announcement() -> Announcement:
    return Announcement(net_address="handler.local:1904", certificate=SAMPLE_CERTIFICATE)
