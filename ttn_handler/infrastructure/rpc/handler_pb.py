"""
Handler wire schema - Infrastructure Layer

Protobuf messages and the gRPC stub of the handler's ApplicationManager
service. The descriptor is assembled at import time instead of being
compiled by protoc, so the package ships without generated code.

The update fields of ``Application`` are proto3 ``optional``: a field set
to an empty string is still serialized and the handler can tell it apart
from a field that was not sent.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

import grpc
from google.protobuf import descriptor_pb2, descriptor_pool, empty_pb2
from google.protobuf.json_format import MessageToDict
from google.protobuf.message import Message
from google.protobuf.message_factory import GetMessageClass

from ttn_handler.shared.consts import APPLICATION_MANAGER_SERVICE, HANDLER_PACKAGE

_Field = descriptor_pb2.FieldDescriptorProto

# (name, field number) as assigned by the handler's handler.proto
APPLICATION_UPDATE_FIELDS: Tuple[Tuple[str, int], ...] = (
    ("decoder", 2),
    ("converter", 3),
    ("validator", 4),
    ("encoder", 5),
    ("payload_format", 6),
    ("register_on_join_access_key", 7),
)


def _build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="ttn_handler/handler.proto",
        package=HANDLER_PACKAGE,
        syntax="proto3",
    )

    identifier = file_proto.message_type.add(name="ApplicationIdentifier")
    identifier.field.add(
        name="app_id", number=1, type=_Field.TYPE_STRING, label=_Field.LABEL_OPTIONAL
    )

    application = file_proto.message_type.add(name="Application")
    application.field.add(
        name="app_id", number=1, type=_Field.TYPE_STRING, label=_Field.LABEL_OPTIONAL
    )
    for index, (name, number) in enumerate(APPLICATION_UPDATE_FIELDS):
        # proto3 optional = synthetic oneof named after the field
        application.oneof_decl.add(name=f"_{name}")
        application.field.add(
            name=name,
            number=number,
            type=_Field.TYPE_STRING,
            label=_Field.LABEL_OPTIONAL,
            oneof_index=index,
            proto3_optional=True,
        )

    return file_proto


# kept out of descriptor_pool.Default() so a host handler.proto cannot clash
_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_file_descriptor().SerializeToString())

ApplicationIdentifier = GetMessageClass(
    _pool.FindMessageTypeByName(f"{HANDLER_PACKAGE}.ApplicationIdentifier")
)
Application = GetMessageClass(
    _pool.FindMessageTypeByName(f"{HANDLER_PACKAGE}.Application")
)
Empty = empty_pb2.Empty


def to_plain(message: Message) -> Dict[str, Any]:
    """Convert a response message into plain Python data, keeping proto names."""
    return MessageToDict(message, preserving_proto_field_name=True)


def _method(name: str) -> str:
    return f"/{APPLICATION_MANAGER_SERVICE}/{name}"


class ApplicationManagerStub:
    """Client stub for the ApplicationManager service."""

    def __init__(self, channel: Any) -> None:
        """
        Args:
            channel: A ``grpc.aio.Channel`` or a ``grpc.Channel``.
        """
        self.GetApplication = channel.unary_unary(
            _method("GetApplication"),
            request_serializer=ApplicationIdentifier.SerializeToString,
            response_deserializer=Application.FromString,
        )
        self.SetApplication = channel.unary_unary(
            _method("SetApplication"),
            request_serializer=Application.SerializeToString,
            response_deserializer=Empty.FromString,
        )
        self.DeleteApplication = channel.unary_unary(
            _method("DeleteApplication"),
            request_serializer=ApplicationIdentifier.SerializeToString,
            response_deserializer=Empty.FromString,
        )


class ApplicationManagerServicer:
    """Server side of the ApplicationManager service, used by local handlers."""

    async def GetApplication(self, request: Any, context: Any) -> Any:
        await context.abort(grpc.StatusCode.UNIMPLEMENTED, "GetApplication")

    async def SetApplication(self, request: Any, context: Any) -> Any:
        await context.abort(grpc.StatusCode.UNIMPLEMENTED, "SetApplication")

    async def DeleteApplication(self, request: Any, context: Any) -> Any:
        await context.abort(grpc.StatusCode.UNIMPLEMENTED, "DeleteApplication")


def add_application_manager_servicer_to_server(
    servicer: ApplicationManagerServicer, server: Any
) -> None:
    handlers = {
        "GetApplication": grpc.unary_unary_rpc_method_handler(
            servicer.GetApplication,
            request_deserializer=ApplicationIdentifier.FromString,
            response_serializer=Application.SerializeToString,
        ),
        "SetApplication": grpc.unary_unary_rpc_method_handler(
            servicer.SetApplication,
            request_deserializer=Application.FromString,
            response_serializer=Empty.SerializeToString,
        ),
        "DeleteApplication": grpc.unary_unary_rpc_method_handler(
            servicer.DeleteApplication,
            request_deserializer=ApplicationIdentifier.FromString,
            response_serializer=Empty.SerializeToString,
        ),
    }
    server.add_generic_rpc_handlers(
        (grpc.method_handlers_generic_handler(APPLICATION_MANAGER_SERVICE, handlers),)
    )
