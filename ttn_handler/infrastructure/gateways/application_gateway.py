"""Handler application gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

import grpc

from ttn_handler.domain.entities.application import (
    PAYLOAD_FUNCTION_FIELDS,
    Application,
    ApplicationField,
    ApplicationUpdate,
    FieldUpdate,
    PayloadFormat,
    PayloadFunctions,
)
from ttn_handler.domain.entities.credentials import (
    Announcement,
    Credential,
    CredentialPolicy,
    select_credential,
)
from ttn_handler.domain.entities.device import Device
from ttn_handler.domain.entities.errors import (
    ApplicationValidationError,
    OperationNotSpecifiedError,
)
from ttn_handler.domain.gateways.application_gateway import IApplicationGateway
from ttn_handler.infrastructure.rpc import handler_pb
from ttn_handler.infrastructure.rpc.call_adapter import call_unary
from ttn_handler.infrastructure.rpc.channel import open_channel
from ttn_handler.shared import ACCESS_KEY_METADATA, get_logger

logger = get_logger(__name__)

ChannelFactory = Callable[[str, Credential], Any]


def _status_name(error: BaseException) -> Optional[str]:
    code = getattr(error, "code", None)
    if not callable(code):
        return None
    status = code()
    return getattr(status, "name", str(status))


class ApplicationGateway(IApplicationGateway):
    """gRPC client for one application on the handler's ApplicationManager."""

    def __init__(
        self,
        app_id: str,
        app_access_key: str,
        announcement: Announcement,
        *,
        credential_policy: Union[
            CredentialPolicy, str
        ] = CredentialPolicy.VERIFY_WHEN_CERTIFIED,
        channel_factory: ChannelFactory = open_channel,
    ):
        """
        Initialize the gateway and open its channel.

        Args:
            app_id: Application every call is made for
            app_access_key: Access key sent as call metadata
            announcement: Resolved address (and certificate) of the handler
            credential_policy: Rule choosing the channel credential
            channel_factory: Builds the channel from address and credential,
                either a ``grpc.aio.Channel`` or a sync ``grpc.Channel``
        """
        self._app_id = app_id
        self._app_access_key = app_access_key
        self._credential = select_credential(announcement, credential_policy)
        self._channel = channel_factory(announcement.net_address, self._credential)
        self._stub = handler_pb.ApplicationManagerStub(self._channel)
        self._metadata: Tuple[Tuple[str, str], ...] = (
            (ACCESS_KEY_METADATA, app_access_key),
        )

        logger.info(
            "handler.application.client_created",
            app_id=app_id,
            net_address=announcement.net_address,
            credential=self._credential.mode.value,
            certificate=announcement.certificate,
        )

    @property
    def app_id(self) -> str:
        return self._app_id

    @property
    def credential(self) -> Credential:
        return self._credential

    @property
    def channel(self) -> Any:
        return self._channel

    async def _exec(
        self, operation: str, method: Callable[..., Any], request: Any
    ) -> Dict[str, Any]:
        logger.info(
            f"handler.application.{operation}.request",
            app_id=self._app_id,
        )

        if isinstance(method, grpc.UnaryUnaryMultiCallable):
            # sync channel: completion callback instead of blocking the loop
            method = method.future

        try:
            response = await call_unary(method, request, metadata=self._metadata)
        except grpc.RpcError as e:
            logger.error(
                f"handler.application.{operation}.rpc_error",
                app_id=self._app_id,
                status=_status_name(e),
                exc_info=e,
            )
            raise
        except Exception as e:
            logger.error(
                f"handler.application.{operation}.unexpected_error",
                app_id=self._app_id,
                error=str(e),
                exc_info=e,
            )
            raise

        return handler_pb.to_plain(response)

    def _identifier(self) -> Any:
        return handler_pb.ApplicationIdentifier(app_id=self._app_id)

    def _application_request(self, updates: ApplicationUpdate) -> Any:
        request = handler_pb.Application(app_id=self._app_id)
        for update in updates:
            setattr(request, update.field.value, update.value)
        return request

    async def get(self) -> Application:
        """
        Retrieve the application from the handler.

        Returns:
            Application: Plain form of the application; fields the handler
            does not report are absent

        Raises:
            grpc.RpcError: If the call fails, unchanged
        """
        application = await self._exec(
            "get", self._stub.GetApplication, self._identifier()
        )
        return Application(**application)

    async def get_payload_format(self) -> Optional[str]:
        """
        Retrieve the payload format of the application.

        Returns:
            The payload format, or ``None`` when the handler reports none

        Raises:
            grpc.RpcError: If the call fails, unchanged
        """
        application = await self.get()
        return application.get("payload_format")

    async def set_payload_format(self, payload_format: Union[PayloadFormat, str]) -> None:
        """
        Change the payload format; equivalent to ``set({"payload_format": ...})``.

        Args:
            payload_format: ``custom`` or ``cayenne``

        Raises:
            ApplicationValidationError: On any other format, before any call
            grpc.RpcError: If the call fails, unchanged
        """
        try:
            value = PayloadFormat(payload_format).value
        except ValueError as e:
            raise ApplicationValidationError(
                f"Unsupported payload format: {payload_format}",
                details={"allowed": [item.value for item in PayloadFormat]},
            ) from e
        await self.set(
            ApplicationUpdate.of(FieldUpdate(ApplicationField.PAYLOAD_FORMAT, value))
        )

    async def get_custom_payload_functions(self) -> PayloadFunctions:
        """
        Retrieve the custom payload functions.

        Returns:
            PayloadFunctions: Exactly the keys decoder, converter, validator
            and encoder; ``None`` for functions the handler does not report

        Raises:
            grpc.RpcError: If the call fails, unchanged
        """
        application = await self.get()
        return PayloadFunctions(
            decoder=application.get("decoder"),
            converter=application.get("converter"),
            validator=application.get("validator"),
            encoder=application.get("encoder"),
        )

    async def set_custom_payload_functions(self, functions: PayloadFunctions) -> None:
        """
        Change the payload functions whose keys are present in ``functions``.

        The result of ``get_custom_payload_functions`` is accepted as is.

        Raises:
            ApplicationValidationError: On keys other than the four functions
            grpc.RpcError: If the call fails, unchanged
        """
        await self.set(
            ApplicationUpdate.from_mapping(functions, allowed=PAYLOAD_FUNCTION_FIELDS)
        )

    async def set(
        self, updates: Union[ApplicationUpdate, Mapping[str, Optional[str]]]
    ) -> None:
        """
        Apply a partial update to the application.

        Args:
            updates: Explicit field updates, or a mapping whose keys select
                the fields to send whatever their values

        Raises:
            ApplicationValidationError: On unknown fields or non-string values
            grpc.RpcError: If the call fails, unchanged
        """
        if not isinstance(updates, ApplicationUpdate):
            updates = ApplicationUpdate.from_mapping(updates)

        logger.debug(
            "handler.application.set.fields",
            app_id=self._app_id,
            fields=[field.value for field in updates.fields],
        )
        await self._exec(
            "set", self._stub.SetApplication, self._application_request(updates)
        )

    async def delete(self) -> None:
        """
        Delete the application from the handler.

        Raises:
            grpc.RpcError: If the call fails, unchanged
        """
        await self._exec("delete", self._stub.DeleteApplication, self._identifier())

    def _not_specified(self, operation: str, **details: Any) -> OperationNotSpecifiedError:
        logger.warning(
            "handler.device.not_specified",
            operation=operation,
            app_id=self._app_id,
            **details,
        )
        return OperationNotSpecifiedError(
            operation, details={"app_id": self._app_id, **details}
        )

    async def devices(self) -> List[Device]:
        """List the devices of the application.

        Raises:
            OperationNotSpecifiedError: Always; the device messages are not
                defined for this handler
        """
        raise self._not_specified("devices")

    async def register_device(self, device: Device) -> None:
        """Register a device. Raises OperationNotSpecifiedError."""
        raise self._not_specified("register_device", dev_id=device.dev_id)

    async def get_device(self, dev_id: str) -> Device:
        """Retrieve one device. Raises OperationNotSpecifiedError."""
        raise self._not_specified("get_device", dev_id=dev_id)

    async def set_device(self, dev_id: str, device: Device) -> None:
        """Update one device. Raises OperationNotSpecifiedError."""
        raise self._not_specified("set_device", dev_id=dev_id)

    async def delete_device(self, dev_id: str) -> None:
        """Delete one device. Raises OperationNotSpecifiedError."""
        raise self._not_specified("delete_device", dev_id=dev_id)
