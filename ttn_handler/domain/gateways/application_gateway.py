"""
Application Gateway Interface - Domain Layer

This module defines the contract for managing one application, and its
devices, on a handler.
"""

from abc import ABC, abstractmethod
from typing import List, Mapping, Optional, Union

from ttn_handler.domain.entities.application import (
    Application,
    ApplicationUpdate,
    PayloadFormat,
    PayloadFunctions,
)
from ttn_handler.domain.entities.device import Device


class IApplicationGateway(ABC):
    """Interface for the handler's application manager."""

    @abstractmethod
    async def get(self) -> Application:
        """
        Retrieve the application.

        Returns:
            Application: Plain form of the application record

        Raises:
            grpc.RpcError: If the call fails, unchanged
        """
        pass

    @abstractmethod
    async def get_payload_format(self) -> Optional[str]:
        """Retrieve only the payload format of the application."""
        pass

    @abstractmethod
    async def set_payload_format(self, payload_format: Union[PayloadFormat, str]) -> None:
        """Change the payload format of the application."""
        pass

    @abstractmethod
    async def get_custom_payload_functions(self) -> PayloadFunctions:
        """
        Retrieve the custom payload functions.

        Returns:
            PayloadFunctions: Always the four keys decoder, converter,
            validator and encoder; functions not set remotely are ``None``
        """
        pass

    @abstractmethod
    async def set_custom_payload_functions(self, functions: PayloadFunctions) -> None:
        """Change the payload functions present in ``functions``."""
        pass

    @abstractmethod
    async def set(
        self, updates: Union[ApplicationUpdate, Mapping[str, str]]
    ) -> None:
        """
        Apply a partial update to the application.

        Args:
            updates: Fields to change. Only these fields are sent.
        """
        pass

    @abstractmethod
    async def delete(self) -> None:
        """Delete the application from the handler."""
        pass

    @abstractmethod
    async def devices(self) -> List[Device]:
        pass

    @abstractmethod
    async def register_device(self, device: Device) -> None:
        pass

    @abstractmethod
    async def get_device(self, dev_id: str) -> Device:
        pass

    @abstractmethod
    async def set_device(self, dev_id: str, device: Device) -> None:
        pass

    @abstractmethod
    async def delete_device(self, dev_id: str) -> None:
        pass
