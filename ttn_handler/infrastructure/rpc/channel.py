"""gRPC channel construction from a selected credential."""

from __future__ import annotations

import grpc

from ttn_handler.domain.entities.credentials import Credential, CredentialMode
from ttn_handler.shared import get_logger

logger = get_logger(__name__)


def open_channel(net_address: str, credential: Credential) -> grpc.aio.Channel:
    """
    Open an asyncio channel to ``net_address``.

    The channel connects lazily; no network traffic happens here.
    """
    logger.info(
        "handler.channel.open",
        net_address=net_address,
        mode=credential.mode.value,
    )

    if credential.mode is CredentialMode.INSECURE:
        return grpc.aio.insecure_channel(net_address)

    ssl_credentials = grpc.ssl_channel_credentials(
        root_certificates=credential.certificate
    )
    return grpc.aio.secure_channel(net_address, ssl_credentials)
