"""
Transport credentials - Domain Layer

Which trust configuration a connection uses is decided once, from the
announcement of the handler, by an explicit ``CredentialPolicy``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ttn_handler.domain.entities.errors import ApplicationValidationError


@dataclass(frozen=True, slots=True)
class Announcement:
    """Resolved network location of a handler, as handed out by discovery."""

    net_address: str
    certificate: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.net_address:
            raise ApplicationValidationError(
                "Announcement has no network address",
                details={"certificate": bool(self.certificate)},
            )

    @property
    def has_certificate(self) -> bool:
        return bool(self.certificate)


class CredentialMode(str, Enum):
    INSECURE = "insecure"
    CERTIFICATE = "certificate"


class CredentialPolicy(str, Enum):
    """
    Rule mapping an announcement to a credential mode.

    VERIFY_WHEN_CERTIFIED: a certificate selects a verified TLS channel,
    no certificate selects a plaintext channel.

    LEGACY_INVERTED: the behaviour of earlier client releases, where a
    certificate selected the plaintext channel and its absence selected TLS
    against the system roots. Only for handlers deployed against that client.
    """

    VERIFY_WHEN_CERTIFIED = "verify_when_certified"
    LEGACY_INVERTED = "legacy_inverted"


@dataclass(frozen=True, slots=True)
class Credential:
    mode: CredentialMode
    certificate: Optional[bytes] = None

    @property
    def is_secure(self) -> bool:
        return self.mode is CredentialMode.CERTIFICATE


def select_credential(
    announcement: Announcement,
    policy: CredentialPolicy = CredentialPolicy.VERIFY_WHEN_CERTIFIED,
) -> Credential:
    """Pick the credential for ``announcement`` according to ``policy``."""
    policy = CredentialPolicy(policy)
    certificate = (
        announcement.certificate.encode("utf-8") if announcement.certificate else None
    )

    if policy is CredentialPolicy.LEGACY_INVERTED:
        if announcement.has_certificate:
            return Credential(mode=CredentialMode.INSECURE)
        return Credential(mode=CredentialMode.CERTIFICATE, certificate=None)

    if announcement.has_certificate:
        return Credential(mode=CredentialMode.CERTIFICATE, certificate=certificate)
    return Credential(mode=CredentialMode.INSECURE)
