"""
Domain Entities Package

Plain records exchanged with the handler and the rules that build requests
from them.
"""

from .application import (
    PAYLOAD_FUNCTION_FIELDS,
    Application,
    ApplicationField,
    ApplicationUpdate,
    FieldUpdate,
    PayloadFormat,
    PayloadFunctions,
)
from .credentials import (
    Announcement,
    Credential,
    CredentialMode,
    CredentialPolicy,
    select_credential,
)
from .device import Device
from .errors import (
    ApplicationValidationError,
    DomainError,
    OperationNotSpecifiedError,
)

__all__ = [
    "Application",
    "ApplicationField",
    "ApplicationUpdate",
    "FieldUpdate",
    "PayloadFormat",
    "PayloadFunctions",
    "PAYLOAD_FUNCTION_FIELDS",
    "Announcement",
    "Credential",
    "CredentialMode",
    "CredentialPolicy",
    "select_credential",
    "Device",
    "DomainError",
    "ApplicationValidationError",
    "OperationNotSpecifiedError",
]
