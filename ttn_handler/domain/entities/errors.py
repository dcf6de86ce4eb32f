"""
Domain Errors

Errors raised by the client itself. Transport and remote failures are not
wrapped: they reach the caller as the original ``grpc`` exception.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ApplicationValidationError(DomainError):
    """Raised when an update or announcement cannot be turned into a request."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class OperationNotSpecifiedError(DomainError, NotImplementedError):
    """Raised by operations whose service contract has not been defined yet."""

    def __init__(self, operation: str, details: Optional[Dict[str, Any]] = None):
        self.operation = operation
        message = (
            f"Operation '{operation}' has no agreed request/response contract "
            "with the handler service"
        )
        super().__init__(message, details)
