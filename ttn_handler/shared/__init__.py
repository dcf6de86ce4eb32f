"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the client.

Its primary responsibilities include:
- Defining cross-layer constants (service names, metadata keys, log levels)
- Configuring structured logging
- Resolving secrets mounted as files

It must not depend on Infrastructure or the composition root.
"""

from .consts import (
    ACCESS_KEY_METADATA,
    APPLICATION_MANAGER_SERVICE,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "ACCESS_KEY_METADATA",
    "APPLICATION_MANAGER_SERVICE",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
