"""
Main module - Composition Root Layer

Settings and dependency wiring for applications embedding the handler
client.
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
