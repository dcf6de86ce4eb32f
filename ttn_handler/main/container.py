"""
Dependency container injection module - Main Layer

Composition root wiring settings, the announcement and the application
gateway together.
"""

from dependency_injector import containers, providers

from ttn_handler.domain.entities.credentials import Announcement
from ttn_handler.infrastructure.gateways.application_gateway import (
    ApplicationGateway,
)
from ttn_handler.shared import get_logger, update_logging_from_settings

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    config = providers.Configuration()

    announcement = providers.Singleton(
        Announcement,
        net_address=config.handler.net_address,
        certificate=config.handler.certificate,
    )

    application_gateway = providers.Singleton(
        ApplicationGateway,
        app_id=config.handler.app_id,
        app_access_key=config.handler.access_key,
        announcement=announcement,
        credential_policy=config.handler.credential_policy,
    )


_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize the global container and logging from ``settings``."""

    global _app_container

    update_logging_from_settings(settings)

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container

    logger.info(
        "container.initialized",
        app_id=settings.handler.app_id,
        net_address=settings.handler.net_address,
    )
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container
