"""
Client Settings - Main Layer

Pydantic Settings for the handler client, read from environment variables,
a .env file and defaults. Secrets may also be provided as files, see
``ttn_handler.shared.env``.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ttn_handler.domain.entities.credentials import CredentialPolicy
from ttn_handler.shared import EnumEnvironment, EnumLogLevel
from ttn_handler.shared.env import load_secret_file_variables


class HandlerSettings(BaseSettings):
    """Handler connection and application identity."""

    app_id: str = Field(default="", description="Application ID")
    access_key: str = Field(
        default="",
        description="Application access key",
        validation_alias=AliasChoices("HANDLER_ACCESS_KEY", "TTN_APP_ACCESS_KEY"),
    )
    net_address: str = Field(
        default="localhost:1904",
        description="Announced network address of the handler",
    )
    certificate: Optional[str] = Field(
        default=None, description="Announced PEM certificate of the handler"
    )
    credential_policy: CredentialPolicy = Field(
        default=CredentialPolicy.VERIFY_WHEN_CERTIFIED,
        description="How the announced certificate selects the channel credential",
    )

    model_config = SettingsConfigDict(
        env_prefix="HANDLER_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Runtime environment"
    )

    handler: HandlerSettings = Field(default_factory=HandlerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Settings factory.

    Resolves ``*_FILE`` secrets first so they are visible to pydantic.
    """
    load_secret_file_variables()
    return AppSettings()
