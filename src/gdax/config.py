"""
GDAX client configuration using Pydantic Settings.

This module provides configuration management for the client, allowing
environment-based configuration with type validation and defaults.
Credentials are loaded either from the environment or from a JSON key file.
"""

import json
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.gdax.errors import GdaxAuthenticationError

SANDBOX_ENDPOINT = "https://api-public.sandbox.gdax.com"
FEED_URL = "wss://ws-feed.gdax.com"


class ConnectionConfig(BaseSettings):
    """REST and websocket connection configuration."""

    model_config = SettingsConfigDict(env_prefix="GDAX_CONNECTION_")

    endpoint: str = Field(default=SANDBOX_ENDPOINT, description="REST API base URL")
    feed_url: str = Field(default=FEED_URL, description="Websocket feed URL")
    timeout: float = Field(
        default=30.0,
        ge=1.0,
        le=300.0,
        description="HTTP request timeout in seconds",
    )


class Credentials(BaseSettings):
    """
    API credentials.

    Read from the PUBLIC_KEY, PRIVATE_KEY and PASSPHRASE environment
    variables, or from a key file with ``public_api``, ``private_api`` and
    ``passphrase`` entries.
    """

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    public_key: str = Field(
        default="", validation_alias=AliasChoices("public_key", "public_api")
    )
    private_key: str = Field(
        default="",
        validation_alias=AliasChoices("private_key", "private_api"),
        description="Base64-encoded API secret",
    )
    passphrase: str = Field(default="")

    @classmethod
    def from_file(cls, path: str | Path) -> "Credentials":
        """
        Load credentials from a JSON key file.

        Args:
            path: Path to the key file

        Returns:
            Credentials populated from the file

        Raises:
            GdaxAuthenticationError: If the file is missing or not a JSON object

        """
        try:
            data = json.loads(Path(path).read_text())
        except (OSError, json.JSONDecodeError) as e:
            raise GdaxAuthenticationError(f"Cannot read key file {path}: {e}") from e
        if not isinstance(data, dict):
            raise GdaxAuthenticationError(f"Key file {path} is not a JSON object")
        return cls(**data)


class GdaxConfig(BaseSettings):
    """Root configuration combining all sub-configs."""

    model_config = SettingsConfigDict(env_prefix="GDAX_")

    connection: ConnectionConfig = Field(default_factory=ConnectionConfig)

    # Global settings
    debug: bool = Field(
        default=False, description="Log at DEBUG regardless of log_level"
    )
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )

    @property
    def effective_log_level(self) -> str:
        """Get the level to configure logging with."""
        return "DEBUG" if self.debug else self.log_level

    @classmethod
    def from_env(cls) -> "GdaxConfig":
        """
        Load configuration from environment variables.

        Returns:
            Configured GdaxConfig instance

        """
        return cls(connection=ConnectionConfig())


# Global config instance
config = GdaxConfig.from_env()
