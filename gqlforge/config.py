"""
Configuration management module using Pydantic Settings.

This module provides type-safe configuration for the GraphQL client. Process
defaults come from environment variables through ``Settings``; a client works
on an immutable ``ClientConfig`` built from them, and per-call overrides are
merged into a new value instead of mutating shared state.
"""

from functools import lru_cache
from typing import Any, Dict, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from gqlforge.constants import (
    AUTHORIZATION_HEADER,
    CONTENT_TYPE_JSON,
    DEFAULT_GRAPHQL_ENDPOINT,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_TIMEOUT_MS,
    MAX_RETRY_ATTEMPTS,
)
from gqlforge.exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden via environment variables with the same name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # GraphQL Endpoint Configuration
    graphql_endpoint: str = Field(
        default=DEFAULT_GRAPHQL_ENDPOINT,
        description="URL of the remote GraphQL endpoint"
    )
    graphql_auth_token: str = Field(
        default="",
        description="Static credential sent in the Authorization header"
    )
    graphql_timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        ge=1,
        le=300000,
        description="Timeout for a single request attempt in milliseconds"
    )
    graphql_retry_attempts: int = Field(
        default=DEFAULT_RETRY_ATTEMPTS,
        ge=0,
        le=MAX_RETRY_ATTEMPTS,
        description="Maximum number of retries after a failed transport attempt"
    )
    graphql_validate_schema: bool = Field(
        default=True,
        description="Type-check queries against the remote contract schema"
    )

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: Literal["structured", "simple"] = Field(
        default="structured",
        description="Log format type"
    )
    sanitize_logs: bool = Field(
        default=True,
        description="Sanitize sensitive information from logs"
    )

    @field_validator("graphql_endpoint")
    @classmethod
    def validate_graphql_endpoint(cls, v: str) -> str:
        """Ensure the endpoint uses http or https."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("GraphQL endpoint must start with http:// or https://")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the process settings, loading them on first use.

    Returns:
        Settings: The cached settings instance
    """
    return Settings()


def default_headers(auth_token: str = "") -> Dict[str, str]:
    """Build the header set sent with every GraphQL request."""
    return {
        "Content-Type": CONTENT_TYPE_JSON,
        AUTHORIZATION_HEADER: auth_token,
        "Accept": CONTENT_TYPE_JSON,
    }


def merge_headers(
    base: Mapping[str, str],
    override: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """
    Merge two header sets, letting ``override`` win.

    HTTP header names are case-insensitive, so a base header is dropped when
    the override carries the same name in any case.
    """
    override = dict(override or {})
    replaced = {str(name).lower() for name in override}
    merged = {name: value for name, value in base.items() if name.lower() not in replaced}
    merged.update(override)
    return merged


class ClientConfig(BaseModel):
    """Immutable configuration for a GraphQL client or a single call."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    endpoint: str = DEFAULT_GRAPHQL_ENDPOINT
    headers: Dict[str, str] = Field(default_factory=default_headers)
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    retry_attempts: int = Field(default=DEFAULT_RETRY_ATTEMPTS, ge=0)
    validate_schema: bool = True

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ClientConfig":
        """
        Build a client configuration from process settings.

        Args:
            settings: Settings to read; defaults to ``get_settings()``

        Returns:
            ClientConfig: Configuration carrying the settings' values
        """
        settings = settings or get_settings()
        return cls(
            endpoint=settings.graphql_endpoint,
            headers=default_headers(settings.graphql_auth_token),
            timeout_ms=settings.graphql_timeout_ms,
            retry_attempts=settings.graphql_retry_attempts,
            validate_schema=settings.graphql_validate_schema,
        )

    def merge(self, override: Optional[Mapping[str, Any]] = None) -> "ClientConfig":
        """
        Return a new configuration with ``override`` applied.

        Headers are merged key by key with the override winning on conflict
        (header names compare case-insensitively);
        every other field present in the override replaces the current value.

        Raises:
            ConfigurationError: If the override has unknown keys or bad values
        """
        if not override:
            return self

        unknown = set(override) - set(type(self).model_fields)
        if unknown:
            raise ConfigurationError(
                f"Unknown client configuration keys: {', '.join(sorted(unknown))}"
            )

        values = self.model_dump()
        values.update({k: v for k, v in override.items() if k != "headers"})
        values["headers"] = merge_headers(self.headers, override.get("headers"))

        try:
            return type(self)(**values)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid client configuration: {e}") from e
