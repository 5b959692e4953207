"""
gqlforge - GraphQL client layer for test management services.

This package validates and executes queries against a remote GraphQL endpoint
with retrying transport and structured logging, and exposes a test management
schema whose field resolvers dispatch through that client.
"""

from gqlforge._version import __version__, __version_info__
from gqlforge.client import GraphQLClient
from gqlforge.config import ClientConfig, Settings, get_settings
from gqlforge.exceptions import (
    ApplicationError,
    ConfigurationError,
    GQLForgeError,
    OperationError,
    TransportError,
    ValidationError,
)
from gqlforge.models import GraphQLResponse
from gqlforge.schema import build_schema

__all__ = [
    "GraphQLClient",
    "ClientConfig",
    "Settings",
    "get_settings",
    "GraphQLResponse",
    "build_schema",
    "GQLForgeError",
    "ConfigurationError",
    "ValidationError",
    "TransportError",
    "ApplicationError",
    "OperationError",
    "__version__",
    "__version_info__",
]
