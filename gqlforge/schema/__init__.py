"""Test management GraphQL schema and field resolvers."""

from gqlforge.schema.builder import build_schema
from gqlforge.contract import REMOTE_SCHEMA_SDL, get_remote_schema
from gqlforge.schema.resolvers import TestManagementResolvers

__all__ = [
    "build_schema",
    "TestManagementResolvers",
    "REMOTE_SCHEMA_SDL",
    "get_remote_schema",
]
