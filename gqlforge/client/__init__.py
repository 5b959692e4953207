"""GraphQL client: query validation, retrying transport and request execution."""

from gqlforge.client.executor import GraphQLClient
from gqlforge.client.transport import AttemptContext, GraphQLTransport, compute_backoff_ms
from gqlforge.client.validator import validate_query

__all__ = [
    "GraphQLClient",
    "GraphQLTransport",
    "AttemptContext",
    "compute_backoff_ms",
    "validate_query",
]
