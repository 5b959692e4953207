"""
GraphQL request executor.

Orchestrates query validation, variable validation and transport for a single
GraphQL operation, and normalizes every terminal failure into an
``OperationError``.
"""

import asyncio
from typing import Any, Callable, Mapping, Optional, Type

import httpx

from gqlforge.client.transport import GraphQLTransport, SleepFunc
from gqlforge.client.validator import validate_query
from gqlforge.config import ClientConfig
from gqlforge.constants import LOG_COMPONENT
from gqlforge.exceptions import ApplicationError, OperationError
from gqlforge.logger import StructuredLogger
from gqlforge.models import GraphQLRequest, GraphQLResponse
from gqlforge.utils.validators import validate_variables

VariablesValidator = Callable[[Mapping[str, Any]], Any]


class GraphQLClient:
    """
    Client for executing queries and mutations against a GraphQL endpoint.

    The client holds its default configuration and one reusable HTTP client.
    Both are shared read-only between concurrent calls; every call merges its
    own overrides into a fresh configuration.

    Usage:
        async with GraphQLClient(ClientConfig(endpoint="https://api.example.com/graphql")) as client:
            response = await client.execute_query("query { testData { id } }")
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        logger: Optional[StructuredLogger] = None,
        variables_validator: VariablesValidator = validate_variables,
        sleep: SleepFunc = asyncio.sleep
    ):
        """
        Initialize the client.

        Args:
            config: Default configuration; built from environment settings if omitted
            http_client: HTTP client used for every request
            logger: Structured log sink
            variables_validator: Domain validator run on non-empty variables
            sleep: Coroutine function used for retry backoff
        """
        self.config = config or ClientConfig.from_settings()
        self.logger = logger or StructuredLogger()
        self.variables_validator = variables_validator
        self.transport = GraphQLTransport(
            http_client=http_client or httpx.AsyncClient(
                headers=self.config.headers,
                timeout=httpx.Timeout(self.config.timeout_seconds)
            ),
            logger=self.logger,
            sleep=sleep,
        )

    async def execute_query(
        self,
        query: str,
        variables: Optional[Mapping[str, Any]] = None,
        config_override: Optional[Mapping[str, Any]] = None,
        data_type: Optional[Type[Any]] = None
    ) -> GraphQLResponse[Any]:
        """
        Execute a GraphQL query or mutation.

        Args:
            query: GraphQL document string
            variables: Variables for the operation
            config_override: Partial configuration merged onto the client default
            data_type: Optional type the ``data`` payload is parsed into

        Returns:
            GraphQLResponse: The response, including any GraphQL errors

        Raises:
            OperationError: If validation fails, retries are exhausted, or
                anything else goes wrong
        """
        try:
            variables = dict(variables or {})
            config = self.config.merge(config_override)

            validate_query(query, type_check=config.validate_schema, logger=self.logger)

            if variables:
                self.variables_validator(variables)

            self.logger.info(
                "Executing GraphQL operation",
                component=LOG_COMPONENT,
                endpoint=config.endpoint,
                variables_present=bool(variables),
            )

            body = await self.transport.send(
                GraphQLRequest(query=query, variables=variables),
                config
            )

            response_model = GraphQLResponse[data_type] if data_type else GraphQLResponse[Any]
            response = response_model.model_validate(body)

            if response.errors:
                self.logger.error(
                    "GraphQL operation returned errors",
                    ApplicationError(response.errors[0].message),
                    component=LOG_COMPONENT,
                    errors=[entry.model_dump() for entry in response.errors],
                )

            self.logger.info(
                "GraphQL operation completed",
                component=LOG_COMPONENT,
                has_data=response.data is not None,
                has_errors=response.errors is not None,
            )

            return response

        except Exception as e:
            self.logger.error(
                "GraphQL operation failed",
                e,
                component=LOG_COMPONENT,
                query=query,
                variables=variables,
            )
            raise OperationError(f"GraphQL operation failed: {e}") from e

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.transport.aclose()

    async def __aenter__(self) -> "GraphQLClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
