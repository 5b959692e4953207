"""
HTTP transport for GraphQL requests.

Sends a single logical request to the GraphQL endpoint, retrying transport
failures with exponential backoff. Retry state lives in an ``AttemptContext``
owned by the call, so concurrent requests never share counters or timers.
"""

import asyncio
import time
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx

from gqlforge.config import ClientConfig
from gqlforge.constants import BACKOFF_BASE_MS, BACKOFF_MAX_MS, LOG_COMPONENT
from gqlforge.exceptions import TransportError
from gqlforge.logger import StructuredLogger
from gqlforge.models import GraphQLRequest

SleepFunc = Callable[[float], Awaitable[Any]]


def compute_backoff_ms(retry_count: int) -> int:
    """
    Delay before the given retry, in milliseconds.

    Args:
        retry_count: 1-based number of the retry about to be issued

    Returns:
        int: ``min(1000 * 2**retry_count, 10000)``
    """
    return min(BACKOFF_BASE_MS * (2 ** retry_count), BACKOFF_MAX_MS)


@dataclass
class AttemptContext:
    """Retry bookkeeping for one logical request."""

    max_retries: int
    timeout_ms: int
    retry_count: int = 0
    deadline: Optional[float] = None
    started_at: float = field(default_factory=time.monotonic)

    @property
    def attempt(self) -> int:
        """1-based number of the current attempt."""
        return self.retry_count + 1

    @property
    def can_retry(self) -> bool:
        return self.retry_count < self.max_retries

    def begin_attempt(self) -> None:
        self.deadline = time.monotonic() + self.timeout_ms / 1000

    def next_retry(self) -> int:
        """Advance to the next retry and return its backoff delay in ms."""
        self.retry_count += 1
        return compute_backoff_ms(self.retry_count)


class GraphQLTransport:
    """
    Transport client for a GraphQL endpoint.

    Wraps a reusable ``httpx.AsyncClient``; endpoint, headers and timeout are
    taken from the ``ClientConfig`` of each call.
    """

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        logger: Optional[StructuredLogger] = None,
        sleep: SleepFunc = asyncio.sleep
    ):
        """
        Initialize the transport.

        Args:
            http_client: HTTP client to send requests with; one is created if omitted
            logger: Sink for retry warnings
            sleep: Coroutine function used to wait between retries (seconds)
        """
        self.http_client = http_client or httpx.AsyncClient()
        self.logger = logger or StructuredLogger()
        self._sleep = sleep

    async def send(self, request: GraphQLRequest, config: ClientConfig) -> Dict[str, Any]:
        """
        Send a GraphQL request, retrying transport failures.

        Args:
            request: Query and variables to post
            config: Endpoint, headers, timeout and retry cap for this call

        Returns:
            Dict[str, Any]: The decoded JSON response body

        Raises:
            TransportError: When every attempt failed or the body is not a JSON object
        """
        context = AttemptContext(
            max_retries=config.retry_attempts,
            timeout_ms=config.timeout_ms
        )

        while True:
            try:
                response = await self._send_once(request, config, context)
                break
            except TransportError as e:
                if not context.can_retry:
                    raise

                delay_ms = context.next_retry()
                self.logger.warning(
                    "Retrying GraphQL request",
                    e,
                    component=LOG_COMPONENT,
                    attempt=context.retry_count,
                    delay_ms=delay_ms,
                )
                await self._sleep(delay_ms / 1000)

        return self._decode(response)

    async def _send_once(
        self,
        request: GraphQLRequest,
        config: ClientConfig,
        context: AttemptContext
    ) -> httpx.Response:
        context.begin_attempt()
        try:
            response = await self.http_client.post(
                config.endpoint,
                json=request.model_dump(),
                headers=config.headers,
                timeout=config.timeout_seconds,
            )
            response.raise_for_status()
            return response
        except httpx.TimeoutException as e:
            raise TransportError(
                f"GraphQL request timed out after {config.timeout_ms}ms: {e}"
            ) from e
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"GraphQL endpoint returned HTTP {e.response.status_code}",
                status_code=e.response.status_code
            ) from e
        except httpx.RequestError as e:
            raise TransportError(f"GraphQL request error: {e}") from e

    @staticmethod
    def _decode(response: httpx.Response) -> Dict[str, Any]:
        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(
                "GraphQL response is not valid JSON",
                status_code=response.status_code
            ) from e
        if not isinstance(body, dict):
            raise TransportError(
                "GraphQL response body is not a JSON object",
                status_code=response.status_code
            )
        return body

    async def aclose(self) -> None:
        await self.http_client.aclose()
