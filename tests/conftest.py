"""
Pytest configuration and shared fixtures for the gqlforge test suite.

This module provides:
- A recording structured logger
- A recording sleep function so retry backoff never blocks
- A scripted mock GraphQL endpoint built on httpx.MockTransport
"""

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from gqlforge.client import GraphQLClient
from gqlforge.config import ClientConfig


class RecordingLogger:
    """Structured logger double that keeps every entry in memory."""

    def __init__(self):
        self.entries: List[Dict[str, Any]] = []

    def _record(self, level, message, error=None, /, **context):
        self.entries.append(
            {"level": level, "message": message, "error": error, "context": context}
        )

    def debug(self, message, error=None, /, **context):
        self._record("debug", message, error, **context)

    def info(self, message, error=None, /, **context):
        self._record("info", message, error, **context)

    def warning(self, message, error=None, /, **context):
        self._record("warning", message, error, **context)

    def error(self, message, error=None, /, **context):
        self._record("error", message, error, **context)

    def by_message(self, message: str) -> List[Dict[str, Any]]:
        return [entry for entry in self.entries if entry["message"] == message]


class RecordingSleep:
    """Async sleep double recording requested delays in seconds."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


class MockEndpoint:
    """
    Scripted GraphQL endpoint.

    Each queued step is either an ``httpx.Response`` or an exception class /
    instance raised for that request. The last step repeats once the script
    runs out.
    """

    def __init__(self):
        self.steps: List[Any] = []
        self.requests: List[httpx.Request] = []

    def respond(self, body: Optional[Dict[str, Any]] = None, status_code: int = 200, **kwargs):
        self.steps.append(httpx.Response(status_code, json=body, **kwargs))
        return self

    def fail(self, exc: Any = httpx.ConnectError):
        self.steps.append(exc)
        return self

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def sent_bodies(self) -> List[Dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.steps:
            raise AssertionError("MockEndpoint has no scripted response")
        step = self.steps.pop(0) if len(self.steps) > 1 else self.steps[0]
        if isinstance(step, httpx.Response):
            return step
        if isinstance(step, type):
            raise step("simulated failure", request=request)
        raise step


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def endpoint() -> MockEndpoint:
    return MockEndpoint()


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(
        endpoint="https://graphql.test/graphql",
        headers={
            "Content-Type": "application/json",
            "Authorization": "token-123",
            "Accept": "application/json",
        },
        timeout_ms=5000,
        retry_attempts=3,
    )


@pytest.fixture
def client(client_config, endpoint, recording_logger, recording_sleep) -> GraphQLClient:
    return GraphQLClient(
        client_config,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(endpoint.handler)),
        logger=recording_logger,
        sleep=recording_sleep,
    )
