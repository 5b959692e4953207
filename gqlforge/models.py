"""
Data models for the GraphQL wire contract.

Request/response envelopes used by the client, and the test management
entities and mutation inputs exchanged with the remote endpoint.
"""

import json
import re
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

import jsonschema
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from gqlforge.constants import NAME_PATTERN, TEST_DATA_SCOPES
from gqlforge.exceptions import ApplicationError

T = TypeVar("T")


class TestFlowStatus(str, Enum):
    """Status of a test flow execution."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class TestResultStatus(str, Enum):
    """Status of a test execution result."""

    PASS = "pass"
    FAIL = "fail"
    ERROR = "error"
    SKIPPED = "skipped"


class GraphQLRequest(BaseModel):
    """Body of a single GraphQL POST."""

    query: str
    variables: Dict[str, Any] = Field(default_factory=dict)


class GraphQLErrorEntry(BaseModel):
    """One entry of a GraphQL ``errors`` list."""

    model_config = ConfigDict(extra="allow")

    message: str
    path: List[Union[str, int]] = Field(default_factory=list)

    @field_validator("path", mode="before")
    @classmethod
    def null_path_as_empty(cls, v: Any) -> Any:
        # Errors not tied to a field may report "path": null
        return [] if v is None else v


class GraphQLResponse(BaseModel, Generic[T]):
    """
    GraphQL response envelope.

    ``data`` and ``errors`` may both be set when the server reports a partial
    success.
    """

    data: Optional[T] = None
    errors: Optional[List[GraphQLErrorEntry]] = None

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def raise_for_errors(self) -> "GraphQLResponse[T]":
        """
        Raise ``ApplicationError`` if the response carries GraphQL errors.

        Returns:
            The response itself when there are no errors
        """
        if self.errors:
            raise ApplicationError(
                "; ".join(entry.message for entry in self.errors),
                errors=[entry.model_dump() for entry in self.errors],
            )
        return self


# Entities

class TestData(BaseModel):
    """Test data entity with validation schema."""

    id: str
    name: str
    scope: str
    schema_: str = Field(alias="schema")
    valid_from: str
    valid_to: str
    created_at: str
    updated_at: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class TestFlow(BaseModel):
    """Test flow configuration and execution details."""

    id: str
    name: str
    flow_type: str
    test_data_id: str
    config: str
    status: TestFlowStatus
    created_at: str
    updated_at: Optional[str] = None


class TestResult(BaseModel):
    """Test execution result details."""

    id: str
    flow_id: str
    status: TestResultStatus
    duration_ms: float
    error: Optional[str] = None
    created_at: str


# Mutation inputs

class TestDataInput(BaseModel):
    """Input for creating test data."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    scope: str
    schema_: str = Field(alias="schema")
    valid_from: datetime
    valid_to: datetime

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not re.match(NAME_PATTERN, v):
            raise ValueError(
                "name must be 3-100 characters and contain only alphanumeric "
                "characters, spaces, hyphens, and underscores"
            )
        return v

    @field_validator("scope")
    @classmethod
    def validate_scope(cls, v: str) -> str:
        if v not in TEST_DATA_SCOPES:
            raise ValueError(f"scope must be one of: {', '.join(TEST_DATA_SCOPES)}")
        return v

    @field_validator("schema_")
    @classmethod
    def validate_schema(cls, v: str) -> str:
        """The schema is a JSON-encoded JSON Schema document."""
        try:
            document = json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f"schema is not valid JSON: {e.msg}")
        if not isinstance(document, dict):
            raise ValueError("schema must be a JSON object")
        try:
            jsonschema.Draft7Validator.check_schema(document)
        except jsonschema.SchemaError as e:
            raise ValueError(f"schema is not a valid JSON Schema: {e.message}")
        return v

    @model_validator(mode="after")
    def validate_window(self) -> "TestDataInput":
        try:
            ordered = self.valid_to > self.valid_from
        except TypeError:
            raise ValueError("valid_from and valid_to must both carry a timezone or neither")
        if not ordered:
            raise ValueError("valid_to must be after valid_from")
        return self


class TestFlowStatusUpdate(BaseModel):
    """Arguments of the ``updateTestFlow`` mutation."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    status: TestFlowStatus


class TestResultInput(BaseModel):
    """Arguments of the ``createTestResult`` mutation."""

    model_config = ConfigDict(extra="forbid")

    flow_id: str = Field(min_length=1)
    status: TestResultStatus
    duration_ms: float = Field(ge=0)
    error: Optional[str] = None
