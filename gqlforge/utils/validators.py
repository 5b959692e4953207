"""Domain validation for mutation inputs and query variables."""

import json
from typing import Any, Callable, Dict, List, Mapping, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from gqlforge.constants import TEST_DATA_SCOPES
from gqlforge.exceptions import ValidationError
from gqlforge.models import (
    TestDataInput,
    TestFlowStatus,
    TestFlowStatusUpdate,
    TestResultInput,
    TestResultStatus,
)

M = TypeVar("M", bound=BaseModel)


def _format_errors(error: PydanticValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "payload"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def validate_model(model: Type[M], payload: Any, label: str) -> M:
    """
    Validate a payload against a pydantic model.

    Args:
        model: Model class describing the payload
        payload: Mapping to validate
        label: Human-readable payload name used in error messages

    Returns:
        The validated model instance

    Raises:
        ValidationError: If the payload is not a mapping or fails the model
    """
    if not isinstance(payload, Mapping):
        raise ValidationError(f"Invalid {label}: expected an object")
    try:
        return model.model_validate(dict(payload))
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid {label}: {_format_errors(e)}") from e


def validate_test_data(payload: Mapping[str, Any]) -> TestDataInput:
    """Validate a ``TestDataInput`` payload."""
    return validate_model(TestDataInput, payload, "test data")


def validate_test_flow_update(payload: Mapping[str, Any]) -> TestFlowStatusUpdate:
    """Validate the arguments of a test flow status update."""
    return validate_model(TestFlowStatusUpdate, payload, "test flow update")


def validate_test_result(payload: Mapping[str, Any]) -> TestResultInput:
    """Validate a ``TestResultInput`` payload."""
    return validate_model(TestResultInput, payload, "test result")


def _require_identifier(name: str, value: Any) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Invalid variable '{name}': expected a non-empty ID")


def _status_choices(variables: Mapping[str, Any]) -> List[str]:
    """
    Statuses allowed for the operation the variables belong to.

    ``createTestResult`` carries a ``flow_id`` and takes a result status;
    ``updateTestFlow`` carries the flow ``id`` and takes a flow status.
    """
    if "flow_id" in variables:
        return [s.value for s in TestResultStatus]
    if "id" in variables:
        return [s.value for s in TestFlowStatus]
    return [s.value for s in TestFlowStatus] + [s.value for s in TestResultStatus]


def _require_status(name: str, value: Any, allowed: List[str]) -> None:
    if value not in allowed:
        raise ValidationError(
            f"Invalid variable '{name}': must be one of {', '.join(allowed)}"
        )


def _require_non_negative_int(name: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(f"Invalid variable '{name}': expected a non-negative integer")


def _require_non_negative_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        raise ValidationError(f"Invalid variable '{name}': expected a non-negative number")


def _require_scope(name: str, value: Any) -> None:
    if value is not None and value not in TEST_DATA_SCOPES:
        raise ValidationError(
            f"Invalid variable '{name}': must be one of {', '.join(TEST_DATA_SCOPES)}"
        )


def _require_test_data_input(name: str, value: Any) -> None:
    validate_test_data(value)


VARIABLE_RULES: Dict[str, Callable[[str, Any], None]] = {
    "input": _require_test_data_input,
    "id": _require_identifier,
    "flow_id": _require_identifier,
    "test_data_id": _require_identifier,
    "duration_ms": _require_non_negative_number,
    "scope": _require_scope,
    "limit": _require_non_negative_int,
    "offset": _require_non_negative_int,
}


def validate_variables(variables: Mapping[str, Any]) -> bool:
    """
    Validate a GraphQL variables payload.

    Known test management variables are checked against their domain rules;
    any other variable only needs to be JSON serializable.

    Args:
        variables: Variables mapping sent with a query

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if not isinstance(variables, Mapping):
        raise ValidationError("GraphQL variables must be an object")

    for name, value in variables.items():
        if not isinstance(name, str) or not name:
            raise ValidationError(f"Invalid variable name: {name!r}")

        if name == "status":
            _require_status(name, value, _status_choices(variables))
            continue

        rule = VARIABLE_RULES.get(name)
        if rule is not None:
            rule(name, value)

    try:
        json.dumps(dict(variables))
    except (TypeError, ValueError) as e:
        raise ValidationError(f"GraphQL variables are not JSON serializable: {e}") from e

    return True
