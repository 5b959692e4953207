"""Tests for domain validation of mutation inputs and query variables."""

import json

import pytest

from gqlforge.exceptions import ValidationError
from gqlforge.utils.validators import (
    validate_test_data,
    validate_test_flow_update,
    validate_test_result,
    validate_variables,
)


def make_test_data(**overrides):
    payload = {
        "name": "Checkout flow data",
        "scope": "integration",
        "schema": json.dumps({"type": "object", "properties": {"sku": {"type": "string"}}}),
        "valid_from": "2026-01-01T00:00:00Z",
        "valid_to": "2026-12-31T00:00:00Z",
    }
    payload.update(overrides)
    return payload


class TestValidateTestData:

    def test_valid_payload(self):
        result = validate_test_data(make_test_data())
        assert result.name == "Checkout flow data"

    def test_missing_name(self):
        payload = make_test_data()
        del payload["name"]

        with pytest.raises(ValidationError, match="name"):
            validate_test_data(payload)

    @pytest.mark.parametrize("name", ["ab", "bad/name!", "x" * 101])
    def test_invalid_name(self, name):
        with pytest.raises(ValidationError, match="name"):
            validate_test_data(make_test_data(name=name))

    def test_unknown_scope(self):
        with pytest.raises(ValidationError, match="scope"):
            validate_test_data(make_test_data(scope="smoke"))

    def test_schema_must_be_json(self):
        with pytest.raises(ValidationError, match="schema"):
            validate_test_data(make_test_data(schema="{not json"))

    def test_schema_must_be_json_schema(self):
        with pytest.raises(ValidationError, match="JSON Schema"):
            validate_test_data(make_test_data(schema=json.dumps({"type": 12})))

    def test_validity_window_order(self):
        with pytest.raises(ValidationError, match="valid_to must be after valid_from"):
            validate_test_data(make_test_data(valid_to="2025-01-01T00:00:00Z"))

    def test_mixed_timezones_rejected(self):
        with pytest.raises(ValidationError, match="timezone"):
            validate_test_data(make_test_data(valid_to="2026-12-31T00:00:00"))

    def test_not_a_mapping(self):
        with pytest.raises(ValidationError, match="expected an object"):
            validate_test_data(["name"])


class TestValidateMutationArguments:

    def test_flow_update(self):
        update = validate_test_flow_update({"id": "flow-1", "status": "running"})
        assert update.status.value == "running"

    def test_flow_update_unknown_status(self):
        with pytest.raises(ValidationError, match="status"):
            validate_test_flow_update({"id": "flow-1", "status": "paused"})

    def test_result(self):
        result = validate_test_result({"flow_id": "flow-1", "status": "pass", "duration_ms": 12.5})
        assert result.error is None

    def test_result_negative_duration(self):
        with pytest.raises(ValidationError, match="duration_ms"):
            validate_test_result({"flow_id": "flow-1", "status": "fail", "duration_ms": -1})


class TestValidateVariables:

    def test_known_variables(self):
        assert validate_variables({"scope": "unit", "limit": 10, "offset": 0}) is True
        assert validate_variables({"flow_id": "flow-1"}) is True
        assert validate_variables({"input": make_test_data()}) is True

    def test_unknown_variables_only_need_json(self):
        assert validate_variables({"custom": {"nested": [1, 2, 3]}}) is True

    def test_not_json_serializable(self):
        with pytest.raises(ValidationError, match="JSON serializable"):
            validate_variables({"custom": object()})

    def test_empty_identifier(self):
        with pytest.raises(ValidationError, match="'id'"):
            validate_variables({"id": "  "})

    def test_status_matches_operation(self):
        assert validate_variables({"id": "flow-1", "status": "running"}) is True
        assert validate_variables({"flow_id": "flow-1", "status": "pass", "duration_ms": 3}) is True

    @pytest.mark.parametrize("variables", [
        {"id": "flow-1", "status": "pass"},
        {"flow_id": "flow-1", "status": "running", "duration_ms": 3},
        {"status": "paused"},
    ])
    def test_status_from_other_operation_rejected(self, variables):
        with pytest.raises(ValidationError, match="'status'"):
            validate_variables(variables)

    def test_negative_limit(self):
        with pytest.raises(ValidationError, match="'limit'"):
            validate_variables({"limit": -5})

    def test_invalid_input(self):
        payload = make_test_data()
        del payload["name"]
        with pytest.raises(ValidationError, match="Invalid test data"):
            validate_variables({"input": payload})

    def test_not_a_mapping(self):
        with pytest.raises(ValidationError):
            validate_variables([("id", "1")])
