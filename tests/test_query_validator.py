"""Tests for GraphQL query validation."""

import pytest
from graphql import print_ast

from gqlforge.client.validator import validate_query
from gqlforge.exceptions import ValidationError
from gqlforge.schema import documents


class TestValidateQuery:

    def test_valid_query_returns_document(self, recording_logger):
        document = validate_query("query { testData { id } }", logger=recording_logger)

        assert document.definitions[0].operation.value == "query"
        entry = recording_logger.by_message("GraphQL query validation successful")[0]
        assert entry["level"] == "debug"
        assert entry["context"]["query_length"] == len("query { testData { id } }")

    @pytest.mark.parametrize("query", [
        "",
        "query {",
        "query { testData { id }",
        "not graphql at all",
        "mutation { createTestData(input: ) { id } }",
    ])
    def test_syntax_errors(self, query, recording_logger):
        with pytest.raises(ValidationError, match="Syntax error"):
            validate_query(query, logger=recording_logger)

        entry = recording_logger.by_message("GraphQL query validation failed")[0]
        assert entry["level"] == "error"
        assert entry["context"]["query"] == query

    def test_non_string_query(self, recording_logger):
        with pytest.raises(ValidationError, match="must be a string"):
            validate_query(None, logger=recording_logger)

    def test_unknown_field_fails_type_check(self, recording_logger):
        with pytest.raises(ValidationError, match="unknownField"):
            validate_query("query { unknownField }", logger=recording_logger)

    def test_unknown_field_allowed_without_type_check(self, recording_logger):
        validate_query("query { unknownField }", type_check=False, logger=recording_logger)

    def test_document_rules_always_apply(self, recording_logger):
        query = "query Q($id: ID!) { other }"
        with pytest.raises(ValidationError, match=r"\$id"):
            validate_query(query, type_check=False, logger=recording_logger)

    def test_schema_definitions_rejected(self, recording_logger):
        with pytest.raises(ValidationError):
            validate_query("type Foo { id: ID }", type_check=False, logger=recording_logger)

    @pytest.mark.parametrize("query", [
        documents.GET_TEST_DATA,
        documents.GET_TEST_FLOW,
        documents.GET_TEST_RESULTS,
        documents.CREATE_TEST_DATA,
        documents.UPDATE_TEST_FLOW,
        documents.CREATE_TEST_RESULT,
    ])
    def test_resolver_documents_match_contract(self, query, recording_logger):
        validate_query(query, logger=recording_logger)

    def test_same_input_same_outcome(self, recording_logger):
        query = "query { testFlow(id: \"1\") { id status } }"
        first = validate_query(query, logger=recording_logger)
        second = validate_query(query, logger=recording_logger)
        assert print_ast(first) == print_ast(second)
