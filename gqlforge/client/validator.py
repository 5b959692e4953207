"""
GraphQL query validation.

A query must pass two independent checks before it is sent: a structural
parse, and a validation pass against the remote contract schema.
"""

from typing import List, Optional

from graphql import (
    DocumentNode,
    ExecutableDefinitionsRule,
    GraphQLError,
    KnownFragmentNamesRule,
    LoneAnonymousOperationRule,
    NoFragmentCyclesRule,
    NoUndefinedVariablesRule,
    NoUnusedFragmentsRule,
    NoUnusedVariablesRule,
    UniqueArgumentNamesRule,
    UniqueFragmentNamesRule,
    UniqueOperationNamesRule,
    UniqueVariableNamesRule,
    parse,
    specified_rules,
    validate,
)

from gqlforge.constants import LOG_COMPONENT
from gqlforge.contract import get_remote_schema
from gqlforge.exceptions import ValidationError
from gqlforge.logger import StructuredLogger

# Rules that only look at the document itself
DOCUMENT_RULES = (
    ExecutableDefinitionsRule,
    UniqueOperationNamesRule,
    LoneAnonymousOperationRule,
    UniqueFragmentNamesRule,
    KnownFragmentNamesRule,
    NoUnusedFragmentsRule,
    NoFragmentCyclesRule,
    UniqueVariableNamesRule,
    NoUndefinedVariablesRule,
    NoUnusedVariablesRule,
    UniqueArgumentNamesRule,
)


def _format_errors(errors: List[GraphQLError]) -> str:
    return "; ".join(error.message for error in errors)


def parse_document(query: str) -> DocumentNode:
    """
    Parse a query string into a GraphQL document.

    Raises:
        ValidationError: If the string is not a syntactically valid document
    """
    if not isinstance(query, str):
        raise ValidationError(f"GraphQL query must be a string, got {type(query).__name__}")
    try:
        return parse(query)
    except GraphQLError as e:
        raise ValidationError(f"Syntax error in GraphQL query: {e.message}") from e


def check_document(document: DocumentNode, type_check: bool = True) -> None:
    """
    Validate a parsed document against the remote contract schema.

    Args:
        document: Parsed GraphQL document
        type_check: Also check fields, arguments and types against the contract

    Raises:
        ValidationError: If any validation rule reports an error
    """
    rules = specified_rules if type_check else DOCUMENT_RULES
    errors = validate(get_remote_schema(), document, rules)
    if errors:
        raise ValidationError(f"Invalid GraphQL query: {_format_errors(errors)}")


def validate_query(
    query: str,
    type_check: bool = True,
    logger: Optional[StructuredLogger] = None
) -> DocumentNode:
    """
    Validate a GraphQL query string before transport.

    Args:
        query: GraphQL query string
        type_check: Type-check against the remote contract in the second pass
        logger: Sink for the validation diagnostic

    Returns:
        DocumentNode: The parsed document

    Raises:
        ValidationError: If either validation pass fails
    """
    logger = logger or StructuredLogger()
    try:
        document = parse_document(query)
        check_document(document, type_check=type_check)
    except ValidationError as e:
        logger.error(
            "GraphQL query validation failed",
            e,
            component=LOG_COMPONENT,
            query=query,
        )
        raise

    logger.debug(
        "GraphQL query validation successful",
        component=LOG_COMPONENT,
        query_length=len(query),
    )
    return document
