"""
GraphQL object, input and enum types for the test management domain.
"""

from graphql import (
    GraphQLEnumType,
    GraphQLEnumValue,
    GraphQLField,
    GraphQLFloat,
    GraphQLID,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLString,
)

from gqlforge.models import TestFlowStatus, TestResultStatus


def _enum_type(name: str, description: str, enum) -> GraphQLEnumType:
    # Plain string values so resolver arguments serialize as-is
    return GraphQLEnumType(
        name,
        {member.name: GraphQLEnumValue(member.value) for member in enum},
        description=description,
    )


TestFlowStatusEnum = _enum_type(
    "TestFlowStatus", "Status of a test flow execution", TestFlowStatus
)

TestResultStatusEnum = _enum_type(
    "TestResultStatus", "Status of a test execution result", TestResultStatus
)

TestDataType = GraphQLObjectType(
    "TestData",
    lambda: {
        "id": GraphQLField(GraphQLNonNull(GraphQLID)),
        "name": GraphQLField(GraphQLNonNull(GraphQLString)),
        "scope": GraphQLField(GraphQLNonNull(GraphQLString)),
        "schema": GraphQLField(GraphQLNonNull(GraphQLString)),
        "valid_from": GraphQLField(GraphQLNonNull(GraphQLString)),
        "valid_to": GraphQLField(GraphQLNonNull(GraphQLString)),
        "created_at": GraphQLField(GraphQLNonNull(GraphQLString)),
        "updated_at": GraphQLField(GraphQLString),
    },
    description="Test data entity with validation schema",
)

TestFlowType = GraphQLObjectType(
    "TestFlow",
    lambda: {
        "id": GraphQLField(GraphQLNonNull(GraphQLID)),
        "name": GraphQLField(GraphQLNonNull(GraphQLString)),
        "flow_type": GraphQLField(GraphQLNonNull(GraphQLString)),
        "test_data_id": GraphQLField(GraphQLNonNull(GraphQLID)),
        "config": GraphQLField(GraphQLNonNull(GraphQLString)),
        "status": GraphQLField(GraphQLNonNull(TestFlowStatusEnum)),
        "created_at": GraphQLField(GraphQLNonNull(GraphQLString)),
        "updated_at": GraphQLField(GraphQLString),
    },
    description="Test flow configuration and execution details",
)

TestResultType = GraphQLObjectType(
    "TestResult",
    lambda: {
        "id": GraphQLField(GraphQLNonNull(GraphQLID)),
        "flow_id": GraphQLField(GraphQLNonNull(GraphQLID)),
        "status": GraphQLField(GraphQLNonNull(TestResultStatusEnum)),
        "duration_ms": GraphQLField(GraphQLNonNull(GraphQLFloat)),
        "error": GraphQLField(GraphQLString),
        "created_at": GraphQLField(GraphQLNonNull(GraphQLString)),
    },
    description="Test execution result details",
)

TestDataInputType = GraphQLInputObjectType(
    "TestDataInput",
    {
        "name": GraphQLInputField(GraphQLNonNull(GraphQLString)),
        "scope": GraphQLInputField(GraphQLNonNull(GraphQLString)),
        "schema": GraphQLInputField(GraphQLNonNull(GraphQLString)),
        "valid_from": GraphQLInputField(GraphQLNonNull(GraphQLString)),
        "valid_to": GraphQLInputField(GraphQLNonNull(GraphQLString)),
    },
    description="Input type for creating test data",
)
