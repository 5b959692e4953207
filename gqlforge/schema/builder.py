"""
GraphQL schema composition.

Combines the domain types with query and mutation root types whose fields are
bound to a ``GraphQLClient`` through ``TestManagementResolvers``.
"""

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
)

from gqlforge.client.executor import GraphQLClient
from gqlforge.schema.resolvers import TestManagementResolvers
from gqlforge.schema.types import (
    TestDataInputType,
    TestDataType,
    TestFlowStatusEnum,
    TestFlowType,
    TestResultStatusEnum,
    TestResultType,
)


def define_queries(resolvers: TestManagementResolvers) -> GraphQLObjectType:
    """Root query type for test entities."""
    return GraphQLObjectType(
        "Query",
        {
            "getTestData": GraphQLField(
                GraphQLList(TestDataType),
                args={
                    "scope": GraphQLArgument(GraphQLString),
                    "limit": GraphQLArgument(GraphQLInt),
                    "offset": GraphQLArgument(GraphQLInt),
                },
                resolve=resolvers.get_test_data,
            ),
            "getTestFlow": GraphQLField(
                TestFlowType,
                args={"id": GraphQLArgument(GraphQLNonNull(GraphQLID))},
                resolve=resolvers.get_test_flow,
            ),
            "getTestResults": GraphQLField(
                GraphQLList(TestResultType),
                args={"flow_id": GraphQLArgument(GraphQLNonNull(GraphQLID))},
                resolve=resolvers.get_test_results,
            ),
        },
        description="Root query type for test entities",
    )


def define_mutations(resolvers: TestManagementResolvers) -> GraphQLObjectType:
    """Root mutation type for creating and updating test entities."""
    return GraphQLObjectType(
        "Mutation",
        {
            "createTestData": GraphQLField(
                TestDataType,
                args={"input": GraphQLArgument(GraphQLNonNull(TestDataInputType))},
                resolve=resolvers.create_test_data,
            ),
            "updateTestFlow": GraphQLField(
                TestFlowType,
                args={
                    "id": GraphQLArgument(GraphQLNonNull(GraphQLID)),
                    "status": GraphQLArgument(GraphQLNonNull(TestFlowStatusEnum)),
                },
                resolve=resolvers.update_test_flow,
            ),
            "createTestResult": GraphQLField(
                TestResultType,
                args={
                    "flow_id": GraphQLArgument(GraphQLNonNull(GraphQLID)),
                    "status": GraphQLArgument(GraphQLNonNull(TestResultStatusEnum)),
                    "duration_ms": GraphQLArgument(GraphQLNonNull(GraphQLFloat)),
                    "error": GraphQLArgument(GraphQLString),
                },
                resolve=resolvers.create_test_result,
            ),
        },
        description="Root mutation type for test entities",
    )


def build_schema(client: GraphQLClient) -> GraphQLSchema:
    """
    Build the test management schema bound to a client.

    Args:
        client: Client every field resolver dispatches through

    Returns:
        GraphQLSchema: Schema with query and mutation roots
    """
    resolvers = TestManagementResolvers(client)
    return GraphQLSchema(
        query=define_queries(resolvers),
        mutation=define_mutations(resolvers),
        types=[TestDataType, TestFlowType, TestResultType],
    )
