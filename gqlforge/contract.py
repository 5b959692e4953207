"""
Remote GraphQL contract.

SDL of the operations the remote test management endpoint exposes. Queries
are type-checked against it before they leave the client.
"""

from functools import lru_cache

from graphql import GraphQLSchema, build_schema

REMOTE_SCHEMA_SDL = """
enum TestFlowStatus {
  pending
  running
  completed
  failed
  cancelled
}

enum TestResultStatus {
  pass
  fail
  error
  skipped
}

type TestData {
  id: ID!
  name: String!
  scope: String!
  schema: String!
  valid_from: String!
  valid_to: String!
  created_at: String!
  updated_at: String
}

type TestFlow {
  id: ID!
  name: String!
  flow_type: String!
  test_data_id: ID!
  config: String!
  status: TestFlowStatus!
  created_at: String!
  updated_at: String
}

type TestResult {
  id: ID!
  flow_id: ID!
  status: TestResultStatus!
  duration_ms: Float!
  error: String
  created_at: String!
}

input TestDataInput {
  name: String!
  scope: String!
  schema: String!
  valid_from: String!
  valid_to: String!
}

type Query {
  testData(scope: String, limit: Int, offset: Int): [TestData]
  testFlow(id: ID!): TestFlow
  testResults(flow_id: ID!): [TestResult]
}

type Mutation {
  createTestData(input: TestDataInput!): TestData
  updateTestFlow(id: ID!, status: TestFlowStatus!): TestFlow
  createTestResult(
    flow_id: ID!
    status: TestResultStatus!
    duration_ms: Float!
    error: String
  ): TestResult
}
"""


@lru_cache(maxsize=1)
def get_remote_schema() -> GraphQLSchema:
    """Build the remote contract schema once per process."""
    return build_schema(REMOTE_SCHEMA_SDL)
