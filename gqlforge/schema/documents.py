"""Fixed GraphQL documents sent to the remote endpoint by the field resolvers."""

GET_TEST_DATA = """
query GetTestData($scope: String, $limit: Int, $offset: Int) {
  testData(scope: $scope, limit: $limit, offset: $offset) {
    id name scope schema valid_from valid_to created_at updated_at
  }
}
"""

GET_TEST_FLOW = """
query GetTestFlow($id: ID!) {
  testFlow(id: $id) {
    id name flow_type test_data_id config status created_at updated_at
  }
}
"""

GET_TEST_RESULTS = """
query GetTestResults($flow_id: ID!) {
  testResults(flow_id: $flow_id) {
    id flow_id status duration_ms error created_at
  }
}
"""

CREATE_TEST_DATA = """
mutation CreateTestData($input: TestDataInput!) {
  createTestData(input: $input) {
    id name scope schema valid_from valid_to created_at
  }
}
"""

UPDATE_TEST_FLOW = """
mutation UpdateTestFlow($id: ID!, $status: TestFlowStatus!) {
  updateTestFlow(id: $id, status: $status) {
    id status updated_at
  }
}
"""

CREATE_TEST_RESULT = """
mutation CreateTestResult($flow_id: ID!, $status: TestResultStatus!, $duration_ms: Float!, $error: String) {
  createTestResult(flow_id: $flow_id, status: $status, duration_ms: $duration_ms, error: $error) {
    id flow_id status duration_ms error created_at
  }
}
"""
