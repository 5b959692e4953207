"""
Field resolvers for the test management schema.

Each resolver builds a fixed document, dispatches it through the
``GraphQLClient`` and returns the field's data. GraphQL errors reported by the
endpoint are dropped at this layer; executor failures propagate unchanged.

A local field resolves to ``response.data[<remote field>]`` rather than the
whole ``data`` object, so ``getTestData`` yields the remote ``testData`` list.
"""

from typing import Any, Dict, Mapping, Optional

from gqlforge.client.executor import GraphQLClient
from gqlforge.schema import documents
from gqlforge.utils.validators import (
    validate_test_data,
    validate_test_flow_update,
    validate_test_result,
)


def _field_data(data: Optional[Mapping[str, Any]], field: str) -> Any:
    if data is None:
        return None
    return data.get(field)


class TestManagementResolvers:
    """Stateless dispatch from schema fields to remote operations."""

    __test__ = False

    def __init__(self, client: GraphQLClient):
        self.client = client

    async def _dispatch(self, document: str, variables: Dict[str, Any], field: str) -> Any:
        response = await self.client.execute_query(document, variables)
        return _field_data(response.data, field)

    # Queries

    async def get_test_data(self, _root: Any, _info: Any, **args: Any) -> Any:
        return await self._dispatch(documents.GET_TEST_DATA, args, "testData")

    async def get_test_flow(self, _root: Any, _info: Any, id: str) -> Any:
        return await self._dispatch(documents.GET_TEST_FLOW, {"id": id}, "testFlow")

    async def get_test_results(self, _root: Any, _info: Any, flow_id: str) -> Any:
        return await self._dispatch(
            documents.GET_TEST_RESULTS, {"flow_id": flow_id}, "testResults"
        )

    # Mutations

    async def create_test_data(self, _root: Any, _info: Any, input: Dict[str, Any]) -> Any:
        validate_test_data(input)
        return await self._dispatch(
            documents.CREATE_TEST_DATA, {"input": input}, "createTestData"
        )

    async def update_test_flow(self, _root: Any, _info: Any, **args: Any) -> Any:
        validate_test_flow_update(args)
        return await self._dispatch(documents.UPDATE_TEST_FLOW, args, "updateTestFlow")

    async def create_test_result(self, _root: Any, _info: Any, **args: Any) -> Any:
        validate_test_result(args)
        return await self._dispatch(documents.CREATE_TEST_RESULT, args, "createTestResult")
