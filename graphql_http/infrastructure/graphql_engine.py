"""GraphQL Engine — graphql-core behind the QueryEngine protocol.

Invariants:
    - parse raises GraphQLError on syntax errors (caught by the orchestrator)
    - execute awaits async resolvers and returns {"data"?, "errors"?}
    - format_error accepts any exception; non-GraphQL errors are wrapped first
    - identify_operation returns the operation kind string or None
"""

import inspect
import logging
from typing import Any

from graphql import (
    DocumentNode,
    ExecutionResult,
    GraphQLError,
    GraphQLSchema,
    Source,
    execute,
    get_operation_ast,
    parse,
    validate,
)

logger = logging.getLogger(__name__)

SOURCE_NAME = "GraphQL request"


def _is_request_error(error: GraphQLError) -> bool:
    return error.path is None


def execution_payload(result: ExecutionResult) -> dict:
    """Map an ExecutionResult onto {"data"?, "errors"?}.

    graphql-core reports request errors (unknown operation, bad variables)
    as data=None with path-less errors; execution never started then, so the
    payload carries no data key.
    """
    errors = list(result.errors or [])
    payload: dict[str, Any] = {}
    if not (
        result.data is None and errors and all(map(_is_request_error, errors))
    ):
        payload["data"] = result.data
    if errors:
        payload["errors"] = errors
    return payload


class GraphQLCoreEngine:
    """QueryEngine implementation backed by graphql-core."""

    def parse(self, source: str) -> DocumentNode:
        return parse(Source(source, SOURCE_NAME))

    def validate(
        self, schema: GraphQLSchema, document: DocumentNode,
    ) -> list[GraphQLError]:
        return validate(schema, document)

    async def execute(
        self,
        schema: GraphQLSchema,
        document: DocumentNode,
        root_value: Any = None,
        context_value: Any = None,
        variables: dict | None = None,
        operation_name: str | None = None,
    ) -> dict:
        result = execute(
            schema,
            document,
            root_value=root_value,
            context_value=context_value,
            variable_values=variables,
            operation_name=operation_name,
        )
        if inspect.isawaitable(result):
            result = await result
        return execution_payload(result)

    def identify_operation(
        self, document: DocumentNode, operation_name: str | None,
    ) -> str | None:
        operation = get_operation_ast(document, operation_name)
        if operation is None:
            logger.debug(
                "Operation could not be resolved",
                extra={"operation_name": operation_name},
            )
            return None
        return operation.operation.value

    def format_error(self, error: BaseException) -> dict:
        if not isinstance(error, GraphQLError):
            error = GraphQLError(str(error), original_error=error)
        return error.formatted
