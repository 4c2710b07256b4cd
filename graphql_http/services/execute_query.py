"""Execution Orchestrator — parse → validate → method guard → execute.

Invariants:
    - Steps run in order and short-circuit on the first failure
    - Validation errors → ValidationFailure; execution is never attempted
    - Anything raised by parse/validate/identify/execute is caught HERE and
      becomes Success(errors=[...]) without a data key; nothing escapes
    - Every engine error passes through engine.format_error exactly once
    - A refused GET operation renders the interactive document (query and
      variables preset, no result) when interactive is True

Design Decisions:
    - interactive is decided by the caller once per request and passed in:
      the orchestrator never looks at headers
"""

import logging

from graphql_http.core.engine_protocols import QueryEngine
from graphql_http.core.enforce_method import check_method, check_operation_kind
from graphql_http.core.errors import MissingQueryError
from graphql_http.core.options import Configuration
from graphql_http.core.outcome import (
    Outcome, RenderInteractive, Success, ValidationFailure,
)
from graphql_http.core.request_params import RequestParams

logger = logging.getLogger(__name__)


def _success_from_payload(engine: QueryEngine, payload: dict) -> Success:
    return Success(
        data=payload.get("data"),
        errors=[engine.format_error(e) for e in payload.get("errors") or []],
        has_data="data" in payload,
    )


async def run_query(
    engine: QueryEngine,
    config: Configuration,
    params: RequestParams,
    method: str,
    interactive: bool = False,
    context_value=None,
) -> Outcome | RenderInteractive:
    """Run one request's GraphQL work and return its outcome."""
    if params.query is None:
        if interactive:
            return RenderInteractive()
        return MissingQueryError().to_outcome()

    method_error = check_method(method)
    if method_error:
        return method_error.to_outcome()

    try:
        document = engine.parse(params.query)

        validation_errors = engine.validate(config.schema, document)
        if validation_errors:
            return ValidationFailure(
                errors=[engine.format_error(e) for e in validation_errors],
            )

        kind = engine.identify_operation(document, params.operation_name)
        kind_error = check_operation_kind(method, kind)
        if kind_error:
            if interactive:
                return RenderInteractive(
                    query=params.query, variables=params.variables,
                )
            return kind_error.to_outcome()

        payload = await engine.execute(
            config.schema,
            document,
            root_value=config.root_value,
            context_value=(
                config.context_value if config.context_value is not None
                else context_value
            ),
            variables=params.variables,
            operation_name=params.operation_name,
        )
    except Exception as e:
        logger.info(
            f"GraphQL request failed before producing data: {e}",
            extra={"operation_name": params.operation_name},
        )
        return Success(errors=[engine.format_error(e)])

    return _success_from_payload(engine, payload)
