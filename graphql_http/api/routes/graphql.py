"""GraphQL Endpoint — the end-to-end request lifecycle.

Invariants:
    - States: options resolved → method checked → body parsed → params extracted
      → interactive short-circuit | executing → responded (exactly once)
    - Configuration errors raise (handled globally as 500), never become outcomes
    - Every other failure answers with the single {"errors": [...]} envelope
    - The interactive decision is made once per request, after params are known
    - No state survives the request: engine, renderer and options are read-only

Design Decisions:
    - graphql_http() returns a plain Starlette-style endpoint; create_graphql_router()
      registers it on an APIRouter for every common method so that PUT/DELETE/...
      reach the 405 envelope instead of the framework default
"""

import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Union

from fastapi import APIRouter
from starlette.requests import Request
from starlette.responses import Response

from graphql_http.config import Settings, get_settings
from graphql_http.core.engine_protocols import InteractiveRenderer, QueryEngine
from graphql_http.core.enforce_method import check_method
from graphql_http.core.errors import ConfigurationError, GraphQLHTTPError
from graphql_http.core.format_response import (
    FormattedResponse, format_interactive, format_response,
    outcome_body, outcome_status,
)
from graphql_http.core.negotiate import wants_interactive
from graphql_http.core.options import Configuration, coerce_configuration
from graphql_http.core.outcome import (
    Outcome, ProtocolFailure, RenderInteractive, Success, ValidationFailure,
)
from graphql_http.core.request_params import RequestParams, extract_params
from graphql_http.infrastructure.graphql_engine import GraphQLCoreEngine
from graphql_http.infrastructure.parse_body import parse_body
from graphql_http.services.execute_query import run_query
from graphql_http.services.render_graphiql import GraphiQLRenderer

logger = logging.getLogger(__name__)

HTTP_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]

OptionsValue = Union[Configuration, Mapping[str, Any]]
Options = Union[
    OptionsValue,
    Callable[[Request], Union[OptionsValue, Awaitable[OptionsValue]]],
]
Endpoint = Callable[[Request], Awaitable[Response]]


async def resolve_options(
    options: Options, request: Request, settings: Settings,
) -> Configuration:
    """Resolve options for this request, calling the factory when given one."""
    value = options
    if callable(options) and not isinstance(options, (Configuration, Mapping)):
        value = options(request)
        if inspect.isawaitable(value):
            value = await value
    return coerce_configuration(
        value,
        pretty_default=settings.graphql_pretty,
        graphiql_default=settings.graphql_graphiql,
    )


def _to_response(formatted: FormattedResponse) -> Response:
    return Response(
        content=formatted.body,
        status_code=formatted.status,
        headers=formatted.headers,
        media_type=formatted.content_type,
    )


def _log_response(
    request: Request,
    formatted: FormattedResponse,
    params: RequestParams | None = None,
    outcome: Outcome | RenderInteractive | None = None,
):
    extra = {
        "method": request.method,
        "path": request.url.path,
        "status": formatted.status,
        "operation_name": params.operation_name if params else None,
        "interactive": formatted.content_type != "application/json",
    }
    if isinstance(outcome, ProtocolFailure):
        extra["error_code"] = outcome.code
        extra["error_category"] = outcome.category
        logger.warning(f"GraphQL request refused: {formatted.status}", extra=extra)
        return
    if isinstance(outcome, (Success, ValidationFailure)):
        extra["error_count"] = len(outcome.errors)
    logger.info(f"GraphQL request answered: {formatted.status}", extra=extra)


def _interactive_render(
    outcome: Outcome | RenderInteractive,
    params: RequestParams,
    interactive: bool,
) -> RenderInteractive | None:
    """The page to serve for this outcome, or None to answer with JSON."""
    if isinstance(outcome, RenderInteractive):
        return outcome
    if not interactive or isinstance(outcome, ProtocolFailure):
        return None
    return RenderInteractive(
        query=params.query,
        variables=params.variables,
        result=outcome_body(outcome),
        status=outcome_status(outcome),
    )


def graphql_http(
    options: Options,
    engine: QueryEngine | None = None,
    renderer: InteractiveRenderer | None = None,
    settings: Settings | None = None,
) -> Endpoint:
    """Build the GraphQL endpoint for the given options."""
    if options is None:
        raise ConfigurationError("GraphQL middleware requires options.")

    settings = settings or get_settings()
    engine = engine or GraphQLCoreEngine()
    renderer = renderer or GraphiQLRenderer(
        settings.graphiql_version, settings.graphiql_react_version,
    )

    def refuse(request: Request, error: GraphQLHTTPError, pretty: bool) -> Response:
        outcome = error.to_outcome()
        formatted = format_response(outcome, pretty, engine.format_error)
        _log_response(request, formatted, outcome=outcome)
        return _to_response(formatted)

    async def graphql_endpoint(request: Request) -> Response:
        config = await resolve_options(options, request, settings)

        method_error = check_method(request.method)
        if method_error:
            return refuse(request, method_error, config.pretty)

        try:
            body = await parse_body(request)
            params = extract_params(request.query_params, body)
        except GraphQLHTTPError as e:
            return refuse(request, e, config.pretty)

        interactive = wants_interactive(
            request.headers.get("accept"), params.raw, config.graphiql,
        )
        outcome = await run_query(
            engine, config, params, request.method,
            interactive=interactive, context_value=request,
        )

        render = _interactive_render(outcome, params, interactive)
        if render is not None:
            formatted = format_interactive(
                renderer.render(render.query, render.variables, render.result),
                render.status,
            )
        else:
            formatted = format_response(
                outcome, config.pretty, engine.format_error,
            )
        _log_response(request, formatted, params, outcome)
        return _to_response(formatted)

    return graphql_endpoint


def create_graphql_router(
    options: Options,
    path: str | None = None,
    engine: QueryEngine | None = None,
    renderer: InteractiveRenderer | None = None,
    settings: Settings | None = None,
) -> APIRouter:
    """APIRouter serving the GraphQL endpoint at path (settings.graphql_path by default)."""
    settings = settings or get_settings()
    router = APIRouter(tags=["graphql"])
    router.add_api_route(
        path or settings.graphql_path,
        graphql_http(options, engine, renderer, settings),
        methods=HTTP_METHODS,
        include_in_schema=False,
    )
    return router
