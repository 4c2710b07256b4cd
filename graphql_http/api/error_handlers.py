"""Error Handlers — global exception handlers for the GraphQL application.

Invariants:
    - GraphQLHTTPError → {"errors": [{"message": ...}]} with its status and headers
    - Exception (catch-all) → 500 in the same envelope, never leaks internal details
    - Both envelopes match the shape the endpoint itself answers with

Design Decisions:
    - Two-layer handler: adapter errors (GraphQLHTTPError), catch-all (Exception)
    - Extracted from main.py so create_app stays a plain wiring function
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from graphql_http.core.errors import ErrorSeverity, GraphQLHTTPError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_graphql_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_graphql_http_error_handler(app: FastAPI) -> None:
    """Register adapter error handler (configuration errors land here)."""

    @app.exception_handler(GraphQLHTTPError)
    async def graphql_http_error_handler(request: Request, exc: GraphQLHTTPError):
        """Handle adapter errors raised outside the endpoint's own envelope."""
        log = (
            logger.error if exc.severity == ErrorSeverity.CRITICAL
            else logger.warning
        )
        log(
            f"GraphQLHTTPError: {exc.message}",
            extra={
                "error_code": exc.code,
                "error_category": exc.category.value,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(),
            headers=exc.headers or None,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"errors": [{"message": INTERNAL_ERROR_MESSAGE}]},
        )
