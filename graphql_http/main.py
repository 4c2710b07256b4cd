"""GraphQL HTTP — FastAPI application factory.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GraphQLHTTPError → the {"errors": [...]} envelope
    - CORS configured from settings (not hardcoded), only when origins are set
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Factory over a module-level app: the schema belongs to the embedding
      application, so there is nothing to serve until it hands one over
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from graphql_http.api.error_handlers import register_error_handlers
from graphql_http.api.routes.graphql import Options, create_graphql_router
from graphql_http.config import Settings, get_settings
from graphql_http.core.engine_protocols import InteractiveRenderer, QueryEngine
from graphql_http.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    options: Options,
    settings: Settings | None = None,
    engine: QueryEngine | None = None,
    renderer: InteractiveRenderer | None = None,
) -> FastAPI:
    """Build a FastAPI app serving GraphQL at settings.graphql_path."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(
            f"GraphQL HTTP started on {settings.graphql_path}",
            extra={"path": settings.graphql_path},
        )
        yield
        logger.info("GraphQL HTTP shutting down")

    app = FastAPI(title="GraphQL HTTP", version="1.0.0", lifespan=lifespan)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    app.include_router(create_graphql_router(
        options, engine=engine, renderer=renderer, settings=settings,
    ))
    register_error_handlers(app)
    return app
