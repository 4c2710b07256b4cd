"""Root conftest — shared test schema and HTTP client fixtures.

Invariants:
    - Every client talks to a fresh app built by create_app (no shared state)
    - Settings are constructed explicitly per app; the process cache is untouched
    - The test schema covers queries, a throwing field, an async field, the
      context value, and a mutation
"""

import os

import pytest
from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
)
from httpx import ASGITransport, AsyncClient

from graphql_http.config import Settings
from graphql_http.main import create_app

# Keep test logs readable and independent of a developer's .env
os.environ.setdefault("LOG_FORMAT", "text")


def _resolve_test(root, info, who=None):
    return f"Hello {who or 'World'}"


def _resolve_thrower(root, info):
    raise Exception("Throws!")


async def _resolve_async(root, info):
    return "Hello async"


def _resolve_context(root, info):
    if isinstance(info.context, str):
        return info.context
    return type(info.context).__name__


QueryRootType = GraphQLObjectType(
    "QueryRoot",
    lambda: {
        "test": GraphQLField(
            GraphQLString,
            args={"who": GraphQLArgument(GraphQLString)},
            resolve=_resolve_test,
        ),
        "thrower": GraphQLField(
            GraphQLNonNull(GraphQLString), resolve=_resolve_thrower,
        ),
        "asyncTest": GraphQLField(GraphQLString, resolve=_resolve_async),
        "context": GraphQLField(GraphQLString, resolve=_resolve_context),
    },
)

TEST_SCHEMA = GraphQLSchema(
    query=QueryRootType,
    mutation=GraphQLObjectType(
        "MutationRoot",
        {
            "writeTest": GraphQLField(
                QueryRootType, resolve=lambda root, info: {},
            ),
        },
    ),
)


@pytest.fixture
def schema() -> GraphQLSchema:
    return TEST_SCHEMA


@pytest.fixture
def settings() -> Settings:
    return Settings(graphql_pretty=False, graphql_graphiql=False)


@pytest.fixture
async def make_client(settings):
    """Factory: AsyncClient over an app built from the given options."""
    clients = []

    def _make(options, **overrides) -> AsyncClient:
        app_settings = settings.model_copy(update=overrides)
        app = create_app(options, settings=app_settings)
        c = AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        )
        clients.append(c)
        return c

    yield _make
    for c in clients:
        await c.aclose()


@pytest.fixture
async def client(make_client, schema):
    """Client for the plain JSON endpoint (graphiql disabled)."""
    return make_client({"schema": schema})


@pytest.fixture
async def graphiql_client(make_client, schema):
    """Client for an endpoint with graphiql enabled."""
    return make_client({"schema": schema, "graphiql": True})
