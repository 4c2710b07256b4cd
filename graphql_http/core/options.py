"""Adapter Options — the per-request Configuration and its validation.

Invariants:
    - Configuration is frozen: resolved once per request, fixed afterwards
    - schema must be present; its absence raises ConfigurationError
    - pretty/graphiql left as None are filled from application defaults
    - Anything other than a Configuration or a mapping raises ConfigurationError

Design Decisions:
    - Calling an options factory (possibly async) is the route's job; this module
      only validates and normalizes what the factory produced
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from graphql_http.core.errors import ConfigurationError


@dataclass(frozen=True)
class Configuration:
    """Options the adapter runs a request with."""
    schema: Any = None
    root_value: Any = None
    context_value: Any = None
    pretty: bool | None = None
    graphiql: bool | None = None


_OPTION_NAMES = frozenset(f.name for f in fields(Configuration))


def coerce_configuration(
    options: Any, pretty_default: bool = False, graphiql_default: bool = False,
) -> Configuration:
    """Validate resolved options and fill unset flags from defaults."""
    if isinstance(options, Configuration):
        config = options
    elif isinstance(options, Mapping):
        unknown = set(options) - _OPTION_NAMES
        if unknown:
            raise ConfigurationError(
                f"Unknown GraphQL middleware options: {', '.join(sorted(unknown))}.",
            )
        config = Configuration(**options)
    else:
        raise ConfigurationError(
            "GraphQL middleware option function must return an options object.",
        )

    if config.schema is None:
        raise ConfigurationError(
            "GraphQL middleware options must contain a schema.",
        )

    return replace(
        config,
        pretty=pretty_default if config.pretty is None else bool(config.pretty),
        graphiql=(
            graphiql_default if config.graphiql is None
            else bool(config.graphiql)
        ),
    )
