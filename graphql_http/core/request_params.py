"""Request Parameters — merges URL query parameters and decoded body fields.

Invariants:
    - Pure: no IO, no side effects
    - Source order is fixed: URL parameters first, body second; first present wins
    - A value is absent when missing, None, or the empty string
    - raw is a presence test on either source, never a truthiness test
    - A variables string must decode to a JSON object (or null); anything else
      raises InvalidVariablesError with no fallback decoding
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from graphql_http.core.errors import InvalidVariablesError


@dataclass(frozen=True)
class RequestParams:
    """GraphQL parameters of one request."""
    query: str | None = None
    variables: dict | None = None
    operation_name: str | None = None
    raw: bool = False


def _first_present(key: str, *sources: Mapping) -> Any:
    for source in sources:
        value = source.get(key)
        if value is not None and value != "":
            return value
    return None


def _decode_variables(variables: Any) -> dict | None:
    if variables is None or isinstance(variables, Mapping):
        return dict(variables) if variables is not None else None
    if not isinstance(variables, str):
        raise InvalidVariablesError()
    try:
        decoded = json.loads(variables)
    except ValueError as e:
        raise InvalidVariablesError() from e
    if decoded is not None and not isinstance(decoded, dict):
        raise InvalidVariablesError()
    return decoded


def extract_params(url_params: Mapping, body_params: Mapping) -> RequestParams:
    """Build RequestParams from URL and body sources."""
    return RequestParams(
        query=_first_present("query", url_params, body_params),
        variables=_decode_variables(
            _first_present("variables", url_params, body_params),
        ),
        operation_name=_first_present(
            "operationName", url_params, body_params,
        ),
        raw="raw" in url_params or "raw" in body_params,
    )
