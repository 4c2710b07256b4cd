"""Method/Operation Guard — which HTTP methods may trigger which operation kinds.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - Return MethodNotAllowedError on violation, None on success
    - Only GET and POST reach the engine at all (Allow: "GET, POST")
    - GET may only run query operations (Allow: "POST")
    - An unresolved operation kind (None) on GET is refused like a mutation
"""

from graphql_http.core.errors import MethodNotAllowedError

ALLOWED_METHODS = ("GET", "POST")
QUERY_OPERATION = "query"


def check_method(method: str) -> MethodNotAllowedError | None:
    """Rule 1: GraphQL over HTTP only speaks GET and POST."""
    if method.upper() not in ALLOWED_METHODS:
        return MethodNotAllowedError(
            "GraphQL only supports GET and POST requests.",
            allowed=", ".join(ALLOWED_METHODS),
        )
    return None


def check_operation_kind(
    method: str, operation_kind: str | None,
) -> MethodNotAllowedError | None:
    """Rule 2: only query operations may run from a GET request."""
    if method.upper() != "GET" or operation_kind == QUERY_OPERATION:
        return None
    if operation_kind is None:
        message = "Can only perform an unresolved operation from a POST request."
    else:
        message = (
            f"Can only perform a {operation_kind} operation "
            f"from a POST request."
        )
    return MethodNotAllowedError(message, allowed="POST")
