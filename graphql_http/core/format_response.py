"""Response Formatter — maps an Outcome to HTTP status, content type and body.

Invariants:
    - Success with a data key → 200, even when errors are also present
    - Success without a data key → 400
    - ValidationFailure → 400 with the full error list
    - ProtocolFailure → its own status (500 when unset), single-error list, its headers
    - pretty changes whitespace only: same keys, same order, same values
"""

import json
from collections.abc import Callable
from dataclasses import dataclass, field

from graphql_http.core.negotiate import HTML_MEDIA_TYPE, JSON_MEDIA_TYPE
from graphql_http.core.outcome import (
    Outcome, ProtocolFailure, Success, ValidationFailure,
)

ErrorFormatter = Callable[[BaseException], dict]


@dataclass(frozen=True)
class FormattedResponse:
    """Everything needed to write one HTTP response."""
    status: int
    content_type: str
    body: str
    headers: dict[str, str] = field(default_factory=dict)


def outcome_status(outcome: Outcome) -> int:
    """HTTP status an outcome answers with."""
    if isinstance(outcome, Success):
        return 200 if outcome.has_data else 400
    if isinstance(outcome, ValidationFailure):
        return 400
    return outcome.status or 500


def outcome_body(
    outcome: Outcome, format_error: ErrorFormatter | None = None,
) -> dict:
    """JSON envelope for an outcome.

    Protocol failures carry a bare message; format_error, when given, shapes it
    the same way engine errors are shaped.
    """
    if isinstance(outcome, ProtocolFailure):
        error = Exception(outcome.message)
        formatted = format_error(error) if format_error else {"message": outcome.message}
        return {"errors": [formatted]}
    return outcome.to_result()


def serialize(payload: dict, pretty: bool) -> str:
    """JSON text: 2-space indent when pretty, compact otherwise."""
    if pretty:
        return json.dumps(payload, indent=2)
    return json.dumps(payload, separators=(",", ":"))


def format_response(
    outcome: Outcome, pretty: bool, format_error: ErrorFormatter | None = None,
) -> FormattedResponse:
    """Build the JSON response for an outcome."""
    headers = dict(outcome.headers) if isinstance(outcome, ProtocolFailure) else {}
    return FormattedResponse(
        status=outcome_status(outcome),
        content_type=JSON_MEDIA_TYPE,
        body=serialize(outcome_body(outcome, format_error), pretty),
        headers=headers,
    )


def format_interactive(markup: str, status: int = 200) -> FormattedResponse:
    """Build the HTML response carrying the interactive document."""
    return FormattedResponse(
        status=status, content_type=HTML_MEDIA_TYPE, body=markup,
    )
