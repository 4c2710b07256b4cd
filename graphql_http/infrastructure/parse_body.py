"""Body Decoding — turns a request body into a parameter mapping.

Invariants:
    - No body or no Content-Type → {}
    - application/json must decode to a JSON object
    - application/x-www-form-urlencoded → form fields, last value wins
    - application/graphql → {"query": <body text>}
    - Unknown media types → {} (URL parameters may still carry the query)
    - Every failure raises a GraphQLHTTPError subclass; nothing else escapes
"""

import json
import logging

from starlette.datastructures import QueryParams
from starlette.requests import Request
from werkzeug.http import parse_options_header

from graphql_http.core.errors import InvalidBodyError, UnsupportedCharsetError

logger = logging.getLogger(__name__)

SUPPORTED_CHARSETS = frozenset({"utf-8", "utf8", "latin1", "iso-8859-1", "ascii"})


def _decode(raw: bytes, charset: str) -> str:
    try:
        return raw.decode(charset)
    except UnicodeDecodeError as e:
        raise InvalidBodyError("POST body sent invalid encoding.") from e


def _parse_json(text: str) -> dict:
    try:
        data = json.loads(text)
    except ValueError as e:
        raise InvalidBodyError("POST body sent invalid JSON.") from e
    if not isinstance(data, dict):
        raise InvalidBodyError("POST body sent invalid JSON.")
    return data


async def parse_body(request: Request) -> dict:
    """Decode the request body according to its Content-Type."""
    content_type = request.headers.get("content-type")
    if not content_type:
        return {}

    media_type, params = parse_options_header(content_type)
    charset = params.get("charset", "utf-8").lower()
    if charset not in SUPPORTED_CHARSETS:
        raise UnsupportedCharsetError(charset)

    raw = await request.body()
    if not raw:
        return {}

    if media_type == "application/json":
        return _parse_json(_decode(raw, charset))
    if media_type == "application/x-www-form-urlencoded":
        return dict(QueryParams(_decode(raw, charset)))
    if media_type == "application/graphql":
        return {"query": _decode(raw, charset)}

    logger.debug(f"Ignoring body with media type {media_type}")
    return {}
