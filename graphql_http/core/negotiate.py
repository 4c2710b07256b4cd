"""Negotiation Policy — structured JSON or the interactive HTML document.

Invariants:
    - Never interactive when raw is present or graphiql is disabled
    - Otherwise HTTP content negotiation between application/json and text/html:
      higher quality wins, then the more specific matching range, then the
      range listed first in the Accept header, then the offer order (JSON first)
    - A missing Accept header, or a single wildcard entry, chooses JSON
    - Ranges with q=0, unparseable q, or extra parameters match nothing
"""

from werkzeug.http import parse_list_header, parse_options_header

JSON_MEDIA_TYPE = "application/json"
HTML_MEDIA_TYPE = "text/html"

_OFFERED = (JSON_MEDIA_TYPE, HTML_MEDIA_TYPE)


def _accepted_ranges(accept_header: str) -> list[tuple[str, float, int]]:
    """(media range, quality, position) for each Accept entry, in header order."""
    ranges = []
    for position, entry in enumerate(parse_list_header(accept_header)):
        media_range, params = parse_options_header(entry)
        if not media_range or set(params) - {"q"}:
            continue
        try:
            quality = float(params.get("q", 1))
        except ValueError:
            continue
        ranges.append((media_range.lower(), quality, position))
    return ranges


def _specificity(offered: str, media_range: str) -> int | None:
    """4 for an exact type, +2 for an exact subtype; None when the range misses."""
    offered_type, offered_subtype = offered.split("/")
    range_type, _, range_subtype = media_range.partition("/")
    specificity = 0
    if range_type == offered_type:
        specificity |= 4
    elif range_type != "*":
        return None
    if range_subtype == offered_subtype:
        specificity |= 2
    elif range_subtype != "*":
        return None
    return specificity


def _priority(offered: str, ranges) -> tuple[float, int, int] | None:
    """(quality, specificity, -position) of the most specific range matching offered."""
    best = None
    for media_range, quality, position in ranges:
        specificity = _specificity(offered, media_range)
        if specificity is None:
            continue
        candidate = (specificity, quality, -position)
        if best is None or candidate > best:
            best = candidate
    if best is None or best[1] <= 0:
        return None
    specificity, quality, negative_position = best
    return quality, specificity, negative_position


def preferred_media_type(accept_header: str | None) -> str:
    """Best of JSON/HTML for the given Accept header value."""
    if not accept_header:
        return JSON_MEDIA_TYPE
    ranges = _accepted_ranges(accept_header)
    ranked = []
    for offer_index, offered in enumerate(_OFFERED):
        priority = _priority(offered, ranges)
        if priority is not None:
            ranked.append((priority, -offer_index, offered))
    if not ranked:
        return JSON_MEDIA_TYPE
    return max(ranked)[2]


def wants_interactive(
    accept_header: str | None, raw: bool, graphiql_enabled: bool,
) -> bool:
    """True when the interactive document should replace the JSON body."""
    if raw or not graphiql_enabled:
        return False
    return preferred_media_type(accept_header) == HTML_MEDIA_TYPE
