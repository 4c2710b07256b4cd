"""Negotiation Policy — tests for JSON vs interactive selection."""

import pytest

from graphql_http.core.negotiate import (
    HTML_MEDIA_TYPE, JSON_MEDIA_TYPE, preferred_media_type, wants_interactive,
)

BROWSER_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"


@pytest.mark.parametrize("accept, expected", [
    (None, JSON_MEDIA_TYPE),
    ("", JSON_MEDIA_TYPE),
    ("*/*", JSON_MEDIA_TYPE),
    ("application/json", JSON_MEDIA_TYPE),
    ("text/html", HTML_MEDIA_TYPE),
    (BROWSER_ACCEPT, HTML_MEDIA_TYPE),
    ("text/html;q=0.5, application/json", JSON_MEDIA_TYPE),
    ("application/json;q=0.1, text/*", HTML_MEDIA_TYPE),
    ("image/png", JSON_MEDIA_TYPE),
    ("text/html, application/json", HTML_MEDIA_TYPE),
    ("application/json, text/html", JSON_MEDIA_TYPE),
    ("text/*, application/*", HTML_MEDIA_TYPE),
    ("text/html;q=0, */*", JSON_MEDIA_TYPE),
    ("text/html;level=1", JSON_MEDIA_TYPE),
])
def test_preferred_media_type(accept, expected):
    assert preferred_media_type(accept) == expected


def test_interactive_for_html_preferring_client():
    assert wants_interactive(BROWSER_ACCEPT, raw=False, graphiql_enabled=True)


def test_never_interactive_when_raw():
    assert not wants_interactive(BROWSER_ACCEPT, raw=True, graphiql_enabled=True)


def test_never_interactive_when_disabled():
    assert not wants_interactive(BROWSER_ACCEPT, raw=False, graphiql_enabled=False)


def test_json_client_gets_json_even_when_enabled():
    assert not wants_interactive(
        "application/json", raw=False, graphiql_enabled=True,
    )
