"""Request Parameters — tests for merging URL and body sources.

Tests cover:
    - URL parameters win over body parameters
    - Empty strings count as absent and fall through to the body
    - variables strings are JSON-decoded; invalid JSON is a 400 error
    - raw is a presence test, not a truthiness test
"""

import pytest

from graphql_http.core.errors import InvalidVariablesError
from graphql_http.core.request_params import RequestParams, extract_params


# ─── precedence ──────────────────────────────────────────────────

def test_url_params_take_precedence_over_body():
    params = extract_params(
        {"query": "{url}", "operationName": "FromUrl"},
        {"query": "{body}", "operationName": "FromBody"},
    )
    assert params.query == "{url}"
    assert params.operation_name == "FromUrl"


def test_body_used_when_url_param_missing():
    params = extract_params({}, {"query": "{test}"})
    assert params.query == "{test}"


def test_empty_url_value_falls_through_to_body():
    params = extract_params({"query": ""}, {"query": "{test}"})
    assert params.query == "{test}"


def test_all_absent_gives_empty_params():
    assert extract_params({}, {}) == RequestParams()


# ─── variables ───────────────────────────────────────────────────

def test_variables_string_is_decoded():
    params = extract_params({"variables": '{"who": "Dolly"}'}, {})
    assert params.variables == {"who": "Dolly"}


def test_variables_mapping_passes_through():
    params = extract_params({}, {"variables": {"who": "Dolly"}})
    assert params.variables == {"who": "Dolly"}


def test_variables_null_string_is_absent():
    assert extract_params({"variables": "null"}, {}).variables is None


def test_invalid_variables_json_raises_400():
    with pytest.raises(InvalidVariablesError) as exc_info:
        extract_params({"variables": "who:you"}, {})
    assert exc_info.value.http_status == 400
    assert exc_info.value.message == "Variables are invalid JSON."


def test_non_object_variables_json_raises():
    with pytest.raises(InvalidVariablesError):
        extract_params({"variables": "[1, 2]"}, {})


def test_invalid_url_variables_do_not_fall_back_to_body():
    with pytest.raises(InvalidVariablesError):
        extract_params({"variables": "{bad"}, {"variables": {"who": "ok"}})


# ─── raw ─────────────────────────────────────────────────────────

def test_raw_absent_is_false():
    assert extract_params({"query": "{test}"}, {}).raw is False


def test_raw_with_empty_value_is_present():
    assert extract_params({"raw": ""}, {}).raw is True


def test_raw_false_still_counts_as_present():
    assert extract_params({}, {"raw": False}).raw is True


def test_params_are_immutable():
    params = extract_params({"query": "{test}"}, {})
    with pytest.raises(AttributeError):
        params.query = "{other}"
