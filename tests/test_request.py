"""Unit tests for the Request builder."""

import pytest

from ringcentral_api_client.request import FORM_CONTENT_TYPE, JSON_CONTENT_TYPE, Request


def test_querystring_keeps_insertion_order() -> None:
    request = Request("/restapi/v1.0/account/~")
    request.add_query_parameter("foo", "1")
    request.add_query_parameter("bar", "2")
    assert request.querystring() == "?foo=1&bar=2"


def test_empty_querystring() -> None:
    assert Request("/restapi/v1.0/account/~").querystring() == ""


def test_duplicate_query_keys_are_kept() -> None:
    request = Request("/x").add_query_parameter("type", "SMS").add_query_parameter("type", "Fax")
    assert request.querystring() == "?type=SMS&type=Fax"


def test_query_values_are_not_escaped() -> None:
    request = Request("/x").add_query_parameter("q", "a b&c").add_query_parameter("p", "%2B")
    assert request.querystring() == "?q=a b&c&p=%2B"


def test_url_appends_querystring() -> None:
    request = Request("/restapi/v1.0/account/~/call-log").add_query_parameter("perPage", "10")
    assert request.url == "/restapi/v1.0/account/~/call-log?perPage=10"


def test_clear_query_parameters() -> None:
    request = Request("/x").add_query_parameter("foo", "1")
    request.clear_query_parameters()
    assert request.querystring() == ""


def test_form_content() -> None:
    request = Request("/x")
    request.add_form_parameter("name", "John Smith")
    request.add_form_parameter("mail", "j@example.com")
    body, content_type = request.content()
    assert content_type == FORM_CONTENT_TYPE
    assert body == "name=John+Smith&mail=j%40example.com"


def test_form_parameter_replaces_previous_value() -> None:
    request = Request("/x").add_form_parameter("a", "1").add_form_parameter("a", "2")
    assert request.content()[0] == "a=2"


def test_json_body_wins_over_form_fields() -> None:
    request = Request("/x")
    request.add_form_parameter("ignored", "yes")
    request.set_json_data('{"text": "hello"}')
    body, content_type = request.content()
    assert content_type == JSON_CONTENT_TYPE
    assert body == '{"text": "hello"}'


def test_json_body_from_constructor_and_clear() -> None:
    request = Request("/x", '{"a": 1}')
    assert request.json_body == '{"a": 1}'
    request.add_form_parameter("b", "2")
    request.clear_json_data()
    assert request.json_body is None
    assert request.content() == ("b=2", FORM_CONTENT_TYPE)


def test_clear_form_parameters() -> None:
    request = Request("/x").add_form_parameter("b", "2")
    request.clear_form_parameters()
    assert request.content() == ("", FORM_CONTENT_TYPE)


def test_empty_endpoint_rejected() -> None:
    with pytest.raises(ValueError):
        Request("")
