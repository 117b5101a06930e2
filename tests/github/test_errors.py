"""Tests for building RequestError from failed responses."""

import httpx

from running_actions.github.errors import create_request_error

URL = "https://api.github.com/repos/acme/widgets/actions/workflows"


def _response(status_code: int, **kwargs) -> httpx.Response:
    return httpx.Response(status_code, request=httpx.Request("GET", URL), **kwargs)


def test_uses_message_from_json_body() -> None:
    response = _response(404, json={"message": "Not Found", "documentation_url": "https://docs"})

    error = create_request_error(response)

    assert error.status == 404
    assert error.message == "Not Found"
    assert str(error) == "Not Found"
    assert error.response.data == {"message": "Not Found", "documentation_url": "https://docs"}


def test_unparseable_body_falls_back_to_reason_phrase() -> None:
    response = _response(502, text="<html>Bad gateway</html>")

    error = create_request_error(response)

    assert error.status == 502
    assert error.message == "Bad Gateway"
    assert error.response.data == "<html>Bad gateway</html>"


def test_json_without_message_falls_back_to_reason_phrase() -> None:
    response = _response(500, json={"errors": ["boom"]})

    error = create_request_error(response)

    assert error.message == "Internal Server Error"


def test_json_list_body_falls_back_to_reason_phrase() -> None:
    response = _response(400, json=["message"])

    error = create_request_error(response)

    assert error.message == "Bad Request"


def test_empty_body_becomes_empty_dict() -> None:
    response = _response(403)

    error = create_request_error(response)

    assert error.message == "Forbidden"
    assert error.response.data == {}


def test_captures_response_metadata_and_synthetic_request() -> None:
    response = _response(
        403,
        json={"message": "API rate limit exceeded"},
        headers={"x-ratelimit-remaining": "0"},
    )

    error = create_request_error(response)

    assert error.response.url == URL
    assert error.response.status == 403
    assert error.response.headers["x-ratelimit-remaining"] == "0"
    assert error.request.method == "GET"
    assert error.request.url == URL
    assert error.request.headers == {}


def test_non_string_message_is_stringified() -> None:
    response = _response(409, json={"message": 42})

    error = create_request_error(response)

    assert error.message == "42"
