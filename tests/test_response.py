from __future__ import annotations

from types import MappingProxyType

import httpx
import pytest
from pydantic import BaseModel

from rest_client import RestResponse, RestResponseValidationError


class Message(BaseModel):
    id: int
    message: str


def _response(status_code: int = 200, body: str = "", **headers: tuple[str, ...]) -> RestResponse:
    return RestResponse(
        status_code=status_code,
        headers=MappingProxyType(dict(headers)),
        body=body,
        uri="http://host/x",
    )


def test_header_returns_first_value() -> None:
    response = _response(**{"set-cookie": ("a=1", "b=2"), "status": ("created",)})

    assert response.header("set-cookie") == "a=1"
    assert response.header("Set-Cookie") == "a=1"
    assert response.header("status") == "created"


@pytest.mark.parametrize("name", [None, "", "missing"])
def test_header_absent_for_unknown_or_empty_name(name) -> None:
    assert _response(status=("created",)).header(name) is None


@pytest.mark.parametrize(
    ("status_code", "expected"),
    [(200, True), (204, True), (299, True), (199, False), (300, False), (404, False), (500, False)],
)
def test_is_successful(status_code: int, expected: bool) -> None:
    assert _response(status_code).is_successful() is expected


def test_from_httpx_collects_repeated_headers_and_decodes_utf8() -> None:
    raw = httpx.Response(
        200,
        headers=[("X-Tag", "one"), ("X-Tag", "two"), ("Content-Type", "text/plain")],
        content="héllo".encode("utf-8"),
        request=httpx.Request("GET", "http://host/greeting?x=1"),
    )

    response = RestResponse.from_httpx(raw)

    assert response.headers["x-tag"] == ("one", "two")
    assert response.header("X-Tag") == "one"
    assert response.body == "héllo"
    assert response.uri == "http://host/greeting?x=1"


def test_json_and_typed_parse() -> None:
    response = _response(201, '{"id": 7, "message": "Hello"}')

    assert response.json() == {"id": 7, "message": "Hello"}
    assert response.parse(Message) == Message(id=7, message="Hello")
    assert _response(204).json() is None


def test_parse_list_of_models() -> None:
    response = _response(200, '[{"id": 1, "message": "a"}, {"id": 2, "message": "b"}]')

    assert [item.id for item in response.parse(list[Message])] == [1, 2]


@pytest.mark.parametrize("body", ['{"id": "x"}', "not json"])
def test_parse_raises_validation_error(body: str) -> None:
    with pytest.raises(RestResponseValidationError) as exc_info:
        _response(200, body).parse(Message)

    assert exc_info.value.cause is not None


def test_json_wraps_invalid_body() -> None:
    with pytest.raises(RestResponseValidationError) as exc_info:
        _response(200, "nope").json()

    assert exc_info.value.cause is not None


def test_responses_are_hashable() -> None:
    assert hash(_response(200, "x", a=("1",))) == hash(_response(200, "x", a=("1",)))
