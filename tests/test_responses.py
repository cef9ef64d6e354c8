from __future__ import annotations

import httpx
import pytest

from fastly_purge.errors import PurgeHTTPError
from fastly_purge.responses import normalize_response


def test_json_body_is_parsed() -> None:
    response = httpx.Response(200, content=b'{"status":"ok"}', headers={"Content-Type": "application/json"})
    assert normalize_response(response) == {"status": "ok"}


def test_malformed_json_is_returned_raw() -> None:
    response = httpx.Response(200, content=b'{"status":"ok"', headers={"Content-Type": "application/json"})
    assert normalize_response(response) == '{"status":"ok"'


def test_parameterized_json_content_type_is_not_parsed() -> None:
    response = httpx.Response(
        200,
        content=b'{"status":"ok"}',
        headers={"Content-Type": "application/json; charset=utf-8"},
    )
    assert normalize_response(response) == '{"status":"ok"}'


def test_missing_content_type_returns_text() -> None:
    response = httpx.Response(200, content=b"purged")
    assert normalize_response(response) == "purged"


@pytest.mark.parametrize(
    "status,body,message",
    [
        (503, b"Service Unavailable", "Service Unavailable"),
        (501, b"", "Empty response body"),
        (404, b'{"msg":"Record not found"}', '{"msg":"Record not found"}'),
        (204, b"", "Empty response body"),
    ],
)
def test_non_200_raises(status: int, body: bytes, message: str) -> None:
    response = httpx.Response(status, content=body)
    with pytest.raises(PurgeHTTPError) as excinfo:
        normalize_response(response)
    assert excinfo.value.status_code == status
    assert excinfo.value.message == message
    assert excinfo.value.response is response
