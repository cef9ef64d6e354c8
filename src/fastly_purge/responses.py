"""Normalization of purge responses into payloads or errors."""

from __future__ import annotations

import json
from typing import Any

import httpx

from .builders import JSON_CONTENT_TYPE
from .errors import PurgeHTTPError


def normalize_response(response: httpx.Response) -> Any:
    """Return the purge payload, or raise ``PurgeHTTPError`` for non-200s.

    Only an exact ``application/json`` content type is decoded; a body that
    fails to decode is returned as text. Parameterized types such as
    ``application/json; charset=utf-8`` are returned as text as well.
    """
    if response.status_code != 200:
        raise PurgeHTTPError.from_response(response)

    body = response.text
    if response.headers.get("content-type") == JSON_CONTENT_TYPE:
        try:
            return json.loads(body)
        except ValueError:
            return body
    return body


__all__ = ["normalize_response"]
