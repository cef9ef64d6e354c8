"""Exceptions raised by the purge client."""

from __future__ import annotations

from typing import Optional

import httpx

EMPTY_BODY_MESSAGE = "Empty response body"


class PurgeError(Exception):
    pass


class PurgeHTTPError(PurgeError):
    """A purge request answered with anything other than ``200``.

    ``message`` is the response body, or ``"Empty response body"`` when the
    body is empty.
    """

    def __init__(self, message: str, status_code: int, response: Optional[httpx.Response] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response

    @classmethod
    def from_response(cls, response: httpx.Response) -> "PurgeHTTPError":
        return cls(response.text or EMPTY_BODY_MESSAGE, response.status_code, response=response)


__all__ = ["PurgeError", "PurgeHTTPError", "EMPTY_BODY_MESSAGE"]
