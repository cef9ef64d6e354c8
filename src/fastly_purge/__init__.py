"""Fastly purge client."""

from .client import FASTLY_API_ENDPOINT, PurgeClient
from .config import ClientConfig
from .errors import PurgeError, PurgeHTTPError
from .models import PurgeOptions

__all__ = [
    "FASTLY_API_ENDPOINT",
    "ClientConfig",
    "PurgeClient",
    "PurgeError",
    "PurgeHTTPError",
    "PurgeOptions",
]
