"""Async client for Fastly purge operations."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping, Optional, Set, Union

import httpx

from .builders import key_purge_request, service_purge_request, url_purge_request
from .config import ClientConfig
from .models import PurgeOptions, PurgeRequest
from .responses import normalize_response

logger = logging.getLogger("fastly_purge.client")

FASTLY_API_ENDPOINT = "https://api.fastly.com"

OptionsArg = Union[PurgeOptions, Mapping[str, Any], None]


class PurgeClient:
    def __init__(
        self,
        api_key: str,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **options: Any,
    ) -> None:
        self._setup(ClientConfig.from_options(api_key, **options), transport)

    @classmethod
    def from_config(
        cls, config: ClientConfig, *, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "PurgeClient":
        client = cls.__new__(cls)
        client._setup(config, transport)
        return client

    def _setup(self, config: ClientConfig, transport: Optional[httpx.AsyncBaseTransport]) -> None:
        self._config = config
        self._client = httpx.AsyncClient(
            timeout=config.timeout,
            headers={"User-Agent": config.user_agent},
            transport=transport,
        )
        # Accept is only sent when a purge variant asks for it.
        del self._client.headers["Accept"]
        self._background: Set[asyncio.Task] = set()

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def __aenter__(self) -> "PurgeClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def _send(self, request: PurgeRequest) -> Any:
        logger.debug("Fastly purge %s %s", request.method, request.url)
        response = await self._client.request(request.method, request.url, headers=request.headers)
        logger.debug("Fastly purge %s %s status=%s", request.method, request.url, response.status_code)
        return normalize_response(response)

    async def purge_url(self, url: str, options: OptionsArg = None) -> Any:
        """Purge a single fully-qualified URL."""
        effective = self._config.with_overrides(options)
        return await self._send(url_purge_request(url, effective))

    async def purge_service(self, service_id: str, options: OptionsArg = None) -> Any:
        """Purge everything cached for ``service_id``.

        ``options`` is accepted but has no effect: purge_all never soft
        purges and always authenticates with the client's key.
        """
        return await self._send(service_purge_request(FASTLY_API_ENDPOINT, service_id, self._config.api_key))

    async def purge_key(self, service_id: str, key: str, options: OptionsArg = None) -> Any:
        """Purge every object tagged with surrogate ``key``."""
        effective = self._config.with_overrides(options)
        request = key_purge_request(FASTLY_API_ENDPOINT, service_id, key, self._config.api_key, effective)
        return await self._send(request)

    async def purge_shielding_key(self, service_id: str, key: str, options: OptionsArg = None) -> Any:
        """Purge a surrogate key now and again after the shielding delay.

        The first purge's outcome is discarded. The delay starts once it has
        resolved. With ``shielding_wait`` the second purge's payload is
        returned (or its error raised); otherwise this returns ``None`` right
        after the first purge and the second runs in the background.
        """
        effective = self._config.with_overrides(options)

        try:
            await self.purge_key(service_id, key, options)
        except Exception as exc:
            logger.warning("Initial shielding purge failed service=%s key=%s: %r", service_id, key, exc)

        delayed = self._delayed_purge_key(service_id, key, options, effective.shielding_delay_seconds)
        if effective.shielding_wait:
            return await delayed

        task = asyncio.create_task(self._discard_outcome(delayed, service_id, key))
        self._background.add(task)
        task.add_done_callback(self._background.discard)
        return None

    async def _delayed_purge_key(self, service_id: str, key: str, options: OptionsArg, delay: float) -> Any:
        await asyncio.sleep(delay)
        return await self.purge_key(service_id, key, options)

    async def _discard_outcome(self, purge, service_id: str, key: str) -> None:
        try:
            await purge
        except Exception as exc:
            logger.warning("Delayed shielding purge failed service=%s key=%s: %r", service_id, key, exc)

    @property
    def pending_purges(self) -> int:
        return len(self._background)

    async def aclose(self) -> None:
        if self._background:
            await asyncio.gather(*list(self._background), return_exceptions=True)
        await self._client.aclose()


__all__ = ["PurgeClient", "FASTLY_API_ENDPOINT"]
