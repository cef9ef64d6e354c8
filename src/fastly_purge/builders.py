"""Request construction for each purge variant."""

from __future__ import annotations

from typing import Dict, Optional

from .models import EffectiveOptions, PurgeRequest

JSON_CONTENT_TYPE = "application/json"
SOFT_PURGE_HEADER = "Fastly-Soft-Purge"
API_KEY_HEADER = "Fastly-Key"


def build_headers(
    api_key: Optional[str] = None,
    soft_purge: bool = False,
    accept: Optional[str] = None,
) -> Dict[str, str]:
    headers: Dict[str, str] = {}
    if api_key is not None and api_key != "":
        headers[API_KEY_HEADER] = api_key
    if soft_purge is True:
        headers[SOFT_PURGE_HEADER] = "1"
    if accept is not None and accept != "":
        headers["Accept"] = accept
    return headers


def url_purge_request(url: str, effective: EffectiveOptions) -> PurgeRequest:
    # URL purges are not key-gated; only the soft purge flag travels.
    return PurgeRequest(method="PURGE", url=url, headers=build_headers(soft_purge=effective.soft_purge))


def service_purge_request(origin: str, service_id: str, api_key: str) -> PurgeRequest:
    return PurgeRequest(
        method="POST",
        url=f"{origin}/service/{service_id}/purge_all",
        headers=build_headers(api_key=api_key, accept=JSON_CONTENT_TYPE),
    )


def key_purge_request(
    origin: str,
    service_id: str,
    key: str,
    api_key: str,
    effective: EffectiveOptions,
) -> PurgeRequest:
    return PurgeRequest(
        method="POST",
        url=f"{origin}/service/{service_id}/purge/{key}",
        headers=build_headers(api_key=api_key, soft_purge=effective.soft_purge, accept=JSON_CONTENT_TYPE),
    )


__all__ = [
    "API_KEY_HEADER",
    "JSON_CONTENT_TYPE",
    "SOFT_PURGE_HEADER",
    "build_headers",
    "key_purge_request",
    "service_purge_request",
    "url_purge_request",
]
