from __future__ import annotations

from fastly_purge.builders import build_headers, key_purge_request, service_purge_request, url_purge_request
from fastly_purge.models import EffectiveOptions

ORIGIN = "https://api.fastly.com"


def effective(soft_purge: bool) -> EffectiveOptions:
    return EffectiveOptions(soft_purge=soft_purge, shielding_wait=False, shielding_delay=4000)


def test_build_headers_empty_by_default() -> None:
    assert build_headers() == {}


def test_build_headers_includes_each_flagged_header() -> None:
    headers = build_headers(api_key="k", soft_purge=True, accept="application/json")
    assert headers == {"Fastly-Key": "k", "Fastly-Soft-Purge": "1", "Accept": "application/json"}


def test_build_headers_skips_empty_key() -> None:
    assert build_headers(api_key="", accept="") == {}


def test_url_purge_request_targets_exact_url() -> None:
    request = url_purge_request("https://www.example.org/a/b?c=d", effective(True))
    assert request.method == "PURGE"
    assert request.url == "https://www.example.org/a/b?c=d"
    assert request.headers == {"Fastly-Soft-Purge": "1"}


def test_service_purge_request_interpolates_id_verbatim() -> None:
    request = service_purge_request(ORIGIN, "svc 1", "k")
    assert request.method == "POST"
    assert request.url == "https://api.fastly.com/service/svc 1/purge_all"
    assert request.headers == {"Fastly-Key": "k", "Accept": "application/json"}


def test_key_purge_request_headers_follow_soft_flag() -> None:
    hard = key_purge_request(ORIGIN, "svc", "tag", "k", effective(False))
    soft = key_purge_request(ORIGIN, "svc", "tag", "k", effective(True))
    assert hard.url == soft.url == "https://api.fastly.com/service/svc/purge/tag"
    assert hard.headers == {"Fastly-Key": "k", "Accept": "application/json"}
    assert soft.headers["Fastly-Soft-Purge"] == "1"
    assert soft.headers["Fastly-Key"] == "k"
