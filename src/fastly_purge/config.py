"""Configuration objects for the Fastly purge client."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from .models import EffectiveOptions, PurgeOptions

DEFAULT_SHIELDING_DELAY_MS = 4000
DEFAULT_USER_AGENT = "fastly-purge-python/0.1.0"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    soft_purge: bool = False
    shielding_wait: bool = False
    shielding_delay: int = DEFAULT_SHIELDING_DELAY_MS
    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_options(cls, api_key: str, **options: Any) -> "ClientConfig":
        """Build a config from constructor keyword options.

        Recognised options are ``soft_purge``, ``shielding_wait`` and
        ``shielding_delay`` (camelCase spellings work too), plus the transport
        settings ``timeout`` and ``user_agent``. Anything else is preserved
        in ``extra``.
        """
        transport: Dict[str, Any] = {}
        for name in ("timeout", "user_agent"):
            if name in options:
                transport[name] = options.pop(name)

        parsed = PurgeOptions.model_validate(options)
        defaults = {
            "soft_purge": parsed.soft_purge,
            "shielding_wait": parsed.shielding_wait,
            "shielding_delay": parsed.shielding_delay,
        }
        values = {name: value for name, value in defaults.items() if value is not None}
        values.update(transport)
        return cls(api_key=api_key, extra=parsed.extras(), **values)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        api_key = os.environ.get("FASTLY_API_KEY", "")
        delay = int(os.environ.get("FASTLY_SHIELDING_DELAY", str(DEFAULT_SHIELDING_DELAY_MS)))
        timeout = float(os.environ.get("FASTLY_TIMEOUT", "10.0"))
        return cls(
            api_key=api_key,
            soft_purge=_env_flag("FASTLY_SOFT_PURGE", False),
            shielding_wait=_env_flag("FASTLY_SHIELDING_WAIT", False),
            shielding_delay=delay,
            timeout=timeout,
        )

    def with_overrides(
        self, options: Union[PurgeOptions, Mapping[str, Any], None] = None
    ) -> EffectiveOptions:
        """Merge per-call overrides over the client defaults.

        The config itself is left untouched; an override wins whenever it
        is set, including falsy values such as ``soft_purge=False`` or a
        zero delay.
        """
        call = PurgeOptions.coerce(options)
        return EffectiveOptions(
            soft_purge=self.soft_purge if call.soft_purge is None else call.soft_purge,
            shielding_wait=self.shielding_wait if call.shielding_wait is None else call.shielding_wait,
            shielding_delay=self.shielding_delay if call.shielding_delay is None else call.shielding_delay,
        )


__all__ = ["ClientConfig", "DEFAULT_SHIELDING_DELAY_MS", "DEFAULT_USER_AGENT"]
