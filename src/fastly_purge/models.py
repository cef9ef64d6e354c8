"""Per-call purge options and the request value objects built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class PurgeOptions(BaseModel):
    """Optional overrides for a single purge call.

    Unset fields fall back to the client defaults. Both the snake_case names
    and the camelCase spellings (``softPurge``, ``shieldingWait``,
    ``shieldingDelay``) are accepted. Unknown keys are kept in
    ``model_extra`` and otherwise ignored.
    """

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    soft_purge: Optional[bool] = Field(default=None, alias="softPurge")
    shielding_wait: Optional[bool] = Field(default=None, alias="shieldingWait")
    shielding_delay: Optional[int] = Field(default=None, alias="shieldingDelay")

    @classmethod
    def coerce(cls, value: Union["PurgeOptions", Mapping[str, Any], None]) -> "PurgeOptions":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls.model_validate(dict(value))

    def extras(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


@dataclass(frozen=True)
class EffectiveOptions:
    soft_purge: bool
    shielding_wait: bool
    shielding_delay: int

    @property
    def shielding_delay_seconds(self) -> float:
        return self.shielding_delay / 1000.0


@dataclass(frozen=True)
class PurgeRequest:
    method: Literal["PURGE", "POST"]
    url: str
    headers: Dict[str, str] = field(default_factory=dict)


__all__ = ["PurgeOptions", "EffectiveOptions", "PurgeRequest"]
