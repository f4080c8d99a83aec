from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class GatewayReply:
    """Raw gateway answer together with the form fields that produced it."""

    status_code: int = 200
    body: str = ""
    form_params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "form_params", MappingProxyType(dict(self.form_params)))

    @classmethod
    def from_httpx(cls, response: Any, form_params: Mapping[str, Any]) -> "GatewayReply":
        return cls(status_code=response.status_code, body=response.text, form_params=form_params)
