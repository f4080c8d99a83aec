"""Builder for the field set sent with a payment registration."""

from __future__ import annotations

import uuid
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from ..config import Settings

_DESCRIPTION_MAX_LENGTH: Final[int] = 1024


def to_minor_units(amount: object) -> int:
    """Return ``p24_amount`` for a PLN amount: whole grosze, rounded half up.

    ``Decimal("15.505")`` becomes ``1551``. Floats go through ``str`` so that
    ``10.015`` is treated as written rather than as its binary approximation.
    """

    if isinstance(amount, bool):
        raise ValueError(f"Invalid PLN amount: {amount!r}")
    try:
        grosze = (Decimal(str(amount)) * 100).to_integral_value(rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise ValueError(f"Invalid PLN amount: {amount!r}") from exc

    if not grosze.is_finite() or grosze < 1:
        raise ValueError(f"p24_amount must be at least 1 grosz, got {amount!r}")
    return int(grosze)


class PaymentRequest(BaseModel):
    amount: Decimal
    email: str
    description: str = ""
    currency: str = "PLN"
    country: str = "PL"
    language: str = "pl"
    client_name: str | None = None
    session_id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    url_return: str | None = None
    url_status: str | None = None

    @field_validator("currency", "country")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("description")
    @classmethod
    def _trim_description(cls, value: str) -> str:
        return value.strip()[:_DESCRIPTION_MAX_LENGTH]

    def to_fields(self, settings: Settings | None = None) -> dict[str, Any]:
        """Return the ``p24_*`` fields for ``trnRegister``.

        Return and status URLs fall back to the configured defaults.
        """
        url_return = self.url_return or (settings.url_return if settings else "")
        url_status = self.url_status or (settings.url_status if settings else "")

        fields: dict[str, Any] = {
            "p24_session_id": self.session_id,
            "p24_amount": to_minor_units(self.amount),
            "p24_currency": self.currency,
            "p24_description": self.description,
            "p24_email": self.email,
            "p24_country": self.country,
            "p24_language": self.language,
            "p24_url_return": url_return,
        }
        if url_status:
            fields["p24_url_status"] = url_status
        if self.client_name:
            fields["p24_client"] = self.client_name
        return fields


__all__ = ["PaymentRequest", "to_minor_units"]
