"""Integrity digests shared by the gateway and its callbacks."""

from __future__ import annotations

import hashlib
import hmac
import logging
from typing import Any, Final, Mapping

from .credentials import Credentials

logger = logging.getLogger(__name__)

SIGN_FIELD: Final[str] = "p24_sign"
CALLBACK_FIELDS: Final[tuple[str, ...]] = (
    "p24_session_id",
    "p24_order_id",
    "p24_amount",
    "p24_currency",
)


def compute(*values: object, crc: str) -> str:
    """Return the MD5 hex digest of ``values`` joined with ``|`` and the CRC."""

    payload = "|".join([*(str(value) for value in values), str(crc)])
    return hashlib.md5(payload.encode("utf-8")).hexdigest()


def verify(callback_fields: Mapping[str, Any] | None, credentials: Credentials | None) -> bool:
    """Return ``True`` when the callback signature matches the recomputed digest."""

    if not isinstance(callback_fields, Mapping) or credentials is None or not credentials.crc:
        return False

    try:
        values = [callback_fields[name] for name in CALLBACK_FIELDS]
        supplied = callback_fields[SIGN_FIELD]
    except KeyError as exc:
        logger.info("Callback is missing a signed field", extra={"field": exc.args[0]})
        return False
    if any(value is None for value in values) or not isinstance(supplied, str):
        return False

    expected = compute(*values, crc=credentials.crc)
    return hmac.compare_digest(expected.encode("ascii"), supplied.encode("utf-8"))


__all__ = ["CALLBACK_FIELDS", "SIGN_FIELD", "compute", "verify"]
