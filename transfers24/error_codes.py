"""Gateway error codes and their descriptions.

The table is a fixed contract with the payment provider; bump
``CATALOG_VERSION`` whenever an entry is added or reworded.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Final, Mapping


CATALOG_VERSION: Final[str] = "3.2.1"

_CODES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "err00": "Incorrect call",
        "err01": "Authorization answer confirmation was not received.",
        "err02": "Authorization answer was not received.",
        "err03": "This query has been already processed.",
        "err04": "Authorization query incomplete or incorrect.",
        "err05": "Store configuration cannot be read.",
        "err06": "Saving of authorization query failed.",
        "err07": "Another payment is being concluded.",
        "err08": "Undetermined store connection status.",
        "err09": "Permitted corrections amount has been exceeded.",
        "err10": "Incorrect transaction value!",
        "err49": "Too high transaction risk factor.",
        "err51": "Incorrect reference method.",
        "err52": "Incorrect feedback on session information!",
        "err53": "Transaction error!",
        "err54": "Incorrect transaction value!",
        "err55": "Incorrect transaction id!",
        "err56": "Incorrect card.",
        "err57": "Incompatibility of TEST flag.",
        "err58": "Incorrect sequence number!",
        "err101": "Incorrect call.",
        "err102": "Allowed transaction time has expired.",
        "err103": "Incorrect transfer value.",
        "err104": "Transaction awaits confirmation.",
        "err105": "Transaction finished after allowed time.",
        "err106": "Transaction result verification error.",
        "err161": "Transaction request terminated by user.",
        "err162": "Transaction request terminated by user.",
    }
)

_EMBEDDED_CODE = re.compile(r"err\d+")


def describe(code: object) -> str | None:
    """Return the description of ``code`` or ``None`` when it is unknown."""

    if code is None:
        return None
    return _CODES.get(str(code).strip().lower())


def approximate_match(raw_key: object) -> str | None:
    """Best-effort recovery of an error code from an atypical field name.

    Only the decoder's fallback for otherwise unclassified replies calls this.
    Accepts the code itself, a code embedded in longer text (``err00 Incorrect
    call``) and bare numbers that name an ``errNN`` entry (``00``, ``102``).
    """

    if raw_key is None:
        return None
    normalized = str(raw_key).strip().lower()
    for separator in ("=", ":"):
        normalized = normalized.split(separator, 1)[0].strip()
    if not normalized:
        return None

    if normalized in _CODES:
        return normalized

    embedded = _EMBEDDED_CODE.search(normalized)
    if embedded and embedded.group(0) in _CODES:
        return embedded.group(0)

    if normalized.isdigit():
        candidate = f"err{normalized}"
        if candidate in _CODES:
            return candidate
    return None


def codes() -> Mapping[str, str]:
    """Return the read-only code table in catalog order."""

    return _CODES


__all__ = ["CATALOG_VERSION", "approximate_match", "codes", "describe"]
