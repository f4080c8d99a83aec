"""Merchant credentials and the mode in which they are supplied."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .exceptions import NoEnvironmentSelected


class CredentialsMode(str, Enum):
    """Where the handler takes merchant credentials from."""

    GLOBAL = "global"
    PER_CALL = "per_call"

    @classmethod
    def from_scope(cls, credentials_scope: bool) -> "CredentialsMode":
        return cls.PER_CALL if credentials_scope else cls.GLOBAL


@dataclass(frozen=True, slots=True)
class Credentials:
    """Merchant identity forwarded to the gateway.

    ``test_mode`` is ``None`` when no environment was chosen; such credentials
    are rejected the moment they are used.
    """

    pos_id: int | str
    merchant_id: int | str
    crc: str
    test_mode: bool | None = None

    def require_environment(self) -> bool:
        """Return ``test_mode`` or raise when no environment was chosen."""

        if self.test_mode is None:
            raise NoEnvironmentSelected()
        return self.test_mode


__all__ = ["Credentials", "CredentialsMode"]
