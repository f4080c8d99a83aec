"""Exceptions raised by the transfers24 integration layer."""

from __future__ import annotations


class Transfers24Error(Exception):
    """Base class for all errors raised by this package."""


class MissingCredentials(Transfers24Error):
    """Per-call credentials are required but none were supplied."""

    def __init__(self, message: str = "Empty credentials.") -> None:
        super().__init__(message)


class NoEnvironmentSelected(Transfers24Error):
    """Credentials do not say whether the sandbox or the live gateway is used."""

    def __init__(self, message: str = "No environment chosen.") -> None:
        super().__init__(message)


class GatewayError(Transfers24Error):
    """The gateway could not be reached or answered with a transport error."""


__all__ = [
    "Transfers24Error",
    "MissingCredentials",
    "NoEnvironmentSelected",
    "GatewayError",
]
