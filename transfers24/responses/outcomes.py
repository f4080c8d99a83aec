"""Read-only views returned by :class:`~transfers24.services.handler.PaymentHandler`."""

from __future__ import annotations

from typing import Any

from ..decoder import DecodedOutcome, ErrorMessages


class Response:
    """Accessors over a frozen :class:`DecodedOutcome`."""

    def __init__(self, outcome: DecodedOutcome) -> None:
        self._outcome = outcome

    @property
    def outcome(self) -> DecodedOutcome:
        return self._outcome

    def is_success(self) -> bool:
        return self._outcome.succeeded

    @property
    def token(self) -> str | None:
        return self._outcome.token

    @property
    def error_code(self) -> str | None:
        return self._outcome.status_code

    @property
    def error_descriptions(self) -> ErrorMessages:
        return dict(self._outcome.error_messages)

    @property
    def request_parameters(self) -> dict[str, Any]:
        return dict(self._outcome.request_parameters)

    @property
    def receive_parameters(self) -> dict[str, Any]:
        return dict(self._outcome.receive_parameters)

    @property
    def order_id(self) -> str | None:
        return self._outcome.order_id

    @property
    def session_id(self) -> str | None:
        return self._outcome.session_id

    def __repr__(self) -> str:
        return f"{type(self).__name__}(success={self.is_success()}, code={self.error_code!r})"


class Register(Response):
    """Outcome of a payment registration."""


class Verify(Response):
    """Outcome of a payment-status callback verification."""


class TestConnection(Response):
    """Outcome of a credentials check."""


class InvalidResponse(Response):
    """Outcome of a call that failed before the gateway reply could be decoded."""

    def __init__(self, exception: BaseException, outcome: DecodedOutcome | None = None) -> None:
        super().__init__(outcome or DecodedOutcome())
        self.exception = exception

    @property
    def message(self) -> str:
        return str(self.exception)

    def is_success(self) -> bool:
        return False

    @property
    def error_descriptions(self) -> ErrorMessages:
        return {type(self.exception).__name__: self.message}

    def __repr__(self) -> str:
        return f"InvalidResponse({self.exception!r})"


__all__ = ["InvalidResponse", "Register", "Response", "TestConnection", "Verify"]
