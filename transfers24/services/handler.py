"""Payment flows run against the Transfers24 gateway.

Every public flow returns a typed outcome instead of raising. Configuration
failures (missing per-call credentials, no environment chosen) are logged;
any other failure is returned silently as :class:`InvalidResponse` and left
for the caller to report.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, TypeVar

from ..config import Settings, get_settings
from ..credentials import Credentials, CredentialsMode
from ..decoder import DecodedOutcome, ResponseDecoder
from ..exceptions import MissingCredentials, NoEnvironmentSelected
from ..responses.outcomes import InvalidResponse, Register, Response, TestConnection, Verify
from .gateways.gateway import BaseGateway

_LOGGER = logging.getLogger(__name__)

SESSION_ID_FIELD = "p24_session_id"
ORDER_ID_FIELD = "p24_order_id"
AMOUNT_FIELD = "p24_amount"
CURRENCY_FIELD = "p24_currency"

_CONFIGURATION_ERRORS = (MissingCredentials, NoEnvironmentSelected)

T = TypeVar("T")


class PaymentHandler:
    def __init__(
        self,
        gateway: BaseGateway,
        settings: Settings | None = None,
        logger: logging.Logger | None = None,
        decoder: ResponseDecoder | None = None,
        credentials: Credentials | None = None,
    ) -> None:
        self.gateway = gateway
        self.settings = settings or get_settings()
        self.logger = logger or _LOGGER
        self.decoder = decoder or ResponseDecoder()
        self.mode = self.settings.credentials_mode
        self._credentials = credentials

    def via_credentials(self, credentials: Credentials) -> "PaymentHandler":
        """Return a handler that signs every call with ``credentials``.

        Each call works on its own configured copy of the gateway, so bound
        handlers sharing one gateway do not see each other's credentials.
        """

        return PaymentHandler(
            self.gateway,
            settings=self.settings,
            logger=self.logger,
            decoder=self.decoder,
            credentials=credentials,
        )

    def register_payment(self, fields: Mapping[str, Any]) -> Response:
        """Register a new payment; on success the outcome carries the payment token."""

        def flow() -> Response:
            gateway = self._configure_gateway()
            sent = dict(fields)
            session_id = sent[SESSION_ID_FIELD]
            reply = gateway.register_transaction(sent)
            outcome = self.decoder.decode(reply.body, sent, session_id=session_id)
            return Register(outcome)

        return self._guard(flow, InvalidResponse)

    def verify_payment(self, callback_fields: Mapping[str, Any], verify_checksum: bool = True) -> Response:
        """Verify a payment-status callback with the gateway.

        When ``verify_checksum`` is set and the callback signature does not
        match, the gateway is not contacted: the returned :class:`Verify`
        carries only the received fields and reports failure.
        """

        def flow() -> Response:
            gateway = self._configure_gateway()
            received = dict(callback_fields)

            if verify_checksum and not gateway.check_sum(received):
                return Verify(DecodedOutcome(receive_parameters=received))

            session_id = received[SESSION_ID_FIELD]
            order_id = received[ORDER_ID_FIELD]
            fields = {
                SESSION_ID_FIELD: session_id,
                ORDER_ID_FIELD: order_id,
                AMOUNT_FIELD: received[AMOUNT_FIELD],
                CURRENCY_FIELD: received[CURRENCY_FIELD],
            }
            reply = gateway.verify_transaction(fields)
            outcome = self.decoder.decode(
                reply.body,
                fields,
                receive_parameters=received,
                order_id=order_id,
                session_id=session_id,
            )
            return Verify(outcome)

        return self._guard(flow, InvalidResponse)

    def build_redirect_url(self, token: str, redirect: bool = False) -> str:
        """Return the payment-page URL for ``token``.

        Unlike the other flows this returns a plain string: on failure it is
        the failure message itself rather than an outcome object.
        """

        def flow() -> str:
            gateway = self._configure_gateway()
            return gateway.build_request_url(token, redirect)

        return self._guard(flow, str)

    def check_credentials(self) -> Response:
        """Test the connection with the gateway using the configured credentials."""

        def flow() -> Response:
            gateway = self._configure_gateway()
            reply = gateway.test_connection()
            outcome = self.decoder.decode(reply.body, reply.form_params)
            return TestConnection(outcome)

        return self._guard(flow, InvalidResponse)

    def _guard(self, flow: Callable[[], T], on_failure: Callable[[Exception], Any]) -> T:
        try:
            return flow()
        except _CONFIGURATION_ERRORS as exc:
            self.logger.error(str(exc))
            return on_failure(exc)
        except Exception as exc:
            return on_failure(exc)

    def _configure_gateway(self) -> BaseGateway:
        if self.mode is not CredentialsMode.PER_CALL:
            return self.gateway
        if self._credentials is None:
            raise MissingCredentials()
        return self.gateway.configured(
            self._credentials.pos_id,
            self._credentials.merchant_id,
            self._credentials.crc,
            self._credentials.test_mode,
        )


__all__ = ["PaymentHandler"]
