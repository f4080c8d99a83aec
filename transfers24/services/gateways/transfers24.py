import logging
from typing import Any, Final, Mapping

import httpx

from ...checksum import SIGN_FIELD, compute
from ...config import Settings
from ...exceptions import GatewayError
from ...responses.http import GatewayReply
from .gateway import BaseGateway

logger = logging.getLogger(__name__)

SANDBOX_HOST: Final[str] = "https://sandbox.przelewy24.pl/"
LIVE_HOST: Final[str] = "https://secure.przelewy24.pl/"


class Transfers24Gateway(BaseGateway):
    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None) -> None:
        super().__init__(settings)
        self._transport = transport

    @property
    def host(self) -> str:
        return SANDBOX_HOST if self.credentials.require_environment() else LIVE_HOST

    def register_transaction(self, fields: Mapping[str, Any]) -> GatewayReply:
        form = self._base_fields()
        form.update(fields)
        form[SIGN_FIELD] = self.compute_checksum(form)
        return self._post("trnRegister", form)

    def verify_transaction(self, fields: Mapping[str, Any]) -> GatewayReply:
        form = self._base_fields()
        form.update(fields)
        form[SIGN_FIELD] = self.compute_checksum(form)
        return self._post("trnVerify", form)

    def test_connection(self) -> GatewayReply:
        form = self._base_fields()
        form[SIGN_FIELD] = compute(self.credentials.pos_id, crc=self.credentials.crc)
        return self._post("testConnection", form)

    def build_request_url(self, token: str, redirect: bool = False) -> str:
        url = f"{self.host}trnRequest/{token}"
        if redirect:
            logger.info("Redirecting to payment page", extra={"url": url})
        return url

    def _base_fields(self) -> dict[str, Any]:
        return {
            "p24_merchant_id": self.credentials.merchant_id,
            "p24_pos_id": self.credentials.pos_id,
            "p24_api_version": self.settings.api_version,
        }

    def _post(self, endpoint: str, form: dict[str, Any]) -> GatewayReply:
        host = self.host
        logger.info(
            "Calling Transfers24",
            extra={"endpoint": endpoint, "session_id": form.get("p24_session_id")},
        )
        try:
            with httpx.Client(
                base_url=host, timeout=self.settings.timeout, transport=self._transport
            ) as client:
                response = client.post(endpoint, data={k: str(v) for k, v in form.items()})
                response.raise_for_status()
        except httpx.HTTPError as exc:
            raise GatewayError(f"Transfers24 {endpoint} request failed: {exc}") from exc
        return GatewayReply.from_httpx(response, form)
