from __future__ import annotations

from typing import Any, Mapping

from ...config import Settings
from ...responses.http import GatewayReply
from .gateway import BaseGateway


class StubGateway(BaseGateway):
    """In-memory gateway that answers with configurable bodies and records calls."""

    def __init__(self, settings: Settings) -> None:
        super().__init__(settings)
        self.register_body = "error=0&token=STUB-TOKEN"
        self.verify_body = "error=0"
        self.test_connection_body = "error=0"
        self.calls: list[dict[str, Any]] = []

    def register_transaction(self, fields: Mapping[str, Any]) -> GatewayReply:
        self.calls.append({"method": "register_transaction", "fields": dict(fields), "crc": self.credentials.crc})
        return GatewayReply(body=self.register_body, form_params=fields)

    def verify_transaction(self, fields: Mapping[str, Any]) -> GatewayReply:
        self.calls.append({"method": "verify_transaction", "fields": dict(fields), "crc": self.credentials.crc})
        return GatewayReply(body=self.verify_body, form_params=fields)

    def test_connection(self) -> GatewayReply:
        self.calls.append({"method": "test_connection", "fields": {}, "crc": self.credentials.crc})
        return GatewayReply(body=self.test_connection_body)

    def build_request_url(self, token: str, redirect: bool = False) -> str:
        self.calls.append(
            {"method": "build_request_url", "token": token, "redirect": redirect, "crc": self.credentials.crc}
        )
        return f"https://stub.invalid/trnRequest/{token}"
