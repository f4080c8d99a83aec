import copy
from abc import ABC, abstractmethod
from typing import Any, Mapping

from ...checksum import compute, verify
from ...config import Settings
from ...credentials import Credentials
from ...responses.http import GatewayReply


class BaseGateway(ABC):
    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.credentials: Credentials = settings.credentials()

    def configure(
        self,
        pos_id: int | str,
        merchant_id: int | str,
        crc: str,
        test_mode: bool | None,
    ) -> None:
        credentials = Credentials(pos_id=pos_id, merchant_id=merchant_id, crc=crc, test_mode=test_mode)
        credentials.require_environment()
        self.credentials = credentials

    def configured(
        self,
        pos_id: int | str,
        merchant_id: int | str,
        crc: str,
        test_mode: bool | None,
    ) -> "BaseGateway":
        """Return a copy of this gateway bound to the given credentials.

        The original gateway keeps its own credentials.
        """
        clone = copy.copy(self)
        clone.configure(pos_id, merchant_id, crc, test_mode)
        return clone

    def compute_checksum(self, fields: Mapping[str, Any]) -> str:
        """Sign a registration or verification request.

        Registration is signed with the merchant id in the second position,
        verification with the order id.
        """
        second = fields["p24_order_id"] if "p24_order_id" in fields else self.credentials.merchant_id
        return compute(
            fields["p24_session_id"],
            second,
            fields["p24_amount"],
            fields["p24_currency"],
            crc=self.credentials.crc,
        )

    def check_sum(self, fields: Mapping[str, Any]) -> bool:
        return verify(fields, self.credentials)

    @abstractmethod
    def register_transaction(self, fields: Mapping[str, Any]) -> GatewayReply:
        raise NotImplementedError

    @abstractmethod
    def verify_transaction(self, fields: Mapping[str, Any]) -> GatewayReply:
        raise NotImplementedError

    @abstractmethod
    def test_connection(self) -> GatewayReply:
        raise NotImplementedError

    @abstractmethod
    def build_request_url(self, token: str, redirect: bool = False) -> str:
        raise NotImplementedError


def get_gateway(settings: Settings) -> BaseGateway:
    if settings.gateway == "stub":
        from .stub import StubGateway

        return StubGateway(settings)
    if settings.gateway == "transfers24":
        from .transfers24 import Transfers24Gateway

        return Transfers24Gateway(settings)
    raise ValueError(f"Unsupported payment gateway {settings.gateway}")
