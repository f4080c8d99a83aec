import logging
from unittest import mock

import pytest

from transfers24.checksum import compute
from transfers24.config import Settings, get_settings
from transfers24.credentials import Credentials
from transfers24.services.gateways import StubGateway
from transfers24.services.handler import PaymentHandler


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        merchant_id="1000",
        pos_id="1000",
        crc="global-crc",
        test_mode=True,
        gateway="stub",
    )


@pytest.fixture()
def per_call_settings(settings: Settings) -> Settings:
    return settings.model_copy(update={"credentials_scope": True})


@pytest.fixture()
def credentials() -> Credentials:
    return Credentials(pos_id=2000, merchant_id=2000, crc="per-call-crc", test_mode=True)


@pytest.fixture()
def gateway(settings: Settings) -> StubGateway:
    return StubGateway(settings)


@pytest.fixture()
def logger() -> mock.Mock:
    return mock.Mock(spec=logging.Logger)


@pytest.fixture()
def handler(gateway: StubGateway, settings: Settings, logger: mock.Mock) -> PaymentHandler:
    return PaymentHandler(gateway, settings=settings, logger=logger)


def signed_callback(crc: str, **overrides: str) -> dict[str, str]:
    callback = {
        "p24_merchant_id": "1000",
        "p24_pos_id": "1000",
        "p24_session_id": "session-1",
        "p24_amount": "1500",
        "p24_currency": "PLN",
        "p24_order_id": "987654",
        "p24_method": "25",
        "p24_statement": "p24-A1-B2",
    }
    callback["p24_sign"] = compute(
        callback["p24_session_id"],
        callback["p24_order_id"],
        callback["p24_amount"],
        callback["p24_currency"],
        crc=crc,
    )
    callback.update(overrides)
    return callback
