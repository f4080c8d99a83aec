import time
from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from transfers24.api import deps
from transfers24.config import Settings
from transfers24.main import app
from transfers24.services.gateways import StubGateway
from transfers24.services.handler import PaymentHandler

from .conftest import signed_callback


@pytest.fixture()
def client(settings: Settings, gateway: StubGateway):
    app.dependency_overrides[deps.get_payment_handler] = lambda: PaymentHandler(gateway, settings=settings)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_status_callback_verified(client: TestClient, gateway: StubGateway) -> None:
    response = client.post("/api/v1/transfers24/status", data=signed_callback("global-crc"))

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "session_id": "session-1", "order_id": "987654"}
    assert [call["method"] for call in gateway.calls] == ["verify_transaction"]


def test_status_callback_bad_signature(client: TestClient, gateway: StubGateway) -> None:
    response = client.post("/api/v1/transfers24/status", data=signed_callback("forged"))

    assert response.status_code == 400
    assert gateway.calls == []


def test_status_callback_incomplete(client: TestClient) -> None:
    response = client.post("/api/v1/transfers24/status", data={"p24_session_id": "s"})

    assert response.status_code == 400


def test_redirect(client: TestClient) -> None:
    response = client.get("/api/v1/transfers24/redirect/TOKEN-1", follow_redirects=False)

    assert response.status_code == 302
    assert response.headers["location"] == "https://stub.invalid/trnRequest/TOKEN-1"


def test_redirect_failure_message(settings: Settings, gateway: StubGateway) -> None:
    per_call = settings.model_copy(update={"credentials_scope": True})
    app.dependency_overrides[deps.get_payment_handler] = lambda: PaymentHandler(gateway, settings=per_call)
    try:
        response = TestClient(app).get("/api/v1/transfers24/redirect/TOKEN-1", follow_redirects=False)
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 400
    assert response.json() == {"detail": "Empty credentials."}


def test_default_dependencies() -> None:
    stub_settings = Settings(gateway="stub")

    handler = deps.get_payment_handler(stub_settings, deps.get_payment_gateway(stub_settings))

    assert isinstance(handler.gateway, StubGateway)


class _SlowGateway(StubGateway):
    def verify_transaction(self, fields):
        time.sleep(0.5)
        return super().verify_transaction(fields)


def test_status_callbacks_do_not_block_each_other(settings: Settings) -> None:
    gateway = _SlowGateway(settings)
    app.dependency_overrides[deps.get_payment_handler] = lambda: PaymentHandler(gateway, settings=settings)
    try:
        with TestClient(app) as client, ThreadPoolExecutor(max_workers=4) as pool:
            started = time.monotonic()
            responses = list(
                pool.map(
                    lambda _: client.post("/api/v1/transfers24/status", data=signed_callback("global-crc")),
                    range(4),
                )
            )
            elapsed = time.monotonic() - started
    finally:
        app.dependency_overrides.clear()

    assert [response.status_code for response in responses] == [200] * 4
    assert len(gateway.calls) == 4
    assert elapsed < 1.5
