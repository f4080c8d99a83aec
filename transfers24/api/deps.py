from typing import Annotated

from fastapi import Depends, Request

from ..config import Settings, get_settings
from ..services.gateways import BaseGateway, get_gateway
from ..services.handler import PaymentHandler


async def get_callback_fields(request: Request) -> dict[str, str]:
    """Read the form-encoded status callback; file parts are dropped."""
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


def get_payment_gateway(settings: Annotated[Settings, Depends(get_settings)]) -> BaseGateway:
    return get_gateway(settings)


def get_payment_handler(
    settings: Annotated[Settings, Depends(get_settings)],
    gateway: Annotated[BaseGateway, Depends(get_payment_gateway)],
) -> PaymentHandler:
    return PaymentHandler(gateway, settings=settings)
