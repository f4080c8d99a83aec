import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse

from ...responses.outcomes import InvalidResponse
from ...services.handler import PaymentHandler
from .. import deps

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transfers24", tags=["transfers24"])


@router.post("/status")
def payment_status(
    callback: Annotated[dict[str, str], Depends(deps.get_callback_fields)],
    handler: Annotated[PaymentHandler, Depends(deps.get_payment_handler)],
):
    result = handler.verify_payment(callback)
    if isinstance(result, InvalidResponse):
        raise HTTPException(status_code=400, detail=result.message)
    if not result.is_success():
        logger.warning(
            "Payment verification failed",
            extra={"session_id": callback.get("p24_session_id"), "code": result.error_code},
        )
        raise HTTPException(status_code=400, detail="Payment verification failed")
    return {
        "status": "ok",
        "session_id": result.session_id,
        "order_id": result.order_id,
    }


@router.get("/redirect/{token}")
def payment_redirect(
    token: str,
    handler: Annotated[PaymentHandler, Depends(deps.get_payment_handler)],
):
    url = handler.build_redirect_url(token, redirect=True)
    if not url.startswith(("http://", "https://")):
        raise HTTPException(status_code=400, detail=url)
    return RedirectResponse(url, status_code=302)
