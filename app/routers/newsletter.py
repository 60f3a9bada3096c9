import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError

from app.dependencies import get_settings
from app.schemas.site import SubscribeRequest, SubscribeResponse
from app.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


async def _read_subscribe_request(request: Request) -> SubscribeRequest:
    """Any unusable body is a missing email, never a 422."""
    try:
        payload = await request.json()
        return SubscribeRequest.model_validate(payload)
    except (ValueError, ValidationError):
        raise HTTPException(status_code=400, detail="Email required")


@router.post(
    "/subscribe",
    response_model=SubscribeResponse,
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": SubscribeRequest.model_json_schema()}
            }
        }
    },
)
async def subscribe(
    request: Request,
    current_settings: Settings = Depends(get_settings),
):
    """
    Newsletter signup stub.
    The address is logged and discarded; nothing is charged or stored.
    """
    payload = await _read_subscribe_request(request)
    email = (payload.email or "").strip()
    if not email:
        raise HTTPException(status_code=400, detail="Email required")

    logger.info(f"Accepted subscription for {email}")

    if current_settings.payments_enabled:
        logger.info(f"[PAYMENT] Premium subscription flagged for {email}")

    if current_settings.ANALYTICS_KEY_MIXPANEL:
        logger.info("[ANALYTICS] Tracking subscription event with Mixpanel")

    return SubscribeResponse(
        success=True,
        message="Subscription successful",
        premium=current_settings.payments_enabled,
    )
