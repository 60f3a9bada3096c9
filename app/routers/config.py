from fastapi import APIRouter, Depends

from app.dependencies import get_settings
from app.schemas.site import ClientConfig
from app.settings import Settings

router = APIRouter()


@router.get("/config", response_model=ClientConfig)
def get_client_config(current_settings: Settings = Depends(get_settings)):
    """
    Integration flags for the front end.
    Only presence and obfuscated identifiers are exposed, never raw keys.
    """
    return ClientConfig(
        analyticsEnabled=current_settings.analytics_enabled,
        paymentsEnabled=current_settings.payments_enabled,
        googleAnalyticsId=current_settings.google_analytics_id,
        mixpanelToken=current_settings.mixpanel_token,
    )
