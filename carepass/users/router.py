"""
User Router - Member-facing endpoints.
"""
from typing import Any, Dict
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..auth.dependencies import require_auth
from ..config import Settings
from ..database import get_db
from ..dependencies import get_email_dispatcher, get_settings
from ..notifications.dispatcher import EmailDispatcher
from .schemas import SubscriptionEmailRequest, SubscriptionEmailResponse
from .service import send_subscription_email

router = APIRouter()

@router.post("/send-subscription-email", response_model=SubscriptionEmailResponse)
async def send_subscription_email_route(
    email_request: SubscriptionEmailRequest,
    claims: Dict[str, Any] = Depends(require_auth),
    db: Session = Depends(get_db),
    dispatcher: EmailDispatcher = Depends(get_email_dispatcher),
    app_settings: Settings = Depends(get_settings)
):
    """
    Send the subscription confirmation email to a member

    Requires a bearer token. The price reflects the promo code when it is
    active and unexpired; any other code quotes the full price.
    """
    return await send_subscription_email(
        db=db,
        dispatcher=dispatcher,
        user_id=email_request.user_id,
        promo_code=email_request.promo_code,
        sender_email=app_settings.sender_email,
    )
