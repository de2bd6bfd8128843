"""
User Service - User lookups and the subscription confirmation workflow.
"""
from datetime import datetime, timezone
from typing import Optional
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session
import logging

from ..exceptions import NotFoundException
from ..notifications.composer import compose_subscription_email
from ..notifications.dispatcher import EmailDispatcher
from ..promos.pricing import calculate_final_price
from ..promos.service import resolve_discount
from .models import User
from .schemas import SubscriptionEmailResponse

# Set up logging
logger = logging.getLogger(__name__)

def get_user_by_id(db: Session, user_id: str) -> User:
    """
    Get a user by ID.

    Args:
        db: Database session
        user_id: ID of the user

    Returns:
        User

    Raises:
        NotFoundException: If the user does not exist
    """
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundException("User not found")
    return user

async def send_subscription_email(
    db: Session,
    dispatcher: EmailDispatcher,
    user_id: str,
    promo_code: Optional[str],
    sender_email: str,
    now: Optional[datetime] = None,
) -> SubscriptionEmailResponse:
    """
    Email a member the confirmation of their membership and its price.

    Args:
        db: Database session
        dispatcher: Email dispatcher selected at startup
        user_id: ID of the member to notify
        promo_code: Optional promo code
        sender_email: Address the email is sent from
        now: Reference instant; a single value drives both the promo
            expiry check and the copyright year

    Returns:
        SubscriptionEmailResponse

    Raises:
        NotFoundException: If the user does not exist
        MissingFieldException: If the recipient or sender address is empty
        DispatchError: If the transport fails
    """
    now = now or datetime.now(timezone.utc)

    user = await run_in_threadpool(get_user_by_id, db, user_id)

    discount = await resolve_discount(db, promo_code, now)
    final_price = calculate_final_price(discount)

    message = compose_subscription_email(
        recipient_name=user.name,
        recipient_email=user.email,
        final_price=final_price,
        sender_email=sender_email,
        year=now.year,
    )

    message_id = await dispatcher.send(message)
    logger.info(f"Subscription email sent to user {user.id} at ${final_price}")

    return SubscriptionEmailResponse(
        message="Subscription email sent successfully",
        recipient=message.recipient,
        final_price=final_price,
        message_id=message_id,
    )
