"""
User Schemas - Pydantic models for user-facing requests and responses.
"""
from typing import Optional
from pydantic import BaseModel, Field

class SubscriptionEmailRequest(BaseModel):
    """
    Subscription Email Request Schema

    Fields:
    - user_id: ID of the member to notify
    - promo_code: Optional promo code applied to the membership price
    """
    user_id: str = Field(..., min_length=1, alias="userId")
    promo_code: Optional[str] = Field(None, alias="promoCode")

    class Config:
        populate_by_name = True

class SubscriptionEmailResponse(BaseModel):
    """Confirmation returned once the email has been handed to the transport."""
    message: str
    recipient: str
    final_price: str = Field(..., alias="finalPrice")
    message_id: Optional[str] = Field(None, alias="messageId")

    class Config:
        populate_by_name = True
