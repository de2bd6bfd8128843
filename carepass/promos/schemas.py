"""
Promo Code Schemas - Pydantic models for promo code requests and responses.
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, field_validator

class PromoCodeCreate(BaseModel):
    """
    Promo Code Creation Schema

    Fields:
    - code: Case-sensitive code string
    - discount_percentage: Discount in percent (0 to 100)
    - expiry_date: Last instant at which the code is valid
    - is_active: Whether the code can be redeemed (default: True)
    """
    code: str = Field(..., min_length=1)
    discount_percentage: Decimal = Field(..., ge=0, le=100, alias="discountPercentage")
    expiry_date: datetime = Field(..., alias="expiryDate")
    is_active: bool = Field(True, alias="isActive")

    @field_validator("expiry_date")
    @classmethod
    def expiry_to_utc(cls, v: datetime) -> datetime:
        """Normalize the expiry to UTC; a naive value is taken as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    class Config:
        populate_by_name = True

class PromoCodeResponse(BaseModel):
    """Promo code as returned by the API."""
    id: int
    code: str
    discount_percentage: float = Field(..., alias="discountPercentage")
    expiry_date: datetime = Field(..., alias="expiryDate")
    is_active: bool = Field(..., alias="isActive")

    class Config:
        from_attributes = True
        populate_by_name = True

class PriceQuoteRequest(BaseModel):
    """Price preview for an optional promo code."""
    promo_code: Optional[str] = Field(None, alias="promoCode")

    class Config:
        populate_by_name = True

class PriceQuoteResponse(BaseModel):
    """Resolved discount and the resulting membership price."""
    discount_percentage: float = Field(..., alias="discountPercentage")
    final_price: str = Field(..., alias="finalPrice")

    class Config:
        populate_by_name = True
