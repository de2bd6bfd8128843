"""
Promo Code Router - Promo code management and price quotes.
"""
from datetime import datetime, timezone
from typing import Any, Dict
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..auth.dependencies import require_auth
from ..database import get_db
from .pricing import calculate_final_price
from .schemas import PromoCodeCreate, PromoCodeResponse, PriceQuoteRequest, PriceQuoteResponse
from .service import create_promo_code, resolve_discount

router = APIRouter()

@router.post("", response_model=PromoCodeResponse, status_code=status.HTTP_201_CREATED)
def create_promo_code_route(
    promo_data: PromoCodeCreate,
    claims: Dict[str, Any] = Depends(require_auth),
    db: Session = Depends(get_db)
):
    """
    Create a promo code

    Requires a bearer token. Codes are unique and case-sensitive.
    """
    return create_promo_code(db, promo_data)

@router.post("/quote", response_model=PriceQuoteResponse)
async def quote_price_route(
    quote_request: PriceQuoteRequest,
    db: Session = Depends(get_db)
):
    """
    Preview the membership price for an optional promo code

    Invalid or expired codes quote the undiscounted price.
    """
    discount = await resolve_discount(db, quote_request.promo_code, datetime.now(timezone.utc))
    return PriceQuoteResponse(
        discount_percentage=float(discount),
        final_price=calculate_final_price(discount),
    )
