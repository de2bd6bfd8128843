"""
Promo Code Service - Discount resolution and promo code management.
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from ..exceptions import ConflictException, StorageError
from .models import PromoCode
from .schemas import PromoCodeCreate

# Set up logging
logger = logging.getLogger(__name__)

NO_DISCOUNT = Decimal("0")

def find_valid_promo_code(db: Session, code: str, now: datetime) -> Optional[PromoCode]:
    """
    Look up an active, unexpired promo code by exact match.

    Codes are unique, but rows are ordered by primary key so the first
    match is deterministic regardless of the backing store.

    Args:
        db: Database session
        code: Code string, matched case-sensitively
        now: Reference instant for the expiry check

    Returns:
        PromoCode or None
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return (
        db.query(PromoCode)
        .filter(
            PromoCode.code == code,
            PromoCode.is_active.is_(True),
            PromoCode.expiry_date >= now,
        )
        .order_by(PromoCode.id)
        .first()
    )

async def resolve_discount(db: Session, promo_code: Optional[str], now: datetime) -> Decimal:
    """
    Resolve the discount percentage for an optional promo code.

    Unknown, inactive or expired codes give no discount, and so does a
    failed lookup: the resolver never raises.

    Args:
        db: Database session
        promo_code: Code supplied by the caller, may be None or empty
        now: Reference instant for the expiry check

    Returns:
        Decimal: Discount percentage, 0 when nothing applies
    """
    if not promo_code:
        return NO_DISCOUNT

    try:
        promo = await run_in_threadpool(find_valid_promo_code, db, promo_code, now)
    except SQLAlchemyError as e:
        logger.error(f"Promo code lookup failed for '{promo_code}', applying no discount: {str(e)}")
        return NO_DISCOUNT

    if promo is None:
        logger.debug(f"Promo code '{promo_code}' not valid, applying no discount")
        return NO_DISCOUNT

    logger.debug(f"Promo code '{promo_code}' applied: {promo.discount_percentage}%")
    return Decimal(str(promo.discount_percentage))

def create_promo_code(db: Session, promo_data: PromoCodeCreate) -> PromoCode:
    """
    Create a new promo code.

    Args:
        db: Database session
        promo_data: Validated promo code fields

    Returns:
        PromoCode: The stored record

    Raises:
        ConflictException: If the code already exists
        StorageError: If the record cannot be saved
    """
    existing = db.query(PromoCode).filter(PromoCode.code == promo_data.code).first()
    if existing:
        raise ConflictException(f"Promo code '{promo_data.code}' already exists")

    promo = PromoCode(
        code=promo_data.code,
        is_active=promo_data.is_active,
        expiry_date=promo_data.expiry_date,
        discount_percentage=promo_data.discount_percentage,
    )
    db.add(promo)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictException(f"Promo code '{promo_data.code}' already exists")
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"Failed to store promo code '{promo_data.code}'")
        raise StorageError(e, "Failed to save promo code")
    db.refresh(promo)
    logger.info(f"Promo code created: {promo.code} ({promo.discount_percentage}%)")
    return promo
