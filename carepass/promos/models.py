"""
Promo Code Model - Percentage discounts on the annual membership.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Numeric, CheckConstraint, func
from ..database import Base, UTCDateTime

class PromoCode(Base):
    """
    Promo Code Model

    Fields:
    - id: Primary key
    - code: Case-sensitive code string, unique
    - is_active: Whether the code can currently be redeemed
    - expiry_date: Last instant (UTC) at which the code is valid
    - discount_percentage: Discount applied to the base price, 0 to 100
    - created_at: When the code was created
    """
    __tablename__ = "promo_codes"
    __table_args__ = (
        CheckConstraint(
            "discount_percentage >= 0 AND discount_percentage <= 100",
            name="ck_promo_codes_discount_range",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String, unique=True, index=True, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    expiry_date = Column(UTCDateTime, nullable=False)
    discount_percentage = Column(Numeric(5, 2), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        """String representation of the PromoCode model"""
        return f"<PromoCode(code='{self.code}', discount={self.discount_percentage}, active={self.is_active})>"
