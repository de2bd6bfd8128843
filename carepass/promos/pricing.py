"""
Membership pricing.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

# Annual membership price in USD
BASE_PRICE = Decimal("119.88")

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

def calculate_final_price(
    discount_percentage: Union[Decimal, int, float, str],
    base_price: Decimal = BASE_PRICE,
) -> str:
    """
    Apply a percentage discount to the base price.

    Rounds half-up to cents and never goes below zero.

    Args:
        discount_percentage: Discount in percent, expected within 0 to 100
        base_price: Undiscounted price

    Returns:
        str: Final price with exactly two decimals, e.g. "107.89"
    """
    discount = Decimal(str(discount_percentage))
    price = base_price * (Decimal(1) - discount / Decimal(100))
    price = price.quantize(CENT, rounding=ROUND_HALF_UP)
    if price <= ZERO:
        price = ZERO
    return f"{price:.2f}"
