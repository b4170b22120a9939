"""
Subscription price computation.

Pure functions with no database dependencies for easy testing. Arithmetic is
done in Decimal so tier multipliers like 0.85 do not drift before rounding.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from libs.common.errors import InvalidRequestError

# Months -> discount for paying the whole period up front
DURATION_DISCOUNTS: dict[int, Decimal] = {
    1: Decimal("0"),
    3: Decimal("0.15"),
    6: Decimal("0.18"),
    12: Decimal("0.20"),
}


def duration_discount(months: int) -> Decimal:
    """Return the up-front discount for a subscription length in months."""
    try:
        return DURATION_DISCOUNTS[months]
    except KeyError:
        allowed = ", ".join(str(m) for m in DURATION_DISCOUNTS)
        raise InvalidRequestError(
            f"Unsupported subscription duration: {months} months (allowed: {allowed})"
        ) from None


def compute_final_price(
    price_per_month: int,
    months: int,
    promo_percentage: Optional[int] = None,
) -> int:
    """
    Price of a subscription:
    round(price * months * (1 - duration discount) * (1 - promo / 100)).

    Rounds half-up to whole currency units.
    """
    total = (
        Decimal(price_per_month)
        * months
        * (Decimal(1) - duration_discount(months))
    )
    if promo_percentage:
        total *= Decimal(1) - Decimal(promo_percentage) / Decimal(100)

    return int(total.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def describe_duration(months: int) -> str:
    if months == 12:
        return "1 Year"
    if months == 1:
        return "1 Month"
    return f"{months} Months"
