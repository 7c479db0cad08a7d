"""Rental price computation with tiered day discounts"""

from decimal import Decimal
from typing import Sequence, Tuple

# (threshold, discount): days above the threshold get the discount.
# Processed from the highest threshold down.
DAY_DISCOUNT_TIERS: Tuple[Tuple[int, Decimal], ...] = (
    (10, Decimal("0.5")),
    (4, Decimal("0.3")),
    (1, Decimal("0.1")),
)


def discounted_day_charge(
    nb_days: int,
    price_per_day: int,
    tiers: Sequence[Tuple[int, Decimal]] = DAY_DISCOUNT_TIERS,
) -> Tuple[Decimal, int]:
    """
    Charge the days that fall above each discount threshold.

    Each tier bills the days strictly above its threshold that were not
    already billed by a higher tier, then the day count is clamped to the
    threshold for the next tier.

    Returns:
        (discounted charge in fractional cents, days left at full price)

    Example:
        12 days at 2000/day:
        2 days at -50% = 2000, 6 days at -30% = 8400, 3 days at -10% = 5400
        → (15800, 1)
    """
    charge = Decimal(0)
    remaining = nb_days

    for threshold, discount in tiers:
        if remaining > threshold:
            charge += (1 - discount) * (remaining - threshold) * price_per_day
            remaining = threshold

    return charge, remaining


def calculate_price(nb_days: int, price_per_day: int, price_per_km: int, nb_kms: int) -> int:
    """
    Compute the price of a rental in cents.

    Distance is billed at the full per-km rate. Days go through the discount
    tiers and whatever remains is billed at the full daily rate. The total is
    truncated to whole cents.
    """
    day_charge, full_price_days = discounted_day_charge(nb_days, price_per_day)
    price = Decimal(nb_kms * price_per_km) + day_charge + full_price_days * price_per_day
    return int(price)
