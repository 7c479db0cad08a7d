"""Commission split between insurance, roadside assistance and the platform"""

import logging
from decimal import Decimal
from carshare_billing.domain.models import Commission

logger = logging.getLogger(__name__)

COMMISSION_RATE = Decimal("0.3")
ASSISTANCE_FEE_PER_DAY = 100  # cents


def calculate_commission(price: int, nb_days: int) -> Commission:
    """
    Split the commission pool taken on a rental.

    - pool: 30% of the price, truncated to cents
    - insurance: half of the pool
    - assistance: flat 1€ per rental day, independent of the pool
    - drivy: whatever is left; negative when assistance exceeds the remainder
    """
    pool = int(COMMISSION_RATE * price)
    insurance_fee = pool // 2
    assistance_fee = ASSISTANCE_FEE_PER_DAY * nb_days
    drivy_fee = pool - insurance_fee - assistance_fee

    if drivy_fee < 0:
        logger.warning(
            "Commission pool exhausted by assistance fee",
            extra={"price": price, "nb_days": nb_days, "drivy_fee": drivy_fee},
        )

    return Commission(
        insurance_fee=insurance_fee,
        assistance_fee=assistance_fee,
        drivy_fee=drivy_fee,
    )
