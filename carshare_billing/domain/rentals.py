"""Rental processing - core billing pipeline for a single rental"""

from typing import Mapping
from carshare_billing.domain.models import Car, Rental, RentalInfo
from carshare_billing.domain.exceptions import UnknownCarError, MalformedDateRangeError
from carshare_billing.domain.pricing import calculate_price
from carshare_billing.domain.commission import calculate_commission
from carshare_billing.domain.options import calculate_options
from carshare_billing.domain.ledger import build_actions
from carshare_billing.utils.date_utils import count_days_inclusive


def billable_days(rental: Rental) -> int:
    """
    Count the billed days of a rental: first and last day are both billed.

    Raises:
        MalformedDateRangeError: If the rental ends before it starts
    """
    if rental.end_date < rental.start_date:
        raise MalformedDateRangeError(
            f"Rental {rental.id} ends on {rental.end_date} before it starts on {rental.start_date}"
        )
    return count_days_inclusive(rental.start_date, rental.end_date)


def process_rental(rental: Rental, cars: Mapping[int, Car]) -> RentalInfo:
    """
    Main entry point: price a rental and build its ledger.

    Flow:
    1. Count billable days and resolve the car rates
    2. Price the rental
    3. Split the commission
    4. Price the options
    5. Build the actions

    Raises:
        MalformedDateRangeError: If the rental ends before it starts
        UnknownCarError: If the rental's car is not in the lookup
    """
    nb_days = billable_days(rental)

    try:
        car = cars[rental.car_id]
    except KeyError as e:
        raise UnknownCarError(rental.car_id) from e

    price = calculate_price(nb_days, car.price_per_day, car.price_per_km, rental.distance)
    commission = calculate_commission(price, nb_days)
    options = calculate_options(nb_days, rental.deductible_reduction)
    actions = build_actions(price, commission, options)

    return RentalInfo(
        id=rental.id,
        nb_days=nb_days,
        price_per_day=car.price_per_day,
        price_per_km=car.price_per_km,
        nb_kms=rental.distance,
        deductible_option=rental.deductible_reduction,
        price=price,
        commission=commission,
        options=options,
        actions=tuple(actions),
    )
