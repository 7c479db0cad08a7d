"""Batch billing of a dataset's rentals and rental modifications"""

import logging
from typing import List
from carshare_billing.domain.models import Dataset, ModificationResult, RentalInfo, DRIVER
from carshare_billing.domain.exceptions import DomainException
from carshare_billing.domain.rentals import process_rental
from carshare_billing.domain.modifications import process_modification
from carshare_billing.infrastructure.storage.repositories import CarRepository, RentalRepository
from carshare_billing.infrastructure.observability.metrics import (
    record_rental,
    record_modification,
    record_error,
)
from carshare_billing.infrastructure.observability.logging import (
    log_rental_billed,
    log_modification_billed,
)

logger = logging.getLogger(__name__)


class BillingService:
    """
    Runs the billing core over every record of a dataset.

    Lookups are built once from the dataset and shared by all records.
    A domain error on any record aborts the run; it is counted and logged
    before being re-raised.
    """

    def __init__(self, dataset: Dataset):
        self.dataset = dataset
        self.cars = CarRepository(dataset.cars)
        self.rentals = RentalRepository(dataset.rentals)

    def bill_rentals(self) -> List[RentalInfo]:
        """Price every rental and build its ledger, in dataset order"""
        billed = []
        for rental in self.dataset.rentals:
            try:
                info = process_rental(rental, self.cars)
            except DomainException as e:
                record_error(type(e).__name__)
                logger.error(f"Rental billing failed: {e}", extra={"rental_id": rental.id})
                raise

            record_rental(info)
            log_rental_billed(rental.id, rental.car_id, info.nb_days, info.price, info.commission.drivy_fee)
            billed.append(info)

        return billed

    def bill_modifications(self) -> List[ModificationResult]:
        """
        Compute the ledger delta of every rental modification.

        Flow:
        1. Bill every original rental once
        2. For each modification, resolve its rental and original billing
        3. Re-bill the amended rental and diff the ledgers
        """
        originals = {info.id: info for info in self.bill_rentals()}

        results = []
        for modification in self.dataset.modifications:
            try:
                rental = self.rentals.get_rental(modification.rental_id)
                deltas = process_modification(rental, modification, originals[rental.id], self.cars)
            except DomainException as e:
                record_error(type(e).__name__)
                logger.error(
                    f"Rental modification billing failed: {e}",
                    extra={"modification_id": modification.id, "rental_id": modification.rental_id},
                )
                raise

            record_modification(deltas)
            driver = next(action for action in deltas if action.who == DRIVER)
            log_modification_billed(modification.id, modification.rental_id, driver.signed_amount)
            results.append(
                ModificationResult(id=modification.id, rental_id=modification.rental_id, actions=tuple(deltas))
            )

        return results
