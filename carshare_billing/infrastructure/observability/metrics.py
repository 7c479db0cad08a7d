"""Prometheus metrics for billed rentals, modifications and failures"""

from pathlib import Path
from typing import Sequence
from prometheus_client import Counter, Histogram, REGISTRY, write_to_textfile
from carshare_billing.domain.models import Action, RentalInfo, DRIVER

# Billing metrics
rentals_billed_counter = Counter(
    "carshare_rentals_billed_total",
    "Total rentals billed",
    ["deductible"],  # yes | no
)

modifications_billed_counter = Counter(
    "carshare_modifications_billed_total",
    "Total rental modifications billed",
    ["driver_direction"],  # debit | credit | none
)

negative_platform_fee_counter = Counter(
    "carshare_negative_platform_fee_total",
    "Rentals whose platform fee went negative",
)

billing_errors_counter = Counter(
    "carshare_billing_errors_total",
    "Records that failed billing",
    ["kind"],  # exception class name
)

rental_price_histogram = Histogram(
    "carshare_rental_price_cents",
    "Rental price distribution in cents",
    buckets=[1_000, 5_000, 10_000, 25_000, 50_000, 100_000, 250_000],
)


def record_rental(info: RentalInfo) -> None:
    """Record metrics for a billed rental"""
    rentals_billed_counter.labels(deductible="yes" if info.deductible_option else "no").inc()
    rental_price_histogram.observe(info.price)

    if info.commission.drivy_fee < 0:
        negative_platform_fee_counter.inc()


def record_modification(deltas: Sequence[Action]) -> None:
    """Record metrics for a billed modification, labelled by what happens to the driver"""
    driver = next(action for action in deltas if action.who == DRIVER)
    direction = "none" if driver.amount == 0 else driver.type
    modifications_billed_counter.labels(driver_direction=direction).inc()


def record_error(kind: str) -> None:
    billing_errors_counter.labels(kind=kind).inc()


def export_metrics(path: Path) -> None:
    """Write the default registry in Prometheus textfile format"""
    write_to_textfile(str(path), REGISTRY)
