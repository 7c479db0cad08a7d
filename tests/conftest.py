"""Pytest fixtures for testing"""

import json
import logging
import pytest
from datetime import date
from pathlib import Path
from typing import Dict
from carshare_billing.domain.models import Car, Rental, RentalModification, Dataset


SAMPLE_DATASET = Path(__file__).resolve().parents[1] / "data" / "data.json"


@pytest.fixture
def car() -> Car:
    """Reference car: 20€/day, 0.10€/km"""
    return Car(id=1, price_per_day=2000, price_per_km=10)


@pytest.fixture
def cars(car: Car) -> Dict[int, Car]:
    """Plain dict car lookup"""
    return {car.id: car}


@pytest.fixture
def one_day_rental() -> Rental:
    """Single day, 100 km, deductible reduction"""
    return Rental(
        id=1,
        car_id=1,
        start_date=date(2015, 12, 8),
        end_date=date(2015, 12, 8),
        distance=100,
        deductible_reduction=True,
    )


@pytest.fixture
def long_rental() -> Rental:
    """12 days, 1000 km, deductible reduction"""
    return Rental(
        id=3,
        car_id=1,
        start_date=date(2015, 7, 3),
        end_date=date(2015, 7, 14),
        distance=1000,
        deductible_reduction=True,
    )


@pytest.fixture
def sample_dataset(car: Car, one_day_rental: Rental, long_rental: Rental) -> Dataset:
    """Dataset mirroring data/data.json"""
    return Dataset(
        cars=(car,),
        rentals=(
            one_day_rental,
            Rental(
                id=2,
                car_id=1,
                start_date=date(2015, 3, 31),
                end_date=date(2015, 4, 1),
                distance=300,
                deductible_reduction=False,
            ),
            long_rental,
        ),
        modifications=(
            RentalModification(id=1, rental_id=1, end_date=date(2015, 12, 10), distance=150),
            RentalModification(id=2, rental_id=3, start_date=date(2015, 7, 4)),
        ),
    )


@pytest.fixture
def dataset_file(tmp_path: Path) -> Path:
    """Copy of the sample dataset in a temporary directory"""
    path = tmp_path / "data.json"
    path.write_text(SAMPLE_DATASET.read_text(encoding="utf-8"), encoding="utf-8")
    return path


@pytest.fixture
def write_dataset(tmp_path: Path):
    """Write an arbitrary dataset document and return its path"""

    def _write(document: dict) -> Path:
        path = tmp_path / "custom.json"
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def restore_root_logger():
    """setup_logging replaces root handlers; put them back after the test"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
