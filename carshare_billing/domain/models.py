"""Domain models - pure Python dataclasses representing billing entities"""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

DEBIT = "debit"
CREDIT = "credit"

DRIVER = "driver"
OWNER = "owner"
INSURANCE = "insurance"
ASSISTANCE = "assistance"
DRIVY = "drivy"

# Fixed order of actors in every ledger
ACTORS: Tuple[str, ...] = (DRIVER, OWNER, INSURANCE, ASSISTANCE, DRIVY)


@dataclass(frozen=True)
class Car:
    """Car reference data, rates in cents"""

    id: int
    price_per_day: int
    price_per_km: int


@dataclass(frozen=True)
class Rental:
    """Single booking of a car"""

    id: int
    car_id: int
    start_date: date
    end_date: date
    distance: int  # km
    deductible_reduction: bool = False


@dataclass(frozen=True)
class RentalModification:
    """Partial override of a rental; None means the field is not overridden"""

    id: int
    rental_id: int
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    distance: Optional[int] = None
    deductible_reduction: Optional[bool] = None


@dataclass(frozen=True)
class Commission:
    """Split of the commission pool taken on a rental price"""

    insurance_fee: int
    assistance_fee: int
    drivy_fee: int  # can be negative when flat assistance fees exceed the pool

    @property
    def total(self) -> int:
        return self.insurance_fee + self.assistance_fee + self.drivy_fee


@dataclass(frozen=True)
class Options:
    """Priced add-ons billed to the driver"""

    deductible_reduction: int = 0


@dataclass(frozen=True)
class Action:
    """Single money movement for one actor"""

    who: str
    type: str  # "debit" or "credit"
    amount: int

    @property
    def signed_amount(self) -> int:
        """Credit counts positive, debit negative"""
        return self.amount if self.type == CREDIT else -self.amount


@dataclass(frozen=True)
class RentalInfo:
    """Billing outcome of a rental"""

    id: int
    nb_days: int
    price_per_day: int
    price_per_km: int
    nb_kms: int
    deductible_option: bool
    price: int
    commission: Commission
    options: Options
    actions: Tuple[Action, ...]


@dataclass(frozen=True)
class Dataset:
    """Everything a billing run reads"""

    cars: Tuple[Car, ...]
    rentals: Tuple[Rental, ...]
    modifications: Tuple[RentalModification, ...] = ()


@dataclass(frozen=True)
class ModificationResult:
    """Ledger delta produced by a rental modification"""

    id: int
    rental_id: int
    actions: Tuple[Action, ...]
