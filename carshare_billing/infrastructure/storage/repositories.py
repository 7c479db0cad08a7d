"""In-memory lookup tables for cars and rentals, keyed by record id"""

from typing import Dict, Iterable, Iterator, Mapping, Optional, TypeVar
from carshare_billing.domain.models import Car, Rental
from carshare_billing.domain.exceptions import (
    InvalidDatasetError,
    UnknownCarError,
    UnknownRentalError,
)

T = TypeVar("T", Car, Rental)


class _Repository(Mapping[int, T]):
    """Read-only id → record mapping that fails loudly on unknown ids"""

    kind = "record"

    def __init__(self, records: Iterable[T]):
        self._records: Dict[int, T] = {}
        for record in records:
            if record.id in self._records:
                raise InvalidDatasetError(f"Duplicate {self.kind} id: {record.id}")
            self._records[record.id] = record

    def _not_found(self, record_id: int) -> LookupError:
        return KeyError(record_id)

    def __getitem__(self, record_id: int) -> T:
        try:
            return self._records[record_id]
        except KeyError as e:
            raise self._not_found(record_id) from e

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def __iter__(self) -> Iterator[int]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def get(self, record_id: int, default: Optional[T] = None) -> Optional[T]:
        return self._records.get(record_id, default)


class CarRepository(_Repository[Car]):
    """Repository for cars"""

    kind = "car"

    def _not_found(self, record_id: int) -> LookupError:
        return UnknownCarError(record_id)

    def get_car(self, car_id: int) -> Car:
        """Fetch a car, raising UnknownCarError when absent"""
        return self[car_id]


class RentalRepository(_Repository[Rental]):
    """Repository for rentals"""

    kind = "rental"

    def _not_found(self, record_id: int) -> LookupError:
        return UnknownRentalError(record_id)

    def get_rental(self, rental_id: int) -> Rental:
        """Fetch a rental, raising UnknownRentalError when absent"""
        return self[rental_id]
