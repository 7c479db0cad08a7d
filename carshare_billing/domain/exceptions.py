"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class UnknownCarError(DomainException, LookupError):
    """Rental references a car id that is not in the car lookup"""

    def __init__(self, car_id: int):
        super().__init__(f"Unknown car id: {car_id}")
        self.car_id = car_id


class UnknownRentalError(DomainException, LookupError):
    """Modification references a rental id that is not in the dataset"""

    def __init__(self, rental_id: int):
        super().__init__(f"Unknown rental id: {rental_id}")
        self.rental_id = rental_id


class UnknownActorError(DomainException, LookupError):
    """Ledger is missing one of the required actors"""

    def __init__(self, actor: str):
        super().__init__(f"Actor missing from ledger: {actor}")
        self.actor = actor


class MalformedDateRangeError(DomainException, ValueError):
    """Rental ends before it starts"""

    pass


class InvalidDatasetError(DomainException):
    """Dataset document is unreadable, malformed or inconsistent"""

    pass
