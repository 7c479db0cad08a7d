"""Pydantic schemas for the dataset and output JSON documents"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import date
from typing import List, Optional

from carshare_billing.domain.models import (
    Action,
    Car,
    Dataset,
    ModificationResult,
    Rental,
    RentalInfo,
    RentalModification,
)


class CarSchema(BaseModel):
    """Car entry of the dataset"""

    model_config = ConfigDict(extra="ignore")

    id: int
    price_per_day: int = Field(..., ge=0, description="Daily rate in cents")
    price_per_km: int = Field(..., ge=0, description="Distance rate in cents")

    def to_domain(self) -> Car:
        return Car(id=self.id, price_per_day=self.price_per_day, price_per_km=self.price_per_km)


class RentalSchema(BaseModel):
    """Rental entry of the dataset"""

    model_config = ConfigDict(extra="ignore")

    id: int
    car_id: int
    start_date: date
    end_date: date
    distance: int = Field(..., ge=0, description="Distance in km")
    deductible_reduction: bool = False

    def to_domain(self) -> Rental:
        return Rental(
            id=self.id,
            car_id=self.car_id,
            start_date=self.start_date,
            end_date=self.end_date,
            distance=self.distance,
            deductible_reduction=self.deductible_reduction,
        )


class RentalModificationSchema(BaseModel):
    """Rental modification entry; omitted fields keep the rental's value"""

    model_config = ConfigDict(extra="ignore")

    id: int
    rental_id: int
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    distance: Optional[int] = Field(None, ge=0)
    deductible_reduction: Optional[bool] = None

    def to_domain(self) -> RentalModification:
        return RentalModification(
            id=self.id,
            rental_id=self.rental_id,
            start_date=self.start_date,
            end_date=self.end_date,
            distance=self.distance,
            deductible_reduction=self.deductible_reduction,
        )


class DatasetSchema(BaseModel):
    """Input document"""

    cars: List[CarSchema]
    rentals: List[RentalSchema]
    rental_modifications: List[RentalModificationSchema] = []

    def to_domain(self) -> Dataset:
        return Dataset(
            cars=tuple(car.to_domain() for car in self.cars),
            rentals=tuple(rental.to_domain() for rental in self.rentals),
            modifications=tuple(mod.to_domain() for mod in self.rental_modifications),
        )


class ActionSchema(BaseModel):
    """Single ledger action"""

    who: str
    type: str
    amount: int

    @classmethod
    def from_domain(cls, action: Action) -> "ActionSchema":
        return cls(who=action.who, type=action.type, amount=action.amount)


class CommissionSchema(BaseModel):
    insurance_fee: int
    assistance_fee: int
    drivy_fee: int


class OptionsSchema(BaseModel):
    deductible_reduction: int


class RentalOutput(BaseModel):
    """Billed rental; price breakdown only present in detailed output"""

    id: int
    price: Optional[int] = None
    commission: Optional[CommissionSchema] = None
    options: Optional[OptionsSchema] = None
    actions: List[ActionSchema]

    @classmethod
    def from_domain(cls, info: RentalInfo, detailed: bool = False) -> "RentalOutput":
        output = cls(
            id=info.id,
            actions=[ActionSchema.from_domain(action) for action in info.actions],
        )
        if detailed:
            output.price = info.price
            output.commission = CommissionSchema(
                insurance_fee=info.commission.insurance_fee,
                assistance_fee=info.commission.assistance_fee,
                drivy_fee=info.commission.drivy_fee,
            )
            output.options = OptionsSchema(deductible_reduction=info.options.deductible_reduction)
        return output


class RentalsDocument(BaseModel):
    """Output document of a rentals run"""

    rentals: List[RentalOutput]


class RentalModificationOutput(BaseModel):
    """Billed rental modification"""

    id: int
    rental_id: int
    actions: List[ActionSchema]

    @classmethod
    def from_domain(cls, result: ModificationResult) -> "RentalModificationOutput":
        return cls(
            id=result.id,
            rental_id=result.rental_id,
            actions=[ActionSchema.from_domain(action) for action in result.actions],
        )


class ModificationsDocument(BaseModel):
    """Output document of a modifications run"""

    rental_modifications: List[RentalModificationOutput]
