"""Rental modifications - billing delta between a rental and its amended version"""

from dataclasses import replace
from typing import List, Mapping
from carshare_billing.domain.models import (
    Action,
    Car,
    Rental,
    RentalInfo,
    RentalModification,
    ACTORS,
    DEBIT,
    CREDIT,
)
from carshare_billing.domain.exceptions import UnknownActorError
from carshare_billing.domain.ledger import index_by_actor
from carshare_billing.domain.rentals import process_rental

# Rental fields a modification may override
MODIFIABLE_FIELDS = ("start_date", "end_date", "distance", "deductible_reduction")


def apply_modification(rental: Rental, modification: RentalModification) -> Rental:
    """Return a new rental with the modification's present fields overlaid"""
    overrides = {
        field: getattr(modification, field)
        for field in MODIFIABLE_FIELDS
        if getattr(modification, field) is not None
    }
    return replace(rental, **overrides)


def _opposite(action_type: str) -> str:
    return CREDIT if action_type == DEBIT else DEBIT


def compute_delta_actions(original: RentalInfo, amended: RentalInfo) -> List[Action]:
    """
    Diff two ledgers actor by actor.

    For each actor the raw difference is new amount minus original amount.
    A negative difference reverses the direction of the new action; the delta
    amount is always the absolute difference. Zero deltas are kept.

    Raises:
        UnknownActorError: If an actor is missing from either ledger
    """
    original_actions = index_by_actor(original.actions)
    amended_actions = index_by_actor(amended.actions)

    deltas = []
    for actor in ACTORS:
        if actor not in original_actions or actor not in amended_actions:
            raise UnknownActorError(actor)

        new_action = amended_actions[actor]
        balance = new_action.amount - original_actions[actor].amount
        action_type = _opposite(new_action.type) if balance < 0 else new_action.type

        deltas.append(Action(who=actor, type=action_type, amount=abs(balance)))

    return deltas


def process_modification(
    original_rental: Rental,
    modification: RentalModification,
    original_info: RentalInfo,
    cars: Mapping[int, Car],
) -> List[Action]:
    """
    Compute what each actor must be billed when a rental is modified.

    The amended rental goes through the full rental pipeline and its ledger
    is diffed against the original one.
    """
    amended_rental = apply_modification(original_rental, modification)
    amended_info = process_rental(amended_rental, cars)
    return compute_delta_actions(original_info, amended_info)
