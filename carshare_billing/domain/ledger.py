"""Ledger construction - money movements between the rental actors"""

from typing import Dict, Iterable, List
from carshare_billing.domain.models import (
    Action,
    Commission,
    Options,
    DEBIT,
    CREDIT,
    DRIVER,
    OWNER,
    INSURANCE,
    ASSISTANCE,
    DRIVY,
)


def build_actions(price: int, commission: Commission, options: Options) -> List[Action]:
    """
    Build the ledger of a rental.

    Order is fixed: driver, owner, insurance, assistance, drivy.
    - driver pays the price plus the options
    - owner receives the price minus the whole commission
    - insurance and assistance receive their fee
    - drivy receives its fee plus the options

    The drivy amount is passed through as-is, even when negative.
    """
    deductible = options.deductible_reduction

    return [
        Action(who=DRIVER, type=DEBIT, amount=price + deductible),
        Action(who=OWNER, type=CREDIT, amount=price - commission.total),
        Action(who=INSURANCE, type=CREDIT, amount=commission.insurance_fee),
        Action(who=ASSISTANCE, type=CREDIT, amount=commission.assistance_fee),
        Action(who=DRIVY, type=CREDIT, amount=commission.drivy_fee + deductible),
    ]


def ledger_balance(actions: Iterable[Action]) -> int:
    """Sum of credits minus debits; zero for a balanced ledger"""
    return sum(action.signed_amount for action in actions)


def index_by_actor(actions: Iterable[Action]) -> Dict[str, Action]:
    """Map each actor to its action"""
    return {action.who: action for action in actions}
