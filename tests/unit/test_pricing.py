"""Unit tests for rental price computation"""

import pytest
from decimal import Decimal
from carshare_billing.domain.pricing import calculate_price, discounted_day_charge


@pytest.mark.parametrize(
    "nb_days, expected",
    [
        (1, 2000),  # full price only
        (2, 3800),  # 2000 + 0.9 * 2000
        (4, 7400),  # 2000 + 3 * 0.9 * 2000
        (5, 8800),  # 7400 + 0.7 * 2000
        (10, 15800),  # 7400 + 6 * 0.7 * 2000
        (11, 16800),  # 15800 + 0.5 * 2000
        (20, 25800),  # 15800 + 10 * 0.5 * 2000
    ],
)
def test_calculate_price_day_tiers(nb_days, expected):
    """Test tiered day discounts without distance"""
    assert calculate_price(nb_days, 2000, 10, 0) == expected


def test_calculate_price_distance_not_discounted():
    """Test distance is billed at the full per-km rate on top of the days"""
    assert calculate_price(1, 2000, 10, 100) == 3000
    assert calculate_price(12, 2000, 10, 1000) == 27800


def test_calculate_price_truncates_fractional_cents():
    """Test fractional cents are truncated, not rounded"""
    # 1 day at 1001 + 1 day at 0.9 * 1001 = 1901.9
    assert calculate_price(2, 1001, 0, 0) == 1901


def test_discounted_day_charge_single_day():
    """Test a single day skips every tier"""
    assert discounted_day_charge(1, 2000) == (Decimal(0), 1)


def test_discounted_day_charge_accumulates_every_tier():
    """Test a long rental goes through all tiers and leaves one full-price day"""
    charge, remaining = discounted_day_charge(12, 2000)

    # 2 days at -50%, 6 days at -30%, 3 days at -10%
    assert charge == Decimal(2000 + 8400 + 5400)
    assert remaining == 1


def test_discounted_day_charge_custom_tiers():
    """Test the tier table can be swapped"""
    charge, remaining = discounted_day_charge(7, 1000, tiers=((5, Decimal("0.2")),))

    assert charge == Decimal(1600)
    assert remaining == 5
