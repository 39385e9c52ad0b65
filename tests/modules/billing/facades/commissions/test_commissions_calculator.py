# -*- coding: utf-8 -*-
import pytest

from qorinti.modules.billing.facades.commissions import COMMISSION_PERCENTAGE, compute_commission_amount


def test_percentage_is_fifteen():
    assert COMMISSION_PERCENTAGE == 15.0


@pytest.mark.parametrize(
    "base, expected",
    [
        (100, 15.0),
        (100.0, 15.0),
        ("100", 15.0),
        (33.33, 5.0),       # 4.9995 → 5.00 (half-up)
        (10.03, 1.5),       # 1.5045 → 1.50
        (0.1, 0.02),        # 0.015 → 0.02
        (None, 0.0),
        ("abc", 0.0),
        (float("nan"), 0.0),
    ],
)
def test_compute_commission_amount(base, expected):
    assert compute_commission_amount(base) == expected


def test_custom_percentage():
    assert compute_commission_amount(200, 10.0) == 20.0
# Fin del archivo tests/modules/billing/facades/commissions/test_commissions_calculator.py
