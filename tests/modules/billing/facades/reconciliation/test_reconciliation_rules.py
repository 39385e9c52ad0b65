# -*- coding: utf-8 -*-
from decimal import Decimal

import pytest

from qorinti.modules.billing.enums import CommissionStatus
from qorinti.modules.billing.facades.reconciliation import (
    compute_outstanding_balance,
    resolve_commission_status,
    sum_payments,
)
from qorinti.modules.billing.models import Commission, CommissionPayment


@pytest.mark.parametrize(
    "paid, amount, expected",
    [
        (0, 15, CommissionStatus.GENERATED),
        (10, 15, CommissionStatus.PARTIAL),
        (15, 15, CommissionStatus.PAID),
        (20, 15, CommissionStatus.PAID),
        (0.1 + 0.2, 0.3, CommissionStatus.PAID),
        (-5, 15, CommissionStatus.GENERATED),
        (0, 0, CommissionStatus.PAID),
    ],
)
def test_resolve_commission_status(paid, amount, expected):
    assert resolve_commission_status(paid, amount) is expected


def test_status_is_idempotent():
    payments = [CommissionPayment(amount=10), CommissionPayment(amount=5)]
    first = resolve_commission_status(sum_payments(payments), 15)
    second = resolve_commission_status(sum_payments(payments), 15)
    assert first is second is CommissionStatus.PAID


def test_sum_payments_ignores_garbage():
    payments = [
        CommissionPayment.model_validate({"amount": "10.10"}),
        CommissionPayment.model_validate({"amount": None}),
        CommissionPayment.model_validate({"amount": 4.9}),
    ]
    assert sum_payments(payments) == 15.0


def test_sum_payments_is_not_rounded():
    payments = [CommissionPayment(amount=7.5), CommissionPayment(amount=7.495)]
    assert sum_payments(payments) == Decimal("14.995")


@pytest.mark.parametrize("amounts", [[14.995], [7.5, 7.496], [14.999]])
def test_status_stays_partial_when_short_by_fraction_of_cent(amounts):
    payments = [CommissionPayment(amount=a) for a in amounts]
    assert resolve_commission_status(sum_payments(payments), 15.00) is CommissionStatus.PARTIAL


def test_outstanding_balance_excludes_paid():
    commissions = [
        Commission(id="c1", amount=15, status="GENERATED"),
        Commission(id="c2", amount=7.5, status="PARTIAL"),
        Commission(id="c3", amount=30, status="PAID"),
        Commission.model_validate({"id": "c4", "amount": 2.5}),
    ]
    assert compute_outstanding_balance(commissions) == 25.0


def test_outstanding_balance_uses_fresh_status_override():
    commissions = [
        Commission(id="c1", amount=15, status="PARTIAL"),
        Commission(id="c2", amount=5, status="GENERATED"),
    ]
    assert compute_outstanding_balance(commissions, {"c1": CommissionStatus.PAID}) == 5.0
    assert compute_outstanding_balance(commissions, {"c2": CommissionStatus.PAID}) == 15.0
# Fin del archivo tests/modules/billing/facades/reconciliation/test_reconciliation_rules.py
