# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/facades/reconciliation/__init__.py

Submódulo de reconciliación - estado de comisiones y saldo del conductor.

Autor: Qorinti
Fecha: 2026-10-06
"""

from .balance import compute_outstanding_balance, pending_commissions
from .core import (
    reconcile_commission_payment,
    recompute_commission,
    recompute_driver_balance,
)
from .rules import resolve_commission_status, sum_payments

__all__ = [
    "compute_outstanding_balance",
    "pending_commissions",
    "reconcile_commission_payment",
    "recompute_commission",
    "recompute_driver_balance",
    "resolve_commission_status",
    "sum_payments",
]

# Fin del archivo qorinti/modules/billing/facades/reconciliation/__init__.py
