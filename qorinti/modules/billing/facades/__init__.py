# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/facades/__init__.py

Facades del módulo Billing: una por handler reactivo.

- receipts:        emisión de comprobantes por pago
- commissions:     comisión de plataforma por pagos DIRECT_*
- reconciliation:  estado de comisiones y saldo del conductor

Autor: Qorinti
Fecha: 2026-10-06
"""

from .receipts import issue_receipt
from .commissions import generate_commission
from .reconciliation import (
    reconcile_commission_payment,
    recompute_commission,
    recompute_driver_balance,
)

__all__ = [
    "issue_receipt",
    "generate_commission",
    "reconcile_commission_payment",
    "recompute_commission",
    "recompute_driver_balance",
]

# Fin del archivo qorinti/modules/billing/facades/__init__.py
