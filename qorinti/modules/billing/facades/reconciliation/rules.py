# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/facades/reconciliation/rules.py

Reglas puras de liquidación de comisiones.

Autor: Qorinti
Fecha: 2026-10-06
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable

from qorinti.shared.utils.money import to_decimal
from qorinti.modules.billing.enums import CommissionStatus
from qorinti.modules.billing.models import CommissionPayment


def sum_payments(payments: Iterable[CommissionPayment]) -> Decimal:
    """
    Suma exacta (Decimal, sin redondear) de los montos de los pagos.

    El redondeo a céntimos queda para los campos de salida; el estado se
    decide contra la suma exacta.
    """
    return sum((to_decimal(p.amount) for p in payments), Decimal("0"))


def resolve_commission_status(paid_total: Any, commission_amount: Any) -> CommissionStatus:
    """
    Estado según lo pagado frente al monto de la comisión.

    - pagado ≥ monto      → PAID (incluye el caso exacto)
    - 0 < pagado < monto  → PARTIAL
    - en otro caso        → GENERATED

    Examples:
        >>> resolve_commission_status(15, 15)
        <CommissionStatus.PAID: 'PAID'>
        >>> resolve_commission_status(10, 15)
        <CommissionStatus.PARTIAL: 'PARTIAL'>
        >>> resolve_commission_status(0, 15)
        <CommissionStatus.GENERATED: 'GENERATED'>
    """
    paid = to_decimal(paid_total)
    amount = to_decimal(commission_amount)
    if paid >= amount:
        return CommissionStatus.PAID
    if paid > 0:
        return CommissionStatus.PARTIAL
    return CommissionStatus.GENERATED


__all__ = ["sum_payments", "resolve_commission_status"]

# Fin del archivo qorinti/modules/billing/facades/reconciliation/rules.py
