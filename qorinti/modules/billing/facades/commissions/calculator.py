# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/facades/commissions/calculator.py

Cálculo de la comisión de plataforma sobre pagos cobrados por el conductor.

Autor: Qorinti
Fecha: 2026-10-05
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Any

from qorinti.shared.utils.money import CENT, coerce_amount, to_decimal

# Porcentaje fijo de comisión de la plataforma
COMMISSION_PERCENTAGE = 15.0


def compute_commission_amount(base_amount: Any, percentage: float = COMMISSION_PERCENTAGE) -> float:
    """
    Monto = base × porcentaje / 100, redondeado half-up al céntimo.

    Examples:
        >>> compute_commission_amount(100)
        15.0
        >>> compute_commission_amount(33.33)
        5.0
        >>> compute_commission_amount("abc")
        0.0
    """
    base = to_decimal(coerce_amount(base_amount))
    pct = Decimal(str(percentage))
    amount = (base * pct / Decimal(100)).quantize(CENT, rounding=ROUND_HALF_UP)
    return float(amount)


__all__ = ["COMMISSION_PERCENTAGE", "compute_commission_amount"]

# Fin del archivo qorinti/modules/billing/facades/commissions/calculator.py
