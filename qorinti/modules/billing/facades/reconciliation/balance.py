# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/facades/reconciliation/balance.py

Saldo pendiente del conductor: suma de comisiones no pagadas.

Autor: Qorinti
Fecha: 2026-10-06
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Mapping, Optional

from qorinti.shared.utils.money import CENT, to_decimal
from qorinti.modules.billing.enums import CommissionStatus
from qorinti.modules.billing.models import Commission


def pending_commissions(
    commissions: Iterable[Commission],
    status_overrides: Optional[Mapping[str, CommissionStatus]] = None,
) -> List[Commission]:
    """
    Comisiones cuyo estado efectivo no es PAID.

    `status_overrides` reemplaza el estado leído por uno recién calculado
    (la comisión que se está reconciliando aún no tiene su estado escrito).
    """
    overrides = status_overrides or {}
    pending = []
    for commission in commissions:
        status = overrides.get(commission.id or "", commission.status)
        if not CommissionStatus.parse(status).is_settled:
            pending.append(commission)
    return pending


def compute_outstanding_balance(
    commissions: Iterable[Commission],
    status_overrides: Optional[Mapping[str, CommissionStatus]] = None,
) -> float:
    total = sum(
        (to_decimal(c.amount) for c in pending_commissions(commissions, status_overrides)),
        Decimal("0"),
    )
    return float(total.quantize(CENT, rounding=ROUND_HALF_UP))


__all__ = ["pending_commissions", "compute_outstanding_balance"]

# Fin del archivo qorinti/modules/billing/facades/reconciliation/balance.py
