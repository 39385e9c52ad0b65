# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/schemas/reconciliation_schemas.py

Resultados de la reconciliación de comisiones y del recálculo de saldo.

Autor: Qorinti
Fecha: 2026-10-06
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from qorinti.modules.billing.enums import CommissionStatus


class DriverBalanceSnapshot(BaseModel):
    driver_id: str
    balance: float = Field(description="Suma de comisiones no pagadas")
    pending_commissions: int = 0
    balance_document_id: Optional[str] = None


class CommissionReconciliation(BaseModel):
    commission_id: str
    status: CommissionStatus
    previous_status: CommissionStatus
    paid_total: float = Field(description="Suma de pagos registrados para la comisión")
    amount: float
    driver_balance: Optional[DriverBalanceSnapshot] = None


__all__ = ["DriverBalanceSnapshot", "CommissionReconciliation"]

# Fin del archivo qorinti/modules/billing/schemas/reconciliation_schemas.py
