# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/models/commission_models.py

Comisiones del conductor, sus pagos y el estado de cuenta.

Autor: Qorinti
Fecha: 2026-10-03
"""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from qorinti.modules.billing.enums import CommissionStatus
from qorinti.shared.utils.money import coerce_amount
from .base_models import DocumentModel


class Commission(DocumentModel):
    payment_id: Optional[str] = None
    assignment_id: Optional[str] = None
    driver_id: Optional[str] = None
    base_amount: float = 0.0
    percentage: float = 0.0
    amount: float = 0.0
    status: CommissionStatus = CommissionStatus.GENERATED
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("base_amount", "percentage", "amount", mode="before")
    @classmethod
    def _coerce_numbers(cls, v):
        return coerce_amount(v)

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, v):
        return CommissionStatus.parse(v)


class CommissionPayment(DocumentModel):
    commission_id: Optional[str] = None
    amount: float = 0.0

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, v):
        return coerce_amount(v)


class DriverAccountBalance(DocumentModel):
    driver_id: str
    balance: float = 0.0
    updated_at: Optional[datetime] = None

    @field_validator("balance", mode="before")
    @classmethod
    def _coerce_balance(cls, v):
        return coerce_amount(v)


__all__ = ["Commission", "CommissionPayment", "DriverAccountBalance"]

# Fin del archivo qorinti/modules/billing/models/commission_models.py
