# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/models/receipt_models.py

Comprobantes (boleta/factura) y contador de numeración por serie.

Autor: Qorinti
Fecha: 2026-10-03
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from qorinti.modules.billing.enums import ReceiptType
from qorinti.shared.utils.money import round_money
from .base_models import DocumentModel


class Receipt(DocumentModel):
    payment_id: str
    receipt_type: ReceiptType
    issuer_fiscal_id: str
    receiving_company_id: Optional[str] = None
    receiving_user_id: Optional[str] = None
    series: str
    number: str
    series_number: str = Field(description="Serie y número combinados, p. ej. F001-00000001")
    total: float = 0.0
    currency: str = "PEN"
    issued_at: Optional[datetime] = None

    @field_validator("total", mode="before")
    @classmethod
    def _round_total(cls, v):
        return round_money(v)


class ReceiptSequence(DocumentModel):
    series: str
    last_number: int = 0
    updated_at: Optional[datetime] = None


__all__ = ["Receipt", "ReceiptSequence"]

# Fin del archivo qorinti/modules/billing/models/receipt_models.py
