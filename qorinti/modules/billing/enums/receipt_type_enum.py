# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/enums/receipt_type_enum.py

Tipos de comprobante emitidos contra un pago.

Autor: Qorinti
Fecha: 2026-10-03
"""

from enum import StrEnum
from typing import Any


class ReceiptType(StrEnum):
    """RECEIPT = boleta (persona natural); INVOICE = factura (empresa)."""

    RECEIPT = "RECEIPT"
    INVOICE = "INVOICE"

    @classmethod
    def parse(cls, value: Any) -> "ReceiptType":
        """Normaliza a mayúsculas; vacío o desconocido → RECEIPT."""
        normalized = str(value or "").strip().upper()
        if normalized == cls.INVOICE.value:
            return cls.INVOICE
        return cls.RECEIPT


__all__ = ["ReceiptType"]

# Fin del archivo qorinti/modules/billing/enums/receipt_type_enum.py
