# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/models/payment_models.py

Documentos de pago y método de pago (colecciones `payments` y
`payment_methods`).

El pago lo crea el flujo de cobro de la app; para este módulo es de
solo lectura, salvo la marca `inconsistency`.

Autor: Qorinti
Fecha: 2026-10-03
"""

from typing import Any, Optional

from pydantic import Field

from .base_models import DocumentModel


INVOICE_REQUIRES_APP_METHOD = "INVOICE_REQUIRES_APP_METHOD"


class Payment(DocumentModel):
    payment_method_id: Optional[str] = None
    assignment_id: Optional[str] = None
    # Se conserva crudo; la coerción a número la decide cada handler
    total_amount: Any = None
    issue_receipt: Any = None
    receipt_type_code: Optional[str] = None
    issuer_fiscal_id: Optional[str] = None
    receiving_company_id: Optional[str] = None
    receiving_user_id: Optional[str] = None
    currency: Optional[str] = None
    inconsistency: Optional[str] = Field(
        default=None,
        description="Marca de regla violada (p. ej. INVOICE_REQUIRES_APP_METHOD)",
    )

    @property
    def wants_receipt(self) -> bool:
        return bool(self.issue_receipt)


class PaymentMethod(DocumentModel):
    code: Optional[str] = None

    @property
    def normalized_code(self) -> str:
        return (self.code or "").strip().upper()


__all__ = ["Payment", "PaymentMethod", "INVOICE_REQUIRES_APP_METHOD"]

# Fin del archivo qorinti/modules/billing/models/payment_models.py
