# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/models/__init__.py

Modelos de documentos del módulo Billing.

Autor: Qorinti
Fecha: 2026-10-03
"""

from .base_models import DocumentModel
from .payment_models import Payment, PaymentMethod, INVOICE_REQUIRES_APP_METHOD
from .assignment_models import Assignment, DriverVehicleLink
from .receipt_models import Receipt, ReceiptSequence
from .commission_models import Commission, CommissionPayment, DriverAccountBalance

__all__ = [
    "DocumentModel",
    "Payment",
    "PaymentMethod",
    "INVOICE_REQUIRES_APP_METHOD",
    "Assignment",
    "DriverVehicleLink",
    "Receipt",
    "ReceiptSequence",
    "Commission",
    "CommissionPayment",
    "DriverAccountBalance",
]

# Fin del archivo qorinti/modules/billing/models/__init__.py
