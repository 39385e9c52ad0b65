# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/enums/__init__.py

Superficie de exportación de enums del módulo Billing.

Incluye:
- CommissionStatus
- HandlerOutcome
- PaymentChannel
- ReceiptType

Autor: Qorinti
Fecha: 2026-10-03
"""

from .commission_status_enum import CommissionStatus
from .handler_outcome_enum import HandlerOutcome
from .payment_channel_enum import PaymentChannel, APP_PREFIX, DIRECT_PREFIX
from .receipt_type_enum import ReceiptType

__all__ = [
    "CommissionStatus",
    "HandlerOutcome",
    "PaymentChannel",
    "APP_PREFIX",
    "DIRECT_PREFIX",
    "ReceiptType",
]

# Fin del archivo qorinti/modules/billing/enums/__init__.py
