# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/repositories/__init__.py

Repositorios Firestore del módulo Billing.

Autor: Qorinti
Fecha: 2026-10-03
"""

from .payment_repository import PaymentRepository, PaymentMethodRepository
from .assignment_repository import AssignmentRepository, DriverVehicleLinkRepository
from .receipt_repository import ReceiptRepository, ReceiptSequenceRepository
from .commission_repository import (
    CommissionRepository,
    CommissionPaymentRepository,
    DriverAccountBalanceRepository,
)

__all__ = [
    "PaymentRepository",
    "PaymentMethodRepository",
    "AssignmentRepository",
    "DriverVehicleLinkRepository",
    "ReceiptRepository",
    "ReceiptSequenceRepository",
    "CommissionRepository",
    "CommissionPaymentRepository",
    "DriverAccountBalanceRepository",
]

# Fin del archivo qorinti/modules/billing/repositories/__init__.py
