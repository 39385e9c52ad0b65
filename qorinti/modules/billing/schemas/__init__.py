# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/schemas/__init__.py

Schemas Pydantic del módulo Billing (resultados de handlers, eventos y
reconciliación).

Autor: Qorinti
Fecha: 2026-10-04
"""

from .handler_result_schemas import HandlerResult
from .event_schemas import FIRESTORE_DOCUMENT_CREATED, DocumentCreatedEvent, DispatchResponse
from .reconciliation_schemas import CommissionReconciliation, DriverBalanceSnapshot

__all__ = [
    "HandlerResult",
    "FIRESTORE_DOCUMENT_CREATED",
    "DocumentCreatedEvent",
    "DispatchResponse",
    "CommissionReconciliation",
    "DriverBalanceSnapshot",
]

# Fin del archivo qorinti/modules/billing/schemas/__init__.py
