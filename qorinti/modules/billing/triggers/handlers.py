# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/triggers/handlers.py

Registro de los handlers reactivos del módulo Billing:

- payments/{paymentId}                       → emisión de comprobante
- payments/{paymentId}                       → generación de comisión
- commission_payments/{commissionPaymentId}  → reconciliación de comisión

Autor: Qorinti
Fecha: 2026-10-07
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict

from qorinti.shared.firestore.store import DocumentStore
from qorinti.modules.billing.facades.commissions import generate_commission
from qorinti.modules.billing.facades.commissions.generator import HANDLER_NAME as COMMISSION_HANDLER
from qorinti.modules.billing.facades.receipts import issue_receipt
from qorinti.modules.billing.facades.receipts.issuer import HANDLER_NAME as RECEIPT_HANDLER
from qorinti.modules.billing.facades.reconciliation import reconcile_commission_payment
from qorinti.modules.billing.facades.reconciliation.core import HANDLER_NAME as RECONCILER_HANDLER
from qorinti.modules.billing.schemas import DocumentCreatedEvent, HandlerResult
from .registry import TriggerRegistry

PAYMENTS_PATH = "payments/{paymentId}"
COMMISSION_PAYMENTS_PATH = "commission_payments/{commissionPaymentId}"


def register_billing_triggers(registry: TriggerRegistry) -> TriggerRegistry:
    """Registra los tres handlers en `registry` y lo devuelve."""

    @registry.on_document_created(PAYMENTS_PATH, name=RECEIPT_HANDLER)
    async def on_payment_created_issue_receipt(
        store: DocumentStore, event: DocumentCreatedEvent, params: Dict[str, str]
    ) -> HandlerResult:
        return await issue_receipt(store, payment_id=params["paymentId"], payment=event.data)

    @registry.on_document_created(PAYMENTS_PATH, name=COMMISSION_HANDLER)
    async def on_payment_created_generate_commission(
        store: DocumentStore, event: DocumentCreatedEvent, params: Dict[str, str]
    ) -> HandlerResult:
        return await generate_commission(store, payment_id=params["paymentId"], payment=event.data)

    @registry.on_document_created(COMMISSION_PAYMENTS_PATH, name=RECONCILER_HANDLER)
    async def on_commission_payment_created(
        store: DocumentStore, event: DocumentCreatedEvent, params: Dict[str, str]
    ) -> HandlerResult:
        return await reconcile_commission_payment(
            store,
            commission_payment=event.data,
            commission_payment_id=params["commissionPaymentId"],
        )

    return registry


@lru_cache(maxsize=1)
def get_trigger_registry() -> TriggerRegistry:
    """Registro por defecto (singleton); dependencia FastAPI de la ruta de eventos."""
    return register_billing_triggers(TriggerRegistry())


__all__ = [
    "PAYMENTS_PATH",
    "COMMISSION_PAYMENTS_PATH",
    "register_billing_triggers",
    "get_trigger_registry",
]

# Fin del archivo qorinti/modules/billing/triggers/handlers.py
