# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/routes/admin_routes.py

Endpoints administrativos de Billing (re-ejecución manual de la
reconciliación, p. ej. tras corregir datos a mano).

Endpoints:
- POST /admin/billing/commissions/{commission_id}/reconcile
- POST /admin/billing/drivers/{driver_id}/balance/recompute

PROTECTED: Authorization: Bearer <ADMIN_API_TOKEN>.

Autor: Qorinti
Fecha: 2026-10-08
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from qorinti.shared.admin_auth import require_admin_token
from qorinti.shared.firestore.client import get_document_store
from qorinti.shared.firestore.store import DocumentStore
from qorinti.modules.billing.facades.reconciliation import (
    recompute_commission,
    recompute_driver_balance,
)
from qorinti.modules.billing.schemas import CommissionReconciliation, DriverBalanceSnapshot

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/admin/billing",
    tags=["Admin - Billing"],
    dependencies=[Depends(require_admin_token)],
)


@router.post(
    "/commissions/{commission_id}/reconcile",
    response_model=CommissionReconciliation,
    summary="Recalcula estado de una comisión y saldo del conductor",
)
async def reconcile_commission(
    commission_id: str,
    store: DocumentStore = Depends(get_document_store),
) -> CommissionReconciliation:
    result = await recompute_commission(store, commission_id)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Commission {commission_id} not found",
        )
    logger.info("🛠️ Reconciliación manual: commission_id=%s → %s", commission_id, result.status)
    return result


@router.post(
    "/drivers/{driver_id}/balance/recompute",
    response_model=DriverBalanceSnapshot,
    summary="Recalcula el saldo pendiente de un conductor",
)
async def recompute_balance(
    driver_id: str,
    store: DocumentStore = Depends(get_document_store),
) -> DriverBalanceSnapshot:
    snapshot = await recompute_driver_balance(store, driver_id)
    if snapshot is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Driver {driver_id} has no commissions",
        )
    return snapshot

# Fin del archivo qorinti/modules/billing/routes/admin_routes.py
