# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/facades/reconciliation/core.py

Reconciliación de comisiones: al registrarse un pago de comisión se
recalcula el estado de la comisión y el saldo pendiente del conductor.

Todo ocurre en una sola transacción del almacén:
1) lecturas: comisión, pagos de la comisión, comisiones del conductor y
   registro de saldo;
2) escrituras: estado de la comisión y saldo del conductor.

Así dos pagos concurrentes sobre la misma comisión no se pisan: Firestore
reintenta la transacción perdedora con los datos actualizados.

Autor: Qorinti
Fecha: 2026-10-06
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from qorinti.shared.firestore.store import DocumentStore
from qorinti.shared.utils.money import round_money
from qorinti.modules.billing.enums import CommissionStatus
from qorinti.modules.billing.models import CommissionPayment
from qorinti.modules.billing.repositories import (
    CommissionPaymentRepository,
    CommissionRepository,
    DriverAccountBalanceRepository,
)
from qorinti.modules.billing.schemas import (
    CommissionReconciliation,
    DriverBalanceSnapshot,
    HandlerResult,
)
from .balance import compute_outstanding_balance, pending_commissions
from .rules import resolve_commission_status, sum_payments

logger = logging.getLogger(__name__)

HANDLER_NAME = "commission_reconciler"


async def recompute_commission(
    store: DocumentStore,
    commission_id: str,
    *,
    # Inyección de dependencias para testing
    commission_repo: Optional[CommissionRepository] = None,
    commission_payment_repo: Optional[CommissionPaymentRepository] = None,
    balance_repo: Optional[DriverAccountBalanceRepository] = None,
) -> Optional[CommissionReconciliation]:
    """
    Recalcula estado de la comisión y saldo del conductor.

    Returns:
        El resultado, o None si la comisión no existe (sin escrituras).
    """
    _commission_repo = commission_repo or CommissionRepository()
    _payment_repo = commission_payment_repo or CommissionPaymentRepository()
    _balance_repo = balance_repo or DriverAccountBalanceRepository()

    async def _run(tx: DocumentStore) -> Optional[CommissionReconciliation]:
        commission = await _commission_repo.get(tx, commission_id)
        if commission is None:
            return None

        payments = await _payment_repo.list_by_commission(tx, commission_id)
        paid_total = sum_payments(payments)
        status = resolve_commission_status(paid_total, commission.amount)

        driver_id = commission.driver_id
        driver_commissions = []
        existing_balance = None
        if driver_id:
            driver_commissions = await _commission_repo.list_by_driver(tx, driver_id)
            existing_balance = await _balance_repo.get_by_driver(tx, driver_id)

        # --- escrituras ---
        await _commission_repo.set_status(tx, commission_id, status)

        snapshot: Optional[DriverBalanceSnapshot] = None
        if driver_id:
            overrides = {commission_id: status}
            balance = compute_outstanding_balance(driver_commissions, overrides)
            balance_doc_id = await _balance_repo.write_balance(
                tx,
                existing=existing_balance,
                driver_id=driver_id,
                balance=balance,
            )
            snapshot = DriverBalanceSnapshot(
                driver_id=driver_id,
                balance=balance,
                pending_commissions=len(pending_commissions(driver_commissions, overrides)),
                balance_document_id=balance_doc_id,
            )

        return CommissionReconciliation(
            commission_id=commission_id,
            status=status,
            previous_status=CommissionStatus.parse(commission.status),
            paid_total=round_money(paid_total),
            amount=commission.amount,
            driver_balance=snapshot,
        )

    return await store.run_in_transaction(_run)


async def recompute_driver_balance(
    store: DocumentStore,
    driver_id: str,
    *,
    commission_repo: Optional[CommissionRepository] = None,
    balance_repo: Optional[DriverAccountBalanceRepository] = None,
) -> Optional[DriverBalanceSnapshot]:
    """
    Recalcula el saldo de un conductor a partir de sus comisiones.

    Devuelve None (sin escrituras) si el conductor no tiene comisiones ni
    registro de saldo.
    """
    _commission_repo = commission_repo or CommissionRepository()
    _balance_repo = balance_repo or DriverAccountBalanceRepository()

    async def _run(tx: DocumentStore) -> Optional[DriverBalanceSnapshot]:
        commissions = await _commission_repo.list_by_driver(tx, driver_id)
        existing = await _balance_repo.get_by_driver(tx, driver_id)
        if not commissions and existing is None:
            return None

        balance = compute_outstanding_balance(commissions)
        doc_id = await _balance_repo.write_balance(
            tx, existing=existing, driver_id=driver_id, balance=balance
        )
        return DriverBalanceSnapshot(
            driver_id=driver_id,
            balance=balance,
            pending_commissions=len(pending_commissions(commissions)),
            balance_document_id=doc_id,
        )

    snapshot = await store.run_in_transaction(_run)
    if snapshot is not None:
        logger.info("📒 Saldo recalculado: driver_id=%s, balance=%.2f", driver_id, snapshot.balance)
    return snapshot


async def reconcile_commission_payment(
    store: DocumentStore,
    *,
    commission_payment: Union[CommissionPayment, Mapping[str, Any]],
    commission_payment_id: Optional[str] = None,
    commission_repo: Optional[CommissionRepository] = None,
    commission_payment_repo: Optional[CommissionPaymentRepository] = None,
    balance_repo: Optional[DriverAccountBalanceRepository] = None,
) -> HandlerResult:
    """Handler del evento `commission_payments/{id}` creado."""
    if isinstance(commission_payment, CommissionPayment):
        pago = commission_payment
    else:
        pago = CommissionPayment.model_validate({**commission_payment, "id": commission_payment_id})

    if not pago.commission_id:
        return HandlerResult.skipped(HANDLER_NAME, "missing_commission_id")

    result = await recompute_commission(
        store,
        pago.commission_id,
        commission_repo=commission_repo,
        commission_payment_repo=commission_payment_repo,
        balance_repo=balance_repo,
    )
    if result is None:
        logger.warning(
            "Pago de comisión sin comisión: commission_payment_id=%s, commission_id=%s",
            commission_payment_id,
            pago.commission_id,
        )
        return HandlerResult.skipped(
            HANDLER_NAME, "commission_not_found", commission_id=pago.commission_id
        )

    balance = result.driver_balance
    logger.info(
        "✅ Comisión reconciliada: commission_id=%s, %s → %s, pagado=%.2f/%.2f, saldo=%s",
        result.commission_id,
        result.previous_status,
        result.status,
        result.paid_total,
        result.amount,
        f"{balance.balance:.2f}" if balance else "n/a",
    )
    return HandlerResult.applied(
        HANDLER_NAME,
        document_id=result.commission_id,
        status=str(result.status),
        paid_total=result.paid_total,
        driver_id=balance.driver_id if balance else None,
        balance=balance.balance if balance else None,
    )


__all__ = [
    "HANDLER_NAME",
    "recompute_commission",
    "recompute_driver_balance",
    "reconcile_commission_payment",
]

# Fin del archivo qorinti/modules/billing/facades/reconciliation/core.py
