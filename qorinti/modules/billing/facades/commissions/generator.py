# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/facades/commissions/generator.py

Generación de la comisión de plataforma al crearse un pago cobrado
directamente por el conductor (método DIRECT_*).

El conductor recibió el dinero completo, así que queda debiendo a la
plataforma el porcentaje de comisión. El documento se crea con id = id
del pago; una reentrega del evento no genera una segunda comisión.

Autor: Qorinti
Fecha: 2026-10-05
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from qorinti.shared.firestore.store import DocumentStore
from qorinti.shared.utils.money import coerce_amount
from qorinti.modules.billing.enums import CommissionStatus, PaymentChannel
from qorinti.modules.billing.models import Commission, Payment
from qorinti.modules.billing.repositories import (
    AssignmentRepository,
    CommissionRepository,
    DriverVehicleLinkRepository,
    PaymentMethodRepository,
)
from qorinti.modules.billing.schemas import HandlerResult
from .calculator import COMMISSION_PERCENTAGE, compute_commission_amount
from .driver_resolver import resolve_driver_id

logger = logging.getLogger(__name__)

HANDLER_NAME = "commission_generator"


async def generate_commission(
    store: DocumentStore,
    *,
    payment_id: str,
    payment: Union[Payment, Mapping[str, Any]],
    payment_method_repo: Optional[PaymentMethodRepository] = None,
    assignment_repo: Optional[AssignmentRepository] = None,
    link_repo: Optional[DriverVehicleLinkRepository] = None,
    commission_repo: Optional[CommissionRepository] = None,
) -> HandlerResult:
    _method_repo = payment_method_repo or PaymentMethodRepository()
    _commission_repo = commission_repo or CommissionRepository()

    pago = payment if isinstance(payment, Payment) else Payment.model_validate({**payment, "id": payment_id})

    if not pago.payment_method_id:
        return HandlerResult.skipped(HANDLER_NAME, "missing_payment_method")
    if not pago.assignment_id:
        return HandlerResult.skipped(HANDLER_NAME, "missing_assignment")

    method_code = await _method_repo.get_code(store, pago.payment_method_id)
    if PaymentChannel.from_method_code(method_code) != PaymentChannel.DIRECT:
        return HandlerResult.skipped(HANDLER_NAME, "not_direct_method", method_code=method_code)

    resolution = await resolve_driver_id(
        store,
        pago.assignment_id,
        assignment_repo=assignment_repo,
        link_repo=link_repo,
    )
    if not resolution.resolved:
        logger.warning(
            "Comisión no generada: payment_id=%s, assignment_id=%s (%s)",
            payment_id,
            pago.assignment_id,
            resolution.missing,
        )
        return HandlerResult.skipped(HANDLER_NAME, resolution.missing or "driver_not_resolved")

    base_amount = coerce_amount(pago.total_amount)
    commission = Commission(
        payment_id=payment_id,
        assignment_id=pago.assignment_id,
        driver_id=resolution.driver_id,
        base_amount=base_amount,
        percentage=COMMISSION_PERCENTAGE,
        amount=compute_commission_amount(base_amount, COMMISSION_PERCENTAGE),
        status=CommissionStatus.GENERATED,
    )

    created = await _commission_repo.create(store, payment_id, commission)
    if not created:
        logger.info("Comisión ya existente para payment_id=%s", payment_id)
        return HandlerResult.duplicate(HANDLER_NAME, document_id=payment_id)

    logger.info(
        "💸 Comisión generada: payment_id=%s, driver_id=%s, amount=%.2f",
        payment_id,
        resolution.driver_id,
        commission.amount,
    )
    return HandlerResult.applied(
        HANDLER_NAME,
        document_id=payment_id,
        driver_id=resolution.driver_id,
        amount=commission.amount,
    )


__all__ = ["HANDLER_NAME", "generate_commission"]

# Fin del archivo qorinti/modules/billing/facades/commissions/generator.py
