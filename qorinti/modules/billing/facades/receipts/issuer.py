# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/facades/receipts/issuer.py

Emisión de comprobantes al crearse un pago (`payments/{paymentId}`).

Reglas:
- Sin método de pago o sin `issueReceipt` → no aplica.
- FACTURA (INVOICE) sólo con métodos APP_*; si no, se marca el pago con
  `inconsistency` y NO se emite comprobante.
- En otro caso se emite exactamente un comprobante, con id = id del pago
  (una reentrega del evento no duplica) y número tomado del contador de
  la serie en la misma transacción.

Autor: Qorinti
Fecha: 2026-10-04
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from qorinti.shared.firestore.store import DocumentStore
from qorinti.shared.utils.money import round_money
from qorinti.modules.billing.enums import ReceiptType
from qorinti.modules.billing.models import Payment, Receipt, INVOICE_REQUIRES_APP_METHOD
from qorinti.modules.billing.repositories import (
    PaymentRepository,
    PaymentMethodRepository,
    ReceiptRepository,
    ReceiptSequenceRepository,
)
from qorinti.modules.billing.schemas import HandlerResult
from .numbering import (
    commit_number,
    format_number,
    format_series_number,
    read_next_number,
    series_for,
)
from .rules import (
    requires_app_method,
    resolve_currency,
    resolve_issuer,
    resolve_receipt_type,
)

logger = logging.getLogger(__name__)

HANDLER_NAME = "receipt_issuer"


def _as_payment(payment: Union[Payment, Mapping[str, Any]], payment_id: str) -> Payment:
    if isinstance(payment, Payment):
        return payment
    return Payment.model_validate({**payment, "id": payment_id})


def build_receipt(
    *,
    payment_id: str,
    payment: Payment,
    receipt_type: ReceiptType,
    series: str,
    sequence: int,
) -> Receipt:
    """Arma el comprobante; el receptor sólo se llena para el tipo que le corresponde."""
    number = format_number(sequence)
    is_invoice = receipt_type == ReceiptType.INVOICE
    return Receipt(
        payment_id=payment_id,
        receipt_type=receipt_type,
        issuer_fiscal_id=resolve_issuer(payment),
        receiving_company_id=(payment.receiving_company_id or None) if is_invoice else None,
        receiving_user_id=(payment.receiving_user_id or None) if not is_invoice else None,
        series=series,
        number=number,
        series_number=format_series_number(series, number),
        total=round_money(payment.total_amount),
        currency=resolve_currency(payment),
    )


async def issue_receipt(
    store: DocumentStore,
    *,
    payment_id: str,
    payment: Union[Payment, Mapping[str, Any]],
    # Inyección de dependencias para testing
    payment_repo: Optional[PaymentRepository] = None,
    payment_method_repo: Optional[PaymentMethodRepository] = None,
    receipt_repo: Optional[ReceiptRepository] = None,
    sequence_repo: Optional[ReceiptSequenceRepository] = None,
) -> HandlerResult:
    """
    Decide y ejecuta la única escritura del emisor para un pago:
    la marca de inconsistencia o el comprobante nuevo.
    """
    _payment_repo = payment_repo or PaymentRepository()
    _method_repo = payment_method_repo or PaymentMethodRepository()
    _receipt_repo = receipt_repo or ReceiptRepository()
    _sequence_repo = sequence_repo or ReceiptSequenceRepository()

    pago = _as_payment(payment, payment_id)

    if not pago.payment_method_id:
        return HandlerResult.skipped(HANDLER_NAME, "missing_payment_method")

    if not pago.wants_receipt:
        return HandlerResult.skipped(HANDLER_NAME, "receipt_not_requested")

    method_code = await _method_repo.get_code(store, pago.payment_method_id)
    receipt_type = resolve_receipt_type(pago)

    if requires_app_method(receipt_type, method_code):
        await _payment_repo.mark_inconsistency(store, payment_id, INVOICE_REQUIRES_APP_METHOD)
        logger.warning(
            "🚩 Factura con método no APP: payment_id=%s, method_code=%r",
            payment_id,
            method_code,
        )
        return HandlerResult.violation(
            HANDLER_NAME,
            INVOICE_REQUIRES_APP_METHOD,
            document_id=payment_id,
            method_code=method_code,
        )

    series = series_for(receipt_type)

    async def _issue(tx: DocumentStore) -> Optional[Receipt]:
        # Lecturas primero (regla de transacciones de Firestore)
        if await _receipt_repo.get(tx, payment_id) is not None:
            return None
        sequence = await read_next_number(tx, series, sequence_repo=_sequence_repo)

        receipt = build_receipt(
            payment_id=payment_id,
            payment=pago,
            receipt_type=receipt_type,
            series=series,
            sequence=sequence,
        )
        await commit_number(tx, series, sequence, sequence_repo=_sequence_repo)
        await _receipt_repo.create(tx, payment_id, receipt)
        return receipt

    receipt = await store.run_in_transaction(_issue)

    if receipt is None:
        logger.info("Comprobante ya existente para payment_id=%s", payment_id)
        return HandlerResult.duplicate(HANDLER_NAME, document_id=payment_id)

    logger.info(
        "🧾 Comprobante emitido: payment_id=%s, %s %s",
        payment_id,
        receipt.receipt_type,
        receipt.series_number,
    )
    return HandlerResult.applied(
        HANDLER_NAME,
        document_id=payment_id,
        receipt_type=str(receipt.receipt_type),
        series_number=receipt.series_number,
    )


__all__ = ["HANDLER_NAME", "build_receipt", "issue_receipt"]

# Fin del archivo qorinti/modules/billing/facades/receipts/issuer.py
