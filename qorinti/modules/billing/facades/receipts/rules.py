# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/facades/receipts/rules.py

Reglas de emisión de comprobantes.

Autor: Qorinti
Fecha: 2026-10-04
"""

import logging

from qorinti.modules.billing.enums import PaymentChannel, ReceiptType
from qorinti.modules.billing.models import Payment

logger = logging.getLogger(__name__)

DEFAULT_ISSUER_FISCAL_ID = "QORINTI"
DEFAULT_CURRENCY = "PEN"


def resolve_receipt_type(payment: Payment) -> ReceiptType:
    """Tipo declarado en el pago (case-insensitive); por defecto RECEIPT."""
    declared = str(payment.receipt_type_code or "").strip().upper()
    receipt_type = ReceiptType.parse(declared)
    if declared and declared != receipt_type.value:
        logger.warning(
            "Tipo de comprobante desconocido %r en payment_id=%s; se emite como %s",
            payment.receipt_type_code,
            payment.id,
            receipt_type,
        )
    return receipt_type


def requires_app_method(receipt_type: ReceiptType, method_code: str) -> bool:
    """
    True si el comprobante viola la regla "factura sólo con métodos APP_*".

    Examples:
        >>> requires_app_method(ReceiptType.INVOICE, "DIRECT_CASH")
        True
        >>> requires_app_method(ReceiptType.INVOICE, "APP_CARD")
        False
        >>> requires_app_method(ReceiptType.RECEIPT, "DIRECT_CASH")
        False
    """
    if receipt_type != ReceiptType.INVOICE:
        return False
    return PaymentChannel.from_method_code(method_code) != PaymentChannel.APP


def resolve_currency(payment: Payment) -> str:
    return (payment.currency or "").strip().upper() or DEFAULT_CURRENCY


def resolve_issuer(payment: Payment) -> str:
    return (payment.issuer_fiscal_id or "").strip() or DEFAULT_ISSUER_FISCAL_ID


__all__ = [
    "DEFAULT_ISSUER_FISCAL_ID",
    "DEFAULT_CURRENCY",
    "resolve_receipt_type",
    "requires_app_method",
    "resolve_currency",
    "resolve_issuer",
]

# Fin del archivo qorinti/modules/billing/facades/receipts/rules.py
