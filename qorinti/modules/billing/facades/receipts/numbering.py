# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/facades/receipts/numbering.py

Numeración de comprobantes por serie.

Cada serie tiene un contador en `receipt_sequences/{serie}` que se
incrementa dentro de la misma transacción que crea el comprobante, de
modo que dos emisiones concurrentes nunca comparten número.

Autor: Qorinti
Fecha: 2026-10-04
"""

from __future__ import annotations

from typing import Optional

from qorinti.shared.firestore.store import DocumentStore
from qorinti.modules.billing.enums import ReceiptType
from qorinti.modules.billing.repositories import ReceiptSequenceRepository

SERIES_BY_TYPE = {
    ReceiptType.INVOICE: "F001",
    ReceiptType.RECEIPT: "B001",
}
NUMBER_WIDTH = 8


def series_for(receipt_type: ReceiptType) -> str:
    return SERIES_BY_TYPE[ReceiptType(receipt_type)]


def format_number(sequence: int) -> str:
    """
    Examples:
        >>> format_number(42)
        '00000042'
    """
    return str(sequence).zfill(NUMBER_WIDTH)


def format_series_number(series: str, number: str) -> str:
    """
    Examples:
        >>> format_series_number("F001", "00000001")
        'F001-00000001'
    """
    return f"{series}-{number}"


async def read_next_number(
    tx: DocumentStore,
    series: str,
    *,
    sequence_repo: Optional[ReceiptSequenceRepository] = None,
) -> int:
    """Lectura (fase de lecturas de la transacción): siguiente número de la serie."""
    _repo = sequence_repo or ReceiptSequenceRepository()
    current = await _repo.get(tx, series)
    return (current.last_number if current else 0) + 1


async def commit_number(
    tx: DocumentStore,
    series: str,
    number: int,
    *,
    sequence_repo: Optional[ReceiptSequenceRepository] = None,
) -> None:
    """Escritura (fase de escrituras de la transacción): fija el último número usado."""
    _repo = sequence_repo or ReceiptSequenceRepository()
    await _repo.store_last_number(tx, series, number)


__all__ = [
    "SERIES_BY_TYPE",
    "NUMBER_WIDTH",
    "series_for",
    "format_number",
    "format_series_number",
    "read_next_number",
    "commit_number",
]

# Fin del archivo qorinti/modules/billing/facades/receipts/numbering.py
