# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/repositories/receipt_repository.py

Repositorios de `receipts` (id = id del pago) y `receipt_sequences`
(id = serie).

Autor: Qorinti
Fecha: 2026-10-03
"""

from qorinti.shared.firestore.repository import BaseRepository
from qorinti.shared.firestore.store import SERVER_TIMESTAMP, DocumentStore
from qorinti.modules.billing.models import Receipt, ReceiptSequence


class ReceiptRepository(BaseRepository[Receipt]):
    collection = "receipts"
    server_timestamp_fields = ("issuedAt",)

    def __init__(self) -> None:
        super().__init__(Receipt)


class ReceiptSequenceRepository(BaseRepository[ReceiptSequence]):
    collection = "receipt_sequences"

    def __init__(self) -> None:
        super().__init__(ReceiptSequence)

    async def store_last_number(self, store: DocumentStore, series: str, last_number: int) -> None:
        await store.set(
            self.collection,
            series,
            {"series": series, "lastNumber": last_number, "updatedAt": SERVER_TIMESTAMP},
        )

# Fin del archivo qorinti/modules/billing/repositories/receipt_repository.py
