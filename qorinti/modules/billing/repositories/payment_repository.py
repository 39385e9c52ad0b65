# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/repositories/payment_repository.py

Repositorios de `payments` y `payment_methods`.

Autor: Qorinti
Fecha: 2026-10-03
"""

from qorinti.shared.firestore.repository import BaseRepository
from qorinti.shared.firestore.store import DocumentStore
from qorinti.modules.billing.models import Payment, PaymentMethod, INVOICE_REQUIRES_APP_METHOD


class PaymentRepository(BaseRepository[Payment]):
    collection = "payments"

    def __init__(self) -> None:
        super().__init__(Payment)

    async def mark_inconsistency(
        self,
        store: DocumentStore,
        payment_id: str,
        marker: str = INVOICE_REQUIRES_APP_METHOD,
    ) -> None:
        """Única escritura permitida sobre un pago: la marca de inconsistencia."""
        await self.update_fields(store, payment_id, {"inconsistency": marker})


class PaymentMethodRepository(BaseRepository[PaymentMethod]):
    collection = "payment_methods"

    def __init__(self) -> None:
        super().__init__(PaymentMethod)

    async def get_code(self, store: DocumentStore, method_id: str) -> str:
        """Código normalizado del método; "" si el método no existe."""
        method = await self.get(store, method_id)
        return method.normalized_code if method else ""

# Fin del archivo qorinti/modules/billing/repositories/payment_repository.py
