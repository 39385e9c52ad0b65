# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/repositories/commission_repository.py

Repositorios de `commissions`, `commission_payments` y
`driver_account_balances`.

Autor: Qorinti
Fecha: 2026-10-03
"""

from typing import List, Optional

from qorinti.shared.firestore.repository import BaseRepository
from qorinti.shared.firestore.store import SERVER_TIMESTAMP, DocumentStore
from qorinti.modules.billing.enums import CommissionStatus
from qorinti.modules.billing.models import Commission, CommissionPayment, DriverAccountBalance


class CommissionRepository(BaseRepository[Commission]):
    collection = "commissions"
    server_timestamp_fields = ("createdAt", "updatedAt")

    def __init__(self) -> None:
        super().__init__(Commission)

    async def list_by_driver(self, store: DocumentStore, driver_id: str) -> List[Commission]:
        return await self.find_by(store, "driverId", driver_id)

    async def set_status(
        self,
        store: DocumentStore,
        commission_id: str,
        status: CommissionStatus,
    ) -> None:
        await self.update_fields(
            store,
            commission_id,
            {"status": str(status), "updatedAt": SERVER_TIMESTAMP},
        )


class CommissionPaymentRepository(BaseRepository[CommissionPayment]):
    collection = "commission_payments"

    def __init__(self) -> None:
        super().__init__(CommissionPayment)

    async def list_by_commission(
        self, store: DocumentStore, commission_id: str
    ) -> List[CommissionPayment]:
        return await self.find_by(store, "commissionId", commission_id)


class DriverAccountBalanceRepository(BaseRepository[DriverAccountBalance]):
    collection = "driver_account_balances"
    server_timestamp_fields = ("updatedAt",)

    def __init__(self) -> None:
        super().__init__(DriverAccountBalance)

    async def get_by_driver(
        self, store: DocumentStore, driver_id: str
    ) -> Optional[DriverAccountBalance]:
        """Primer registro del conductor (se asume a lo sumo uno)."""
        found = await self.find_by(store, "driverId", driver_id, limit=1)
        return found[0] if found else None

    async def write_balance(
        self,
        store: DocumentStore,
        *,
        existing: Optional[DriverAccountBalance],
        driver_id: str,
        balance: float,
    ) -> str:
        """
        Upsert del saldo: sobrescribe el registro existente o crea uno
        nuevo con id = driver_id. Devuelve el id del documento escrito.
        """
        record = DriverAccountBalance(driver_id=driver_id, balance=balance)
        data = self.to_data(record)
        if existing is not None and existing.id:
            await store.update(self.collection, existing.id, data)
            return existing.id
        await store.set(self.collection, driver_id, data)
        return driver_id

# Fin del archivo qorinti/modules/billing/repositories/commission_repository.py
