# -*- coding: utf-8 -*-
"""
qorinti/shared/firestore/store.py

Contrato mínimo del almacén de documentos y su implementación sobre
Cloud Firestore (cliente async de firebase-admin).

Los facades de negocio sólo conocen `DocumentStore`; así pueden
ejecutarse contra Firestore real, el emulador o un almacén en memoria
(tests).

Reglas de transacción (heredadas de Firestore):
- Dentro de `run_in_transaction` todas las lecturas deben preceder a
  las escrituras.
- La función puede reintentarse ante contención; debe ser pura respecto
  a estado externo al almacén.

Autor: Qorinti
Fecha: 2026-10-03
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    List,
    Optional,
    Protocol,
    TypeVar,
    runtime_checkable,
)

from firebase_admin import firestore
from google.api_core.exceptions import AlreadyExists

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Sentinel de hora del servidor; el almacén lo resuelve al escribir.
SERVER_TIMESTAMP = firestore.SERVER_TIMESTAMP


@dataclass(frozen=True)
class StoredDocument:
    """Snapshot inmutable de un documento (id + datos)."""

    id: str
    data: Dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class DocumentStore(Protocol):
    """Operaciones que los handlers necesitan del almacén de documentos."""

    async def get(self, collection: str, doc_id: str) -> Optional[StoredDocument]:
        ...

    async def find(
        self,
        collection: str,
        field_path: str,
        value: Any,
        *,
        limit: Optional[int] = None,
    ) -> List[StoredDocument]:
        ...

    async def create(self, collection: str, doc_id: str, data: Dict[str, Any]) -> bool:
        ...

    async def set(
        self,
        collection: str,
        doc_id: str,
        data: Dict[str, Any],
        *,
        merge: bool = False,
    ) -> None:
        ...

    async def update(self, collection: str, doc_id: str, data: Dict[str, Any]) -> None:
        ...

    async def run_in_transaction(
        self, fn: Callable[["DocumentStore"], Awaitable[T]]
    ) -> T:
        ...


def _to_document(snapshot: Any) -> Optional[StoredDocument]:
    if snapshot is None or not snapshot.exists:
        return None
    return StoredDocument(id=snapshot.id, data=snapshot.to_dict() or {})


class FirestoreDocumentStore:
    """Implementación de `DocumentStore` sobre `google.cloud.firestore.AsyncClient`."""

    def __init__(self, client: Any) -> None:
        self._client = client

    @property
    def client(self) -> Any:
        return self._client

    def _query(self, collection: str, field_path: str, value: Any, limit: Optional[int]):
        query = self._client.collection(collection).where(
            filter=firestore.FieldFilter(field_path, "==", value)
        )
        if limit is not None:
            query = query.limit(limit)
        return query

    # -----------------------------------------------------------
    # Lecturas
    # -----------------------------------------------------------
    async def get(self, collection: str, doc_id: str) -> Optional[StoredDocument]:
        snapshot = await self._client.collection(collection).document(doc_id).get()
        return _to_document(snapshot)

    async def find(
        self,
        collection: str,
        field_path: str,
        value: Any,
        *,
        limit: Optional[int] = None,
    ) -> List[StoredDocument]:
        query = self._query(collection, field_path, value, limit)
        return [
            StoredDocument(id=snap.id, data=snap.to_dict() or {})
            async for snap in query.stream()
        ]

    # -----------------------------------------------------------
    # Escrituras
    # -----------------------------------------------------------
    async def create(self, collection: str, doc_id: str, data: Dict[str, Any]) -> bool:
        """Crea el documento con id fijo; False si ya existía (no escribe)."""
        try:
            await self._client.collection(collection).document(doc_id).create(data)
        except AlreadyExists:
            logger.debug("Documento ya existente: %s/%s", collection, doc_id)
            return False
        return True

    async def set(
        self,
        collection: str,
        doc_id: str,
        data: Dict[str, Any],
        *,
        merge: bool = False,
    ) -> None:
        await self._client.collection(collection).document(doc_id).set(data, merge=merge)

    async def update(self, collection: str, doc_id: str, data: Dict[str, Any]) -> None:
        await self._client.collection(collection).document(doc_id).update(data)

    # -----------------------------------------------------------
    # Transacciones
    # -----------------------------------------------------------
    async def run_in_transaction(
        self, fn: Callable[[DocumentStore], Awaitable[T]]
    ) -> T:
        transaction = self._client.transaction()

        @firestore.async_transactional
        async def _run(tx):
            return await fn(_FirestoreTransactionView(self, tx))

        return await _run(transaction)


class _FirestoreTransactionView:
    """
    Vista de `DocumentStore` ligada a una transacción de Firestore.

    Las lecturas van por la transacción; las escrituras se acumulan y se
    confirman al salir de `run_in_transaction`.
    """

    def __init__(self, store: FirestoreDocumentStore, transaction: Any) -> None:
        self._store = store
        self._client = store.client
        self._tx = transaction

    def _ref(self, collection: str, doc_id: str):
        return self._client.collection(collection).document(doc_id)

    async def get(self, collection: str, doc_id: str) -> Optional[StoredDocument]:
        snapshot = await self._ref(collection, doc_id).get(transaction=self._tx)
        return _to_document(snapshot)

    async def find(
        self,
        collection: str,
        field_path: str,
        value: Any,
        *,
        limit: Optional[int] = None,
    ) -> List[StoredDocument]:
        query = self._store._query(collection, field_path, value, limit)
        return [
            StoredDocument(id=snap.id, data=snap.to_dict() or {})
            async for snap in query.stream(transaction=self._tx)
        ]

    async def create(self, collection: str, doc_id: str, data: Dict[str, Any]) -> bool:
        # El conflicto (si lo hay) aparece como AlreadyExists en el commit.
        self._tx.create(self._ref(collection, doc_id), data)
        return True

    async def set(
        self,
        collection: str,
        doc_id: str,
        data: Dict[str, Any],
        *,
        merge: bool = False,
    ) -> None:
        self._tx.set(self._ref(collection, doc_id), data, merge=merge)

    async def update(self, collection: str, doc_id: str, data: Dict[str, Any]) -> None:
        self._tx.update(self._ref(collection, doc_id), data)

    async def run_in_transaction(
        self, fn: Callable[[DocumentStore], Awaitable[T]]
    ) -> T:
        # Firestore no anida transacciones: se reutiliza la actual.
        return await fn(self)


__all__ = [
    "SERVER_TIMESTAMP",
    "StoredDocument",
    "DocumentStore",
    "FirestoreDocumentStore",
]

# Fin del archivo qorinti/shared/firestore/store.py
