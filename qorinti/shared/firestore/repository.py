# -*- coding: utf-8 -*-
"""
qorinti/shared/firestore/repository.py

Repositorio base para colecciones de Firestore con modelos Pydantic.

Autor: Qorinti (adaptado del repositorio base async)
Fecha: 2026-10-03
"""

from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel

from .store import SERVER_TIMESTAMP, DocumentStore, StoredDocument

T = TypeVar("T", bound=BaseModel)  # modelo de documento


class BaseRepository(Generic[T]):
    """Repositorio asincrónico base: colección + modelo de documento."""

    collection: str = ""
    # Campos que se sellan con la hora del servidor al crear
    server_timestamp_fields: Tuple[str, ...] = ()

    def __init__(self, model: Type[T], collection: Optional[str] = None):
        self.model = model
        if collection:
            self.collection = collection

    # -------------------------------------------------------------
    # Mapeo documento <-> modelo
    # -------------------------------------------------------------
    def to_model(self, doc: StoredDocument) -> T:
        return self.model.model_validate({**doc.data, "id": doc.id})

    def to_data(self, obj: T) -> Dict[str, Any]:
        data = obj.model_dump(by_alias=True, exclude={"id"})
        for name in self.server_timestamp_fields:
            data[name] = SERVER_TIMESTAMP
        return data

    # -------------------------------------------------------------
    # CRUD básico
    # -------------------------------------------------------------
    async def get(self, store: DocumentStore, obj_id: Optional[str]) -> Optional[T]:
        if not obj_id:
            return None
        doc = await store.get(self.collection, obj_id)
        return self.to_model(doc) if doc else None

    async def find_by(
        self,
        store: DocumentStore,
        field_path: str,
        value: Any,
        *,
        limit: Optional[int] = None,
    ) -> List[T]:
        docs = await store.find(self.collection, field_path, value, limit=limit)
        return [self.to_model(d) for d in docs]

    async def create(self, store: DocumentStore, obj_id: str, obj: T) -> bool:
        """Crea con id determinista; False si ya existía."""
        return await store.create(self.collection, obj_id, self.to_data(obj))

    async def update_fields(self, store: DocumentStore, obj_id: str, fields: Dict[str, Any]) -> None:
        await store.update(self.collection, obj_id, fields)

# Fin del archivo qorinti/shared/firestore/repository.py
