# -*- coding: utf-8 -*-
"""
qorinti/shared/firestore/__init__.py

Acceso a Cloud Firestore: contrato del almacén, cliente firebase-admin,
repositorio base y decodificación de valores tipados.

Autor: Qorinti
Fecha: 2026-10-03
"""

from .store import SERVER_TIMESTAMP, StoredDocument, DocumentStore, FirestoreDocumentStore
from .repository import BaseRepository
from .values import FirestoreValueError, decode_value, decode_fields, split_document_name

__all__ = [
    "SERVER_TIMESTAMP",
    "StoredDocument",
    "DocumentStore",
    "FirestoreDocumentStore",
    "BaseRepository",
    "FirestoreValueError",
    "decode_value",
    "decode_fields",
    "split_document_name",
]
