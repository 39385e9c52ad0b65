# -*- coding: utf-8 -*-
"""
qorinti/shared/firestore/client.py

Inicialización de firebase-admin y del cliente async de Firestore.

- La app de firebase-admin se inicializa una sola vez (perezosamente).
- Con FIRESTORE_EMULATOR_HOST se crea el cliente sin credenciales de
  Google (el emulador no las valida).
- `get_document_store` es la dependencia FastAPI que usan las rutas; los
  tests la reemplazan vía `app.dependency_overrides`.

Autor: Qorinti
Fecha: 2026-10-03
"""

from __future__ import annotations

import asyncio
import logging
import os
from functools import lru_cache
from typing import Any, Optional

import firebase_admin
from firebase_admin import credentials, firestore, firestore_async

from qorinti.core.settings import get_settings
from .store import FirestoreDocumentStore

logger = logging.getLogger(__name__)


def get_firebase_app() -> firebase_admin.App:
    """Devuelve la app por defecto de firebase-admin, inicializándola si hace falta."""
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    settings = get_settings()
    options = {}
    if settings.gcp_project_id:
        options["projectId"] = settings.gcp_project_id

    cred: Optional[credentials.Base] = None
    if settings.firebase_credentials_path:
        cred = credentials.Certificate(settings.firebase_credentials_path)

    app = firebase_admin.initialize_app(credential=cred, options=options or None)
    logger.info("🔥 firebase-admin inicializado (project=%s)", settings.gcp_project_id)
    return app


def _build_client() -> Any:
    settings = get_settings()

    if settings.firestore_emulator_host:
        # La librería de Firestore lee la variable de entorno directamente
        os.environ.setdefault("FIRESTORE_EMULATOR_HOST", settings.firestore_emulator_host)
        logger.info("🧪 Usando emulador de Firestore en %s", settings.firestore_emulator_host)
        return firestore.AsyncClient(
            project=settings.gcp_project_id,
            database=settings.firestore_database,
        )

    app = get_firebase_app()
    return firestore_async.client(app=app, database_id=settings.firestore_database)


@lru_cache(maxsize=1)
def get_firestore_store() -> FirestoreDocumentStore:
    """Singleton del almacén Firestore."""
    return FirestoreDocumentStore(_build_client())


def get_document_store() -> FirestoreDocumentStore:
    """Dependencia FastAPI para inyectar el almacén de documentos."""
    return get_firestore_store()


async def check_firestore_health(timeout_s: float = 2.0) -> bool:
    """Lectura barata para verificar conectividad con Firestore."""
    try:
        store = get_firestore_store()
        await asyncio.wait_for(store.get("_health", "ping"), timeout=timeout_s)
        return True
    except Exception as e:
        logger.warning("⚠️ Firestore no disponible: %s", e)
        return False


async def close_firestore_client() -> None:
    """Cierra el cliente gRPC si se llegó a crear."""
    if get_firestore_store.cache_info().currsize == 0:
        return
    store = get_firestore_store()
    close = getattr(store.client, "close", None)
    if close is not None:
        result = close()
        if asyncio.iscoroutine(result):
            await result
    get_firestore_store.cache_clear()


__all__ = [
    "get_firebase_app",
    "get_firestore_store",
    "get_document_store",
    "check_firestore_health",
    "close_firestore_client",
]

# Fin del archivo qorinti/shared/firestore/client.py
