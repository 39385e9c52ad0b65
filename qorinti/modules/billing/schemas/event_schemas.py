# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/schemas/event_schemas.py

DTOs de eventos de Firestore ya normalizados y respuesta del dispatcher.

Autor: Qorinti
Fecha: 2026-10-04
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .handler_result_schemas import HandlerResult

FIRESTORE_DOCUMENT_CREATED = "google.cloud.firestore.document.v1.created"


class DocumentCreatedEvent(BaseModel):
    """
    Evento "documento creado" independiente del transporte.

    `document_path` es relativo a la base (`payments/abc`); `data` son los
    campos ya decodificados del documento nuevo.
    """

    event_id: str = Field(description="ID del CloudEvent (ce-id)")
    event_type: str = Field(default=FIRESTORE_DOCUMENT_CREATED)
    source: Optional[str] = Field(default=None, description="ce-source")
    document_path: str
    document_id: str
    data: Dict[str, Any] = Field(default_factory=dict)
    create_time: Optional[datetime] = None


class DispatchResponse(BaseModel):
    event_id: str
    document_path: str
    ignored: bool = False
    reason: Optional[str] = None
    results: List[HandlerResult] = Field(default_factory=list)


__all__ = ["FIRESTORE_DOCUMENT_CREATED", "DocumentCreatedEvent", "DispatchResponse"]

# Fin del archivo qorinti/modules/billing/schemas/event_schemas.py
