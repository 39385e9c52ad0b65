# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/routes/events_routes.py

Entrada de eventos de Firestore (Eventarc → Cloud Run).

Endpoint:
- POST /events/firestore

Respuestas:
- 200: evento procesado o ignorado (tipo no soportado / sin handlers)
- 400: evento mal formado (Eventarc no reintenta)
- 403: origen (`ce-source`) fuera de EVENTS_ALLOWED_SOURCES
- 500: falló algún handler (Eventarc reintenta; los handlers son idempotentes)

Autor: Qorinti
Fecha: 2026-10-08
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from qorinti.core.settings import get_settings
from qorinti.shared.firestore.client import get_document_store
from qorinti.shared.firestore.store import DocumentStore
from qorinti.modules.billing.metrics.exporters.prometheus_exporter import observe_event_received
from qorinti.modules.billing.schemas import FIRESTORE_DOCUMENT_CREATED, DispatchResponse
from qorinti.modules.billing.triggers import (
    EventDecodingError,
    TriggerDispatchError,
    TriggerRegistry,
    get_trigger_registry,
    parse_cloudevent,
    to_document_created_event,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/events",
    tags=["billing:events"],
)


@router.post(
    "/firestore",
    status_code=status.HTTP_200_OK,
    response_model=DispatchResponse,
)
async def firestore_event(
    request: Request,
    store: DocumentStore = Depends(get_document_store),
    registry: TriggerRegistry = Depends(get_trigger_registry),
) -> DispatchResponse:
    """
    Recibe un CloudEvent "documento creado" y lo despacha a los handlers.
    """
    raw_body = await request.body()

    try:
        attrs, data = parse_cloudevent(request.headers, raw_body)
    except EventDecodingError as e:
        logger.warning("Evento rechazado: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    observe_event_received(attrs.type)

    allowed = get_settings().get_allowed_event_sources()
    if allowed and attrs.source not in allowed:
        logger.warning("Origen de evento no permitido: %s (event_id=%s)", attrs.source, attrs.id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Event source not allowed")

    if attrs.type != FIRESTORE_DOCUMENT_CREATED:
        logger.info("Evento ignorado: type=%s, event_id=%s", attrs.type, attrs.id)
        return DispatchResponse(
            event_id=attrs.id,
            document_path=attrs.subject or "",
            ignored=True,
            reason="unsupported_event_type",
        )

    try:
        event = to_document_created_event(attrs, data)
    except EventDecodingError as e:
        logger.warning("Evento rechazado: event_id=%s, %s", attrs.id, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.info("📨 Evento recibido: path=%s, event_id=%s", event.document_path, event.event_id)

    if not registry.match(event.document_path):
        return DispatchResponse(
            event_id=event.event_id,
            document_path=event.document_path,
            ignored=True,
            reason="no_handlers",
        )

    try:
        results = await registry.dispatch(store, event)
    except TriggerDispatchError as e:
        # 5xx → la plataforma reentrega el evento
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": str(e), "failed_handlers": sorted(e.failures)},
        )

    return DispatchResponse(
        event_id=event.event_id,
        document_path=event.document_path,
        results=results,
    )

# Fin del archivo qorinti/modules/billing/routes/events_routes.py
