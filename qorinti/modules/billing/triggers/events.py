# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/triggers/events.py

Decodificación de CloudEvents de Firestore entregados por HTTP (Eventarc).

Modos soportados (payload JSON):
- binary: atributos en headers `ce-*`, cuerpo = DocumentEventData
- structured: `application/cloudevents+json`, atributos y `data` en el cuerpo

DocumentEventData:
    {"value": {"name": "projects/p/databases/(default)/documents/payments/abc",
               "fields": {...}, "createTime": "..."}}

El payload protobuf (`application/protobuf`) no se acepta: el trigger de
Eventarc debe configurarse con `--event-data-content-type=application/json`.

Autor: Qorinti
Fecha: 2026-10-07
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from qorinti.shared.firestore.values import FirestoreValueError, decode_fields, split_document_name
from qorinti.shared.utils.datetime_helpers import from_iso8601
from qorinti.modules.billing.schemas import DocumentCreatedEvent


class EventDecodingError(ValueError):
    """El evento recibido no se puede interpretar (no se reintenta)."""
    pass


@dataclass(frozen=True)
class CloudEventAttributes:
    id: str
    type: str
    source: Optional[str] = None
    subject: Optional[str] = None
    time: Optional[str] = None


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    value = headers.get(name) or headers.get(name.title())
    return value.strip() if isinstance(value, str) and value.strip() else None


def _load_body(body: Any) -> Any:
    if isinstance(body, (bytes, bytearray)):
        if not body:
            return {}
        try:
            return json.loads(body)
        except (UnicodeDecodeError, ValueError) as e:
            raise EventDecodingError("El cuerpo del evento no es JSON válido") from e
    return body if body is not None else {}


def parse_cloudevent(headers: Mapping[str, str], body: Any) -> Tuple[CloudEventAttributes, Any]:
    """
    Separa atributos del CloudEvent y su `data`.

    Args:
        headers: headers HTTP (Starlette los trata sin distinguir mayúsculas)
        body: bytes crudos o JSON ya cargado

    Raises:
        EventDecodingError: faltan atributos obligatorios o el cuerpo es inválido
    """
    content_type = (_header(headers, "content-type") or "").lower()
    if "protobuf" in content_type:
        raise EventDecodingError("Payload protobuf no soportado; usar application/json")

    payload = _load_body(body)

    if "cloudevents+json" in content_type:
        if not isinstance(payload, Mapping):
            raise EventDecodingError("CloudEvent estructurado debe ser un objeto JSON")
        attrs = CloudEventAttributes(
            id=str(payload.get("id") or ""),
            type=str(payload.get("type") or ""),
            source=payload.get("source"),
            subject=payload.get("subject"),
            time=payload.get("time"),
        )
        data = payload.get("data") or {}
    else:
        attrs = CloudEventAttributes(
            id=_header(headers, "ce-id") or "",
            type=_header(headers, "ce-type") or "",
            source=_header(headers, "ce-source"),
            subject=_header(headers, "ce-subject"),
            time=_header(headers, "ce-time"),
        )
        data = payload

    if not attrs.id or not attrs.type:
        raise EventDecodingError("Faltan atributos obligatorios del CloudEvent (id/type)")
    return attrs, data


def to_document_created_event(attrs: CloudEventAttributes, data: Any) -> DocumentCreatedEvent:
    """
    Construye el evento normalizado a partir de DocumentEventData.

    La ruta se toma de `value.name`; si falta, del `subject`
    (`documents/payments/abc`).
    """
    if not isinstance(data, Mapping):
        raise EventDecodingError("DocumentEventData debe ser un objeto JSON")

    value = data.get("value") or {}
    if not isinstance(value, Mapping):
        raise EventDecodingError("DocumentEventData.value debe ser un objeto")

    name = value.get("name") or attrs.subject
    if not name:
        raise EventDecodingError("No se pudo determinar la ruta del documento")

    try:
        document_path, document_id = split_document_name(str(name))
        fields = decode_fields(value.get("fields") or {})
    except FirestoreValueError as e:
        raise EventDecodingError(str(e)) from e

    create_time = None
    raw_time = value.get("createTime") or attrs.time
    if raw_time:
        try:
            create_time = from_iso8601(str(raw_time))
        except ValueError as e:
            raise EventDecodingError(f"createTime inválido: {raw_time!r}") from e

    return DocumentCreatedEvent(
        event_id=attrs.id,
        event_type=attrs.type,
        source=attrs.source,
        document_path=document_path,
        document_id=document_id,
        data=fields,
        create_time=create_time,
    )


__all__ = [
    "EventDecodingError",
    "CloudEventAttributes",
    "parse_cloudevent",
    "to_document_created_event",
]

# Fin del archivo qorinti/modules/billing/triggers/events.py
