# -*- coding: utf-8 -*-
"""
qorinti/shared/firestore/values.py

Decodificación de valores tipados de Firestore en formato JSON
(`google.firestore.v1.Value`), tal como llegan en el payload
`DocumentEventData` de los eventos de Eventarc:

    {"fields": {"totalAmount": {"doubleValue": 100}, "issueReceipt": {"booleanValue": true}}}

Autor: Qorinti
Fecha: 2026-10-03
"""

from __future__ import annotations

import base64
import binascii
from typing import Any, Dict, Mapping, Tuple

from qorinti.shared.utils.datetime_helpers import from_iso8601


class FirestoreValueError(ValueError):
    """Valor tipado de Firestore mal formado."""
    pass


_SPECIAL_DOUBLES = {
    "NaN": float("nan"),
    "Infinity": float("inf"),
    "-Infinity": float("-inf"),
}


def _decode_double(raw: Any) -> float:
    if isinstance(raw, str):
        if raw in _SPECIAL_DOUBLES:
            return _SPECIAL_DOUBLES[raw]
        try:
            return float(raw)
        except ValueError as e:
            raise FirestoreValueError(f"doubleValue inválido: {raw!r}") from e
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise FirestoreValueError(f"doubleValue inválido: {raw!r}")
    return float(raw)


def _decode_integer(raw: Any) -> int:
    # int64 viaja como string en JSON
    if isinstance(raw, bool):
        raise FirestoreValueError(f"integerValue inválido: {raw!r}")
    try:
        return int(raw)
    except (TypeError, ValueError) as e:
        raise FirestoreValueError(f"integerValue inválido: {raw!r}") from e


def decode_value(value: Mapping[str, Any]) -> Any:
    """
    Convierte un `Value` tipado a su equivalente Python.

    - nullValue → None
    - booleanValue → bool
    - integerValue → int
    - doubleValue → float (admite "NaN", "Infinity", "-Infinity")
    - timestampValue → datetime UTC
    - stringValue / referenceValue → str
    - bytesValue → bytes (base64)
    - geoPointValue → {"latitude": float, "longitude": float}
    - arrayValue → list
    - mapValue → dict
    """
    if not isinstance(value, Mapping) or len(value) != 1:
        raise FirestoreValueError(f"Value debe tener exactamente un tipo: {value!r}")

    ((kind, raw),) = value.items()

    if kind == "nullValue":
        return None
    if kind == "booleanValue":
        if not isinstance(raw, bool):
            raise FirestoreValueError(f"booleanValue inválido: {raw!r}")
        return raw
    if kind == "integerValue":
        return _decode_integer(raw)
    if kind == "doubleValue":
        return _decode_double(raw)
    if kind == "timestampValue":
        try:
            return from_iso8601(str(raw))
        except ValueError as e:
            raise FirestoreValueError(f"timestampValue inválido: {raw!r}") from e
    if kind in ("stringValue", "referenceValue"):
        return str(raw)
    if kind == "bytesValue":
        try:
            return base64.b64decode(raw, validate=True)
        except (binascii.Error, TypeError) as e:
            raise FirestoreValueError("bytesValue no es base64 válido") from e
    if kind == "geoPointValue":
        raw = raw or {}
        return {
            "latitude": float(raw.get("latitude", 0.0)),
            "longitude": float(raw.get("longitude", 0.0)),
        }
    if kind == "arrayValue":
        return [decode_value(v) for v in (raw or {}).get("values", [])]
    if kind == "mapValue":
        return decode_fields((raw or {}).get("fields", {}))

    raise FirestoreValueError(f"Tipo de Value no soportado: {kind}")


def decode_fields(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Decodifica el mapa `fields` de un documento."""
    if fields is None:
        return {}
    if not isinstance(fields, Mapping):
        raise FirestoreValueError("fields debe ser un objeto")
    return {name: decode_value(v) for name, v in fields.items()}


def split_document_name(name: str) -> Tuple[str, str]:
    """
    Separa el nombre completo de un documento en (ruta relativa, id).

    Examples:
        >>> split_document_name("projects/p/databases/(default)/documents/payments/abc")
        ('payments/abc', 'abc')
    """
    marker = "/documents/"
    if marker in name:
        path = name.split(marker, 1)[1]
    elif name.startswith("documents/"):
        path = name[len("documents/"):]
    else:
        path = name
    path = path.strip("/")
    segments = path.split("/")
    if not path or len(segments) % 2 != 0:
        raise FirestoreValueError(f"Nombre de documento inválido: {name!r}")
    return path, segments[-1]


__all__ = [
    "FirestoreValueError",
    "decode_value",
    "decode_fields",
    "split_document_name",
]

# Fin del archivo qorinti/shared/firestore/values.py
