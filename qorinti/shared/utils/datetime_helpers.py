# -*- coding: utf-8 -*-
"""
qorinti/shared/utils/datetime_helpers.py

Utilidades para manejo consistente de timestamps ISO 8601.

Autor: Qorinti
Fecha: 2026-10-02
"""

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """
    Retorna el timestamp UTC actual (timezone-aware).

    Examples:
        >>> now = utcnow()
        >>> now.tzinfo == timezone.utc
        True
    """
    return datetime.now(timezone.utc)


def from_iso8601(iso_string: str) -> datetime:
    """
    Parsea una cadena ISO 8601 y retorna datetime UTC timezone-aware.

    Firestore entrega timestamps RFC 3339 con hasta 9 dígitos de fracción
    ("2026-10-02T14:30:00.123456789Z"); se truncan a microsegundos.

    Examples:
        >>> dt = from_iso8601("2026-10-02T14:30:00Z")
        >>> dt.tzinfo == timezone.utc
        True
        >>> from_iso8601("2026-10-02T14:30:00.123456789Z").microsecond
        123456
    """
    value = iso_string.strip().replace("Z", "+00:00")
    if "." in value:
        head, _, rest = value.partition(".")
        digits = ""
        while rest and rest[0].isdigit():
            digits += rest[0]
            rest = rest[1:]
        value = f"{head}.{digits[:6].ljust(6, '0')}{rest}"
    dt = datetime.fromisoformat(value)
    return ensure_utc(dt)


def ensure_utc(dt: datetime) -> datetime:
    """
    Asegura que un datetime sea UTC timezone-aware.

    Examples:
        >>> dt_naive = datetime(2026, 10, 2, 14, 30, 0)
        >>> ensure_utc(dt_naive).tzinfo == timezone.utc
        True
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    elif dt.tzinfo != timezone.utc:
        return dt.astimezone(timezone.utc)
    return dt


def to_iso8601(dt: Optional[datetime]) -> Optional[str]:
    """
    Convierte datetime a string ISO 8601 con 'Z' para UTC.

    Examples:
        >>> dt = datetime(2026, 10, 2, 14, 30, 0, tzinfo=timezone.utc)
        >>> to_iso8601(dt)
        '2026-10-02T14:30:00Z'
    """
    if dt is None:
        return None
    return ensure_utc(dt).isoformat().replace("+00:00", "Z")


__all__ = ["utcnow", "to_iso8601", "from_iso8601", "ensure_utc"]
# Fin del archivo qorinti/shared/utils/datetime_helpers.py
