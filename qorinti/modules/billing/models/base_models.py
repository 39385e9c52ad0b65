# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/models/base_models.py

Base Pydantic para documentos de Firestore del módulo Billing.

- Alias camelCase (nombres en Firestore) con acceso snake_case en Python.
- Tolerante a campos extra: los documentos los escriben otras piezas
  (app móvil, panel admin).
- Montos coercionados con `coerce_amount` (texto o NaN → 0.0).

Autor: Qorinti
Fecha: 2026-10-03
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DocumentModel(BaseModel):
    """Documento con id opcional (no se persiste como campo)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        use_enum_values=True,
        coerce_numbers_to_str=True,
    )

    id: Optional[str] = Field(default=None, description="ID del documento en Firestore")


__all__ = ["DocumentModel"]

# Fin del archivo qorinti/modules/billing/models/base_models.py
