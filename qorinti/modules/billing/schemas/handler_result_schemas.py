# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/schemas/handler_result_schemas.py

Resultado normalizado de un handler reactivo.

Cada invocación termina en un único outcome (applied / skipped /
violation / duplicate) con una razón legible; el dispatcher lo usa para
logs y métricas y las rutas lo devuelven tal cual.

Autor: Qorinti
Fecha: 2026-10-04
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from qorinti.modules.billing.enums import HandlerOutcome


class HandlerResult(BaseModel):
    handler: str = Field(description="Nombre del handler que produjo el resultado")
    outcome: HandlerOutcome
    reason: Optional[str] = Field(default=None, description="Razón corta (snake_case)")
    document_id: Optional[str] = Field(default=None, description="Documento escrito, si aplica")
    details: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def applied(cls, handler: str, document_id: Optional[str] = None, **details: Any) -> "HandlerResult":
        return cls(handler=handler, outcome=HandlerOutcome.APPLIED, document_id=document_id, details=details)

    @classmethod
    def skipped(cls, handler: str, reason: str, **details: Any) -> "HandlerResult":
        return cls(handler=handler, outcome=HandlerOutcome.SKIPPED, reason=reason, details=details)

    @classmethod
    def violation(cls, handler: str, reason: str, document_id: Optional[str] = None, **details: Any) -> "HandlerResult":
        return cls(
            handler=handler,
            outcome=HandlerOutcome.VIOLATION,
            reason=reason,
            document_id=document_id,
            details=details,
        )

    @classmethod
    def duplicate(cls, handler: str, document_id: Optional[str] = None, **details: Any) -> "HandlerResult":
        return cls(
            handler=handler,
            outcome=HandlerOutcome.DUPLICATE,
            reason="already_exists",
            document_id=document_id,
            details=details,
        )


__all__ = ["HandlerResult"]

# Fin del archivo qorinti/modules/billing/schemas/handler_result_schemas.py
