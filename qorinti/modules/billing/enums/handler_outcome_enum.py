# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/enums/handler_outcome_enum.py

Resultado de negocio de un handler reactivo (usado en logs y métricas).

Autor: Qorinti
Fecha: 2026-10-03
"""

from enum import StrEnum


class HandlerOutcome(StrEnum):
    APPLIED = "applied"        # se escribió el documento derivado
    SKIPPED = "skipped"        # evento no aplicable (referencia ausente, flag apagado...)
    VIOLATION = "violation"    # regla de negocio violada; se marcó el pago
    DUPLICATE = "duplicate"    # el derivado ya existía (reentrega del evento)


__all__ = ["HandlerOutcome"]

# Fin del archivo qorinti/modules/billing/enums/handler_outcome_enum.py
