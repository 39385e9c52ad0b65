# -*- coding: utf-8 -*-
"""
qorinti/shared/utils/money.py

Helpers de montos: coerción tolerante y redondeo a céntimos.

Los montos viajan como double en Firestore; la aritmética se hace en
Decimal (a partir de la representación str del float) y el resultado
vuelve a float redondeado a 2 decimales, half-up.

Autor: Qorinti
Fecha: 2026-10-02
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

CENT = Decimal("0.01")


def coerce_amount(value: Any) -> float:
    """
    Convierte un valor arbitrario del documento a float.

    Devuelve 0.0 si no es un número válido y finito (None, texto no
    numérico, NaN, infinito, booleanos).

    Examples:
        >>> coerce_amount("100.5")
        100.5
        >>> coerce_amount(None)
        0.0
        >>> coerce_amount(float("nan"))
        0.0
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, Decimal):
        value = float(value)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def to_decimal(value: Any) -> Decimal:
    """Decimal exacto de la representación decimal corta del monto coercionado."""
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")
    try:
        return Decimal(str(coerce_amount(value)))
    except InvalidOperation:  # pragma: no cover
        return Decimal("0")


def round_money(value: Any) -> float:
    """
    Redondea a 2 decimales con half-up sobre el céntimo.

    Examples:
        >>> round_money(2.675)
        2.68
        >>> round_money("10.004")
        10.0
    """
    return float(to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP))


__all__ = ["coerce_amount", "to_decimal", "round_money", "CENT"]
# Fin del archivo qorinti/shared/utils/money.py
