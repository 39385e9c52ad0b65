# -*- coding: utf-8 -*-
"""
qorinti/shared/utils/__init__.py

Utilidades transversales (fechas y montos).

Autor: Qorinti
Fecha: 2026-10-02
"""

from .datetime_helpers import utcnow, to_iso8601, from_iso8601, ensure_utc
from .money import coerce_amount, round_money, to_decimal

__all__ = [
    "utcnow",
    "to_iso8601",
    "from_iso8601",
    "ensure_utc",
    "coerce_amount",
    "round_money",
    "to_decimal",
]
