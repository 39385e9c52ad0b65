# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/enums/commission_status_enum.py

Estados de liquidación de una comisión.

Autor: Qorinti
Fecha: 2026-10-03
"""

from enum import StrEnum
from typing import Any


class CommissionStatus(StrEnum):
    """Ciclo de vida de la comisión según la suma de sus pagos."""

    GENERATED = "GENERATED"
    PARTIAL = "PARTIAL"
    PAID = "PAID"

    @classmethod
    def parse(cls, value: Any) -> "CommissionStatus":
        """Estado ausente o desconocido se interpreta como GENERATED."""
        normalized = str(value or "").strip().upper()
        for member in cls:
            if member.value == normalized:
                return member
        return cls.GENERATED

    @property
    def is_settled(self) -> bool:
        return self is CommissionStatus.PAID


__all__ = ["CommissionStatus"]

# Fin del archivo qorinti/modules/billing/enums/commission_status_enum.py
