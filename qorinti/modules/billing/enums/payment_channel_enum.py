# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/enums/payment_channel_enum.py

Canal de cobro derivado del código del método de pago:
- APP_*    → cobrado dentro de la app
- DIRECT_* → cobrado directamente por el conductor (efectivo, etc.)

Autor: Qorinti
Fecha: 2026-10-03
"""

from enum import StrEnum
from typing import Optional

APP_PREFIX = "APP_"
DIRECT_PREFIX = "DIRECT_"


class PaymentChannel(StrEnum):
    APP = "APP"
    DIRECT = "DIRECT"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_method_code(cls, code: Optional[str]) -> "PaymentChannel":
        normalized = (code or "").strip().upper()
        if normalized.startswith(APP_PREFIX):
            return cls.APP
        if normalized.startswith(DIRECT_PREFIX):
            return cls.DIRECT
        return cls.UNKNOWN


__all__ = ["PaymentChannel", "APP_PREFIX", "DIRECT_PREFIX"]

# Fin del archivo qorinti/modules/billing/enums/payment_channel_enum.py
