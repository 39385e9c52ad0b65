# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/facades/commissions/__init__.py

Submódulo de comisiones - generación de la deuda del conductor por
pagos DIRECT_*.

Autor: Qorinti
Fecha: 2026-10-05
"""

from .calculator import COMMISSION_PERCENTAGE, compute_commission_amount
from .driver_resolver import DriverResolution, resolve_driver_id
from .generator import generate_commission

__all__ = [
    "COMMISSION_PERCENTAGE",
    "compute_commission_amount",
    "DriverResolution",
    "resolve_driver_id",
    "generate_commission",
]

# Fin del archivo qorinti/modules/billing/facades/commissions/__init__.py
