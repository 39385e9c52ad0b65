# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/facades/receipts/__init__.py

Submódulo de comprobantes - emisión de boletas/facturas por pago.

Autor: Qorinti
Fecha: 2026-10-04
"""

from .issuer import issue_receipt, build_receipt
from .numbering import series_for, format_number, format_series_number
from .rules import resolve_receipt_type, requires_app_method

__all__ = [
    "issue_receipt",
    "build_receipt",
    "series_for",
    "format_number",
    "format_series_number",
    "resolve_receipt_type",
    "requires_app_method",
]

# Fin del archivo qorinti/modules/billing/facades/receipts/__init__.py
