# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/metrics/routes/__init__.py

Autor: Qorinti
Fecha: 2026-10-07
"""

from .routes_prometheus import router

__all__ = ["router"]
