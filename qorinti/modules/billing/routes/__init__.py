# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/routes/__init__.py

Ensamblador de rutas del módulo Billing.

Autor: Qorinti
Fecha: 2026-10-08
"""

from fastapi import APIRouter

from .events_routes import router as events_router
from .admin_routes import router as admin_router
from qorinti.modules.billing.metrics.routes import router as metrics_router


def get_billing_routers() -> list[APIRouter]:
    return [events_router, admin_router, metrics_router]


__all__ = ["events_router", "admin_router", "metrics_router", "get_billing_routers"]
