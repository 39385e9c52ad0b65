# -*- coding: utf-8 -*-
"""
qorinti/routes/__init__.py

Ensamblador de routers del servicio.

Autor: Qorinti
Fecha: 2026-10-08
"""

from fastapi import APIRouter

from .health_routes import router as health_router
from qorinti.modules.billing.routes import get_billing_routers

main_router = APIRouter()
main_router.include_router(health_router, tags=["Health"])
for _router in get_billing_routers():
    main_router.include_router(_router)

__all__ = ["main_router"]

# Fin del archivo qorinti/routes/__init__.py
