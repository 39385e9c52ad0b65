# -*- coding: utf-8 -*-
"""
qorinti/routes/health_routes.py

Health check del servicio de funciones de Qorinti.

Autor: Qorinti
Fecha: 2026-10-08
"""

from fastapi import APIRouter

from qorinti.core.settings import get_settings
from qorinti.shared.firestore.client import check_firestore_health
from qorinti.shared.utils.datetime_helpers import to_iso8601, utcnow

router = APIRouter()


@router.get(
    "/health",
    summary="Health check del servicio",
    description="Estado básico del servicio y conectividad con Firestore.",
)
async def health_check() -> dict:
    settings = get_settings()

    firestore_ok = await check_firestore_health(timeout_s=2.0)

    return {
        "status": "ok" if firestore_ok else "degraded",
        "timestamp": to_iso8601(utcnow()),
        "environment": settings.python_env,
        "firestore": {
            "reachable": firestore_ok,
            "database": settings.firestore_database,
            "emulator": bool(settings.firestore_emulator_host),
        },
        "service": {
            "name": settings.app_name,
            "version": settings.app_version,
        },
    }


@router.get("/health/live", summary="Liveness (sin dependencias)")
async def liveness() -> dict:
    return {"status": "ok"}

# Fin del archivo qorinti/routes/health_routes.py
