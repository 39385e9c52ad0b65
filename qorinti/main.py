# -*- coding: utf-8 -*-
"""
qorinti/main.py

Punto de entrada del servicio de funciones de Qorinti (Cloud Run).

- Carga .env (python-dotenv) antes de leer la configuración.
- Logging según LOG_LEVEL / LOG_FORMAT.
- Observabilidad Prometheus (/metrics).
- Rutas: /health, /events/firestore, /admin/billing/..., /billing/metrics/...
- Cierre ordenado del cliente de Firestore en shutdown.

Ejecución local:
    uvicorn qorinti.main:app --port 8080

Autor: Qorinti
Fecha: 2026-10-08
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de leer settings
# En PROD se respetan las variables del entorno (Cloud Run)
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().lower()
load_dotenv(dotenv_path=_ENV_PATH, override=_PYTHON_ENV != "production")

import anyio
import uvicorn
from fastapi import FastAPI

from qorinti import __version__
from qorinti.core.logging import setup_logging
from qorinti.core.settings import get_settings
from qorinti.observability.prom import setup_observability
from qorinti.routes import main_router
from qorinti.shared.firestore.client import close_firestore_client

settings = get_settings()
setup_logging(level=settings.log_level, fmt=settings.log_format)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    logger.info(
        "🟢 %s iniciado (env=%s, project=%s, emulator=%s)",
        settings.app_name,
        settings.python_env,
        settings.gcp_project_id,
        settings.firestore_emulator_host or "-",
    )
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        with anyio.CancelScope(shield=True):
            try:
                await close_firestore_client()
                logger.info("🔥 Cliente de Firestore cerrado")
            except Exception as e:
                logger.warning("⚠️ Error cerrando cliente de Firestore: %s", e)
        logger.info("🔴 %s apagado.", settings.app_name)


openapi_tags = [
    {"name": "Health", "description": "Estado del servicio"},
    {"name": "billing:events", "description": "Eventos de Firestore (Eventarc)"},
    {"name": "Admin - Billing", "description": "Reconciliación manual de comisiones y saldos"},
]

app = FastAPI(
    title=settings.app_name,
    description="Comprobantes, comisiones y saldos de conductores derivados de Firestore",
    version=__version__,
    lifespan=lifespan,
    openapi_tags=openapi_tags,
)

if settings.metrics_enabled:
    setup_observability(app)

app.include_router(main_router)


if __name__ == "__main__":
    uvicorn.run(
        "qorinti.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.is_dev,
    )

# Fin del archivo qorinti/main.py
