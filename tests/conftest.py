# tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests para las funciones de Qorinti.

- PYTHON_ENV=test antes de importar la app (settings deterministas)
- Almacén de documentos en memoria inyectado vía dependency_overrides
- Cliente httpx async con ciclo de vida (asgi-lifespan)
- Helpers para sembrar pagos, métodos, asignaciones y comisiones
"""

import os
from collections.abc import AsyncIterator

import pytest

# -----------------------------------------------------------------------------
# 0) Entorno mínimo (antes de cualquier import de qorinti.main)
# -----------------------------------------------------------------------------
os.environ["PYTHON_ENV"] = "test"
os.environ.pop("ADMIN_API_TOKEN", None)
os.environ.pop("EVENTS_ALLOWED_SOURCES", None)

from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

from tests.fixtures.memory_store import InMemoryDocumentStore

ADMIN_TOKEN = "test-admin-token"


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    from qorinti.shared.config.config_loader import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture(scope="session")
def app():
    """Carga la app FastAPI **después** de fijar las variables de entorno."""
    from qorinti.main import app as fastapi_app
    return fastapi_app


@pytest.fixture
async def async_client(app, store) -> AsyncIterator[AsyncClient]:
    """
    Cliente HTTP asíncrono contra la app, con el almacén en memoria
    reemplazando a Firestore.
    """
    from qorinti.shared.firestore.client import get_document_store

    app.dependency_overrides[get_document_store] = lambda: store
    try:
        async with LifespanManager(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://testserver") as client:
                yield client
    finally:
        app.dependency_overrides.pop(get_document_store, None)


@pytest.fixture
def admin_headers() -> dict:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


# -----------------------------------------------------------------------------
# Siembra de datos
# -----------------------------------------------------------------------------
@pytest.fixture
def seed_direct_chain(store):
    """Método DIRECT_CASH + asignación A1 → vínculo L1 → conductor D1."""

    def _seed(method_code: str = "DIRECT_CASH", driver_id: str = "D1"):
        store.seed("payment_methods", "M1", {"code": method_code})
        store.seed("assignments", "A1", {"driverVehicleLinkId": "L1"})
        store.seed("driver_vehicle_links", "L1", {"driverId": driver_id})
        return store

    return _seed


@pytest.fixture
def seed_commission(store):
    def _seed(commission_id: str, *, amount: float, driver_id: str = "D1", status: str | None = "GENERATED"):
        data = {
            "paymentId": f"pay-{commission_id}",
            "driverId": driver_id,
            "baseAmount": amount * 100 / 15,
            "percentage": 15.0,
            "amount": amount,
        }
        if status is not None:
            data["status"] = status
        store.seed("commissions", commission_id, data)
        return data

    return _seed
