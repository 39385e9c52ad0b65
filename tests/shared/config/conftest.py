# -*- coding: utf-8 -*-
import os
import pytest


@pytest.fixture(autouse=True)
def _isolate_env_and_cache(monkeypatch):
    """
    Aísla variables de entorno y limpia el caché de get_settings() en cada test.
    """
    for k in list(os.environ.keys()):
        if k.startswith(("APP_", "FIRESTORE_", "GOOGLE_", "ADMIN_", "EVENTS_", "LOG_")):
            monkeypatch.delenv(k, raising=False)
    monkeypatch.setenv("PYTHON_ENV", "development")

    from qorinti.shared.config.config_loader import get_settings
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()
# Fin del archivo tests/shared/config/conftest.py
