# -*- coding: utf-8 -*-
"""
qorinti/shared/config/config_loader.py

Selección de la clase de configuración según PYTHON_ENV.

- development (por defecto) → DevSettings
- test                      → EnvTestingSettings
- production                → ProdSettings

Un valor desconocido de PYTHON_ENV se rechaza con ValueError.

Autor: Qorinti
Fecha: 2026-10-02
"""

import logging
import os
from functools import lru_cache
from typing import Dict, Type

from .settings_base import BaseAppSettings
from .settings_dev import DevSettings
from .settings_prod import ProdSettings
from .settings_testing import EnvTestingSettings

logger = logging.getLogger(__name__)

SETTINGS_BY_ENV: Dict[str, Type[BaseAppSettings]] = {
    "development": DevSettings,
    "test": EnvTestingSettings,
    "production": ProdSettings,
}


def resolve_settings_class(env: str) -> Type[BaseAppSettings]:
    try:
        return SETTINGS_BY_ENV[env]
    except KeyError:
        valid = ", ".join(sorted(SETTINGS_BY_ENV))
        raise ValueError(f"PYTHON_ENV inválido: {env!r} (valores: {valid})") from None


@lru_cache(maxsize=1)
def get_settings() -> BaseAppSettings:
    """
    Instancia (una vez) la configuración del entorno actual y la valida.

    Raises:
        ValueError: PYTHON_ENV desconocido o validaciones de seguridad fallidas
    """
    env = os.getenv("PYTHON_ENV") or "development"
    settings = resolve_settings_class(env)()
    settings._security_checks()

    logger.debug(
        "Configuración cargada: env=%s, project=%s, database=%s",
        settings.python_env,
        settings.gcp_project_id,
        settings.firestore_database,
    )
    return settings


__all__ = ["SETTINGS_BY_ENV", "resolve_settings_class", "get_settings"]
# Fin del archivo qorinti/shared/config/config_loader.py
