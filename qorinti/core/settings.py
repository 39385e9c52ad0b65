# -*- coding: utf-8 -*-
"""
qorinti/core/settings.py

Fachada de configuración para las funciones de Qorinti.
Reexpone la carga de settings basada en Pydantic v2 definida en
`qorinti.shared.config`.

Autor: Qorinti
Fecha: 2026-10-02
"""

from qorinti.shared.config.config_loader import get_settings as _get_settings
from qorinti.shared.config.settings_base import BaseAppSettings


def get_settings() -> BaseAppSettings:
    """
    Devuelve la configuración global de la aplicación.

    Returns:
        BaseAppSettings: instancia de configuración (según PYTHON_ENV).
    """
    return _get_settings()

# Fin del archivo qorinti/core/settings.py
