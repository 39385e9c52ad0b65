# -*- coding: utf-8 -*-
"""
qorinti/shared/config/__init__.py

Punto único de acceso a la configuración:
    from qorinti.shared.config import get_settings

Autor: Qorinti
Fecha: 2026-10-02
"""

from .config_loader import get_settings
from .logging_config import setup_logging
from .settings_base import BaseAppSettings
from .settings_dev import DevSettings
from .settings_testing import EnvTestingSettings
from .settings_prod import ProdSettings

__all__ = [
    "get_settings",
    "setup_logging",
    "BaseAppSettings",
    "DevSettings",
    "EnvTestingSettings",
    "ProdSettings",
]
# Fin del archivo qorinti/shared/config/__init__.py
