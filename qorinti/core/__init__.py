# -*- coding: utf-8 -*-
"""
qorinti/core/__init__.py

Fachada unificada para componentes centrales de las funciones de Qorinti:
- Configuración (settings)
- Logging

Esta capa envuelve la implementación existente en `qorinti.shared.*` para
ofrecer puntos de entrada estables hacia el resto de los módulos.

Autor: Qorinti
Fecha: 2026-10-02
"""

from .settings import get_settings
from .logging import setup_logging

__all__ = [
    "get_settings",
    "setup_logging",
]

# Fin del archivo qorinti/core/__init__.py
