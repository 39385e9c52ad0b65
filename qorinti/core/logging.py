# -*- coding: utf-8 -*-
"""
qorinti/core/logging.py

Configuración centralizada de logging para las funciones de Qorinti.
Actúa como fachada del módulo `qorinti.shared.config.logging_config` para
mantener un punto de entrada único bajo `qorinti.core`.

Autor: Qorinti
Fecha: 2026-10-02
"""

from typing import Literal

from qorinti.shared.config.logging_config import setup_logging as _setup_logging


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain",
) -> None:
    """
    Configura el sistema de logging de la aplicación.

    Args:
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        fmt: Formato de salida (plain, pretty, json).
    """
    _setup_logging(level=level, fmt=fmt)

# Fin del archivo qorinti/core/logging.py
