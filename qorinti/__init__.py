# -*- coding: utf-8 -*-
"""
qorinti/__init__.py

Paquete principal del backend de funciones de Qorinti (facturación,
comisiones y estado de cuenta de conductores).

Autor: Qorinti
Fecha: 2026-10-02
"""

__version__ = "0.1.0"

# Fin del archivo qorinti/__init__.py
