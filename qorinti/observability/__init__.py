# -*- coding: utf-8 -*-
"""
qorinti/observability/__init__.py

Autor: Qorinti
Fecha: 2026-10-08
"""

from .prom import setup_observability

__all__ = ["setup_observability"]
