# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/metrics/__init__.py

Métricas Prometheus del módulo Billing.

Autor: Qorinti
Fecha: 2026-10-07
"""
