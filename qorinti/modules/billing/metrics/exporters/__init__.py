# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/metrics/exporters/__init__.py

Autor: Qorinti
Fecha: 2026-10-07
"""

from .prometheus_exporter import (
    registry,
    render_prometheus_metrics,
    observe_event_received,
    observe_trigger_outcome,
    prometheus_ping,
)

__all__ = [
    "registry",
    "render_prometheus_metrics",
    "observe_event_received",
    "observe_trigger_outcome",
    "prometheus_ping",
]
