# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/metrics/routes/routes_prometheus.py

Rutas para exponer métricas del módulo Billing en formato Prometheus:
    GET /billing/metrics/prometheus
    GET /billing/metrics/ping

Autor: Qorinti
Fecha: 2026-10-07
"""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST

from qorinti.modules.billing.metrics.exporters.prometheus_exporter import (
    prometheus_ping,
    render_prometheus_metrics,
)

router = APIRouter(prefix="/billing/metrics", tags=["billing:metrics"])


@router.get(
    "/prometheus",
    response_class=PlainTextResponse,
    summary="Exposición de métricas de Billing en formato Prometheus",
)
def prometheus_metrics():
    return PlainTextResponse(content=render_prometheus_metrics(), media_type=CONTENT_TYPE_LATEST)


@router.get("/ping", summary="Salud del exporter de Billing")
def metrics_ping() -> dict:
    return prometheus_ping()

# Fin del archivo qorinti/modules/billing/metrics/routes/routes_prometheus.py
