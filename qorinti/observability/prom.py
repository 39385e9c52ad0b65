# -*- coding: utf-8 -*-
"""
qorinti/observability/prom.py

Métricas HTTP del servicio y endpoint /metrics.

- Cada petición se etiqueta con la plantilla de la ruta
  (`/admin/billing/commissions/{commission_id}/reconcile`), no con la URL
  concreta; las rutas inexistentes comparten la etiqueta `UNMATCHED_PATH`.
- El scrape de /metrics no se cuenta a sí mismo.
- /metrics expone el registro global (HTTP) seguido del registro de
  Billing (eventos y resultados de handlers).

Autor: Qorinti
Fecha: 2026-10-08
"""
from __future__ import annotations

from time import perf_counter

from fastapi import APIRouter, FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

from qorinti.modules.billing.metrics.exporters.prometheus_exporter import render_prometheus_metrics

METRICS_PATH = "/metrics"
UNMATCHED_PATH = "__unmatched__"

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)
REQUEST_LATENCY = Histogram(
    "http_request_latency_seconds",
    "Latency per request (s)",
    ["method", "path", "status"],
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)


def route_label(request: Request) -> str:
    """Plantilla de la ruta resuelta por el router, o `UNMATCHED_PATH`."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_PATH


class PrometheusMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        if request.url.path == METRICS_PATH:
            return await call_next(request)

        start = perf_counter()
        resp = await call_next(request)
        elapsed = perf_counter() - start

        labels = (request.method, route_label(request), str(resp.status_code))
        REQUEST_LATENCY.labels(*labels).observe(elapsed)
        REQUEST_COUNT.labels(*labels).inc()
        return resp


def render_all_metrics() -> bytes:
    # Sin nombres compartidos entre registros (http_* vs billing_*)
    return generate_latest() + render_prometheus_metrics()


metrics_router = APIRouter(include_in_schema=False)


@metrics_router.get(METRICS_PATH)
def metrics() -> Response:
    return Response(content=render_all_metrics(), media_type=CONTENT_TYPE_LATEST)


def setup_observability(app: FastAPI) -> None:
    """Instrumenta las peticiones HTTP y monta /metrics."""
    app.add_middleware(PrometheusMiddleware)
    app.include_router(metrics_router)


__all__ = [
    "METRICS_PATH",
    "UNMATCHED_PATH",
    "PrometheusMiddleware",
    "route_label",
    "render_all_metrics",
    "setup_observability",
]

# Fin del archivo qorinti/observability/prom.py
