# -*- coding: utf-8 -*-
"""
qorinti/modules/billing/metrics/exporters/prometheus_exporter.py

Exporter Prometheus del módulo Billing.

Cuenta eventos recibidos y el outcome de negocio de cada handler
(applied/skipped/violation/duplicate/error), con la razón de los skips
para poder distinguir "no aplica" de "dato roto".

Autor: Qorinti
Fecha: 2026-10-07
"""

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------
# Registro propio del módulo
# --------------------------------------------------------------------------
registry = CollectorRegistry()

# --------------------------------------------------------------------------
# Definición de métricas
# --------------------------------------------------------------------------
EVENTS_RECEIVED_TOTAL = Counter(
    "billing_events_received_total",
    "Total de eventos de Firestore recibidos por tipo",
    ["event_type"],
    registry=registry,
)

TRIGGER_OUTCOME_TOTAL = Counter(
    "billing_trigger_outcome_total",
    "Total de ejecuciones de handlers por outcome (applied/skipped/violation/duplicate/error)",
    ["handler", "outcome"],
    registry=registry,
)

TRIGGER_SKIPPED_TOTAL = Counter(
    "billing_trigger_skipped_total",
    "Total de handlers omitidos por razón",
    ["handler", "reason"],
    registry=registry,
)

TRIGGER_PROCESSING_SECONDS = Histogram(
    "billing_trigger_processing_seconds",
    "Tiempo de ejecución de cada handler (segundos)",
    ["handler"],
    registry=registry,
)


# --------------------------------------------------------------------------
# Funciones auxiliares
# --------------------------------------------------------------------------
def render_prometheus_metrics() -> bytes:
    """Salida actual de las métricas del módulo en formato Prometheus."""
    return generate_latest(registry)


def observe_event_received(event_type: str) -> None:
    EVENTS_RECEIVED_TOTAL.labels(event_type=event_type).inc()


def observe_trigger_outcome(handler: str, outcome: str, duration: float, reason: str | None = None) -> None:
    """
    Registra el resultado de un handler.

    Args:
        handler: receipt_issuer/commission_generator/commission_reconciler
        outcome: applied/skipped/violation/duplicate/error
        duration: Tiempo de ejecución en segundos
        reason: razón del skip (sólo se cuenta cuando outcome=skipped)
    """
    TRIGGER_OUTCOME_TOTAL.labels(handler=handler, outcome=outcome).inc()
    TRIGGER_PROCESSING_SECONDS.labels(handler=handler).observe(duration)
    if outcome == "skipped":
        TRIGGER_SKIPPED_TOTAL.labels(handler=handler, reason=reason or "unspecified").inc()
    logger.debug(
        "[Prometheus] Trigger %s outcome=%s reason=%s duration=%.4fs",
        handler,
        outcome,
        reason,
        duration,
    )


def prometheus_ping() -> dict:
    """Devuelve un simple dict para verificar salud del exporter."""
    return {
        "status": "ok",
        "service": "billing-metrics",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# Fin del archivo qorinti/modules/billing/metrics/exporters/prometheus_exporter.py
