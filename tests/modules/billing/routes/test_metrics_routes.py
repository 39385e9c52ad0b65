# -*- coding: utf-8 -*-
import pytest

from prometheus_client import REGISTRY

from qorinti.modules.billing.schemas import FIRESTORE_DOCUMENT_CREATED
from qorinti.observability.prom import UNMATCHED_PATH


@pytest.mark.asyncio
async def test_billing_metrics_count_outcomes(async_client, store):
    store.seed("payment_methods", "M1", {"code": "APP_CARD"})
    await async_client.post(
        "/events/firestore",
        headers={
            "content-type": "application/json",
            "ce-id": "evt-metrics",
            "ce-type": FIRESTORE_DOCUMENT_CREATED,
            "ce-source": "test",
        },
        json={
            "value": {
                "name": "projects/p/databases/(default)/documents/payments/pm1",
                "fields": {"paymentMethodId": {"stringValue": "M1"}},
            }
        },
    )

    resp = await async_client.get("/billing/metrics/prometheus")
    assert resp.status_code == 200
    text = resp.text
    assert "billing_events_received_total" in text
    assert 'billing_trigger_skipped_total{handler="receipt_issuer",reason="receipt_not_requested"}' in text
    assert 'billing_trigger_outcome_total{handler="commission_generator",outcome="skipped"}' in text


@pytest.mark.asyncio
async def test_global_metrics_include_http_and_billing(async_client):
    await async_client.get("/health/live")
    resp = await async_client.get("/metrics")
    assert resp.status_code == 200
    assert "http_requests_total" in resp.text
    assert "billing_trigger_outcome_total" in resp.text


@pytest.mark.asyncio
async def test_metrics_ping(async_client):
    resp = await async_client.get("/billing/metrics/ping")
    assert resp.json()["status"] == "ok"


def _http_count(path, status):
    value = REGISTRY.get_sample_value(
        "http_requests_total", {"method": "POST", "path": path, "status": status}
    )
    return value or 0.0


@pytest.mark.asyncio
async def test_http_metrics_use_route_template(async_client, admin_headers, seed_commission):
    seed_commission("CM1", amount=15.00)
    template = "/admin/billing/commissions/{commission_id}/reconcile"
    before = _http_count(template, "200")

    resp = await async_client.post("/admin/billing/commissions/CM1/reconcile", headers=admin_headers)

    assert resp.status_code == 200
    assert _http_count(template, "200") == before + 1
    assert _http_count("/admin/billing/commissions/CM1/reconcile", "200") == 0.0


@pytest.mark.asyncio
async def test_http_metrics_group_unknown_paths(async_client):
    before = _http_count(UNMATCHED_PATH, "404")

    await async_client.post("/no-such-route/123")

    assert _http_count(UNMATCHED_PATH, "404") == before + 1


@pytest.mark.asyncio
async def test_metrics_scrape_is_not_counted(async_client):
    await async_client.get("/metrics")
    resp = await async_client.get("/metrics")
    assert 'path="/metrics"' not in resp.text
# Fin del archivo tests/modules/billing/routes/test_metrics_routes.py
