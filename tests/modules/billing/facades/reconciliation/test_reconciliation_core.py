# -*- coding: utf-8 -*-
import pytest

from qorinti.modules.billing.enums import CommissionStatus, HandlerOutcome
from qorinti.modules.billing.facades.reconciliation import (
    reconcile_commission_payment,
    recompute_commission,
    recompute_driver_balance,
)


async def _pay(store, cp_id, commission_id, amount):
    """Simula la creación del pago y el disparo del handler."""
    data = {"commissionId": commission_id, "amount": amount}
    store.seed("commission_payments", cp_id, data)
    return await reconcile_commission_payment(store, commission_payment=data, commission_payment_id=cp_id)


def _balance_docs(store, driver_id):
    return [d for d in store.all("driver_account_balances").values() if d["driverId"] == driver_id]


@pytest.mark.asyncio
async def test_partial_then_paid_scenario(store, seed_commission):
    seed_commission("C1", amount=15.00)

    result = await _pay(store, "cp1", "C1", 10.00)
    assert result.outcome == HandlerOutcome.APPLIED
    assert store.doc("commissions", "C1")["status"] == "PARTIAL"
    assert store.doc("driver_account_balances", "D1")["balance"] == 15.0

    await _pay(store, "cp2", "C1", 5.00)
    assert store.doc("commissions", "C1")["status"] == "PAID"
    assert store.doc("driver_account_balances", "D1")["balance"] == 0.0
    assert len(_balance_docs(store, "D1")) == 1


@pytest.mark.asyncio
async def test_balance_sums_other_unpaid_commissions(store, seed_commission):
    seed_commission("C1", amount=15.00)
    seed_commission("C2", amount=7.50, status="PARTIAL")
    seed_commission("C3", amount=30.00, status="PAID")
    seed_commission("C4", amount=2.50, status=None)
    seed_commission("X1", amount=99.00, driver_id="D2")

    await _pay(store, "cp1", "C1", 15.00)

    assert store.doc("commissions", "C1")["status"] == "PAID"
    assert store.doc("driver_account_balances", "D1")["balance"] == 10.0


@pytest.mark.asyncio
async def test_existing_balance_record_is_updated_in_place(store, seed_commission):
    seed_commission("C1", amount=15.00)
    store.seed("driver_account_balances", "legacy-id", {"driverId": "D1", "balance": 123.0})

    await _pay(store, "cp1", "C1", 1.00)

    assert store.doc("driver_account_balances", "legacy-id")["balance"] == 15.0
    assert store.doc("driver_account_balances", "D1") is None


@pytest.mark.asyncio
async def test_exact_payment_is_paid_not_partial(store, seed_commission):
    seed_commission("C1", amount=15.00)
    await _pay(store, "cp1", "C1", 15.00)
    assert store.doc("commissions", "C1")["status"] == "PAID"


@pytest.mark.asyncio
async def test_payment_short_by_fraction_of_cent_stays_partial(store, seed_commission):
    seed_commission("C1", amount=15.00)

    result = await _pay(store, "cp1", "C1", 14.995)

    assert store.doc("commissions", "C1")["status"] == "PARTIAL"
    assert store.doc("driver_account_balances", "D1")["balance"] == 15.0
    assert result.details["paid_total"] == 15.0


@pytest.mark.asyncio
async def test_status_written_even_when_unchanged(store, seed_commission):
    seed_commission("C1", amount=15.00, status="PAID")
    store.seed("commission_payments", "old", {"commissionId": "C1", "amount": 15.0})

    result = await _pay(store, "cp1", "C1", 0.0)

    assert result.outcome == HandlerOutcome.APPLIED
    assert ("update", "commissions", "C1") in store.writes
    assert "updatedAt" in store.doc("commissions", "C1")


@pytest.mark.asyncio
async def test_missing_commission_id_is_noop(store):
    result = await reconcile_commission_payment(store, commission_payment={"amount": 5})
    assert result.outcome == HandlerOutcome.SKIPPED
    assert result.reason == "missing_commission_id"
    assert store.writes == []


@pytest.mark.asyncio
async def test_unknown_commission_is_noop(store):
    result = await _pay(store, "cp1", "ghost", 5.0)
    assert result.outcome == HandlerOutcome.SKIPPED
    assert result.reason == "commission_not_found"
    assert store.writes == []


@pytest.mark.asyncio
async def test_commission_without_driver_updates_status_only(store, seed_commission):
    seed_commission("C1", amount=15.00, driver_id=None)

    result = await _pay(store, "cp1", "C1", 5.0)

    assert result.outcome == HandlerOutcome.APPLIED
    assert store.doc("commissions", "C1")["status"] == "PARTIAL"
    assert store.all("driver_account_balances") == {}


@pytest.mark.asyncio
async def test_reconciliation_runs_in_one_transaction(store, seed_commission):
    seed_commission("C1", amount=15.00)
    await _pay(store, "cp1", "C1", 10.0)
    assert store.transactions_committed == 1


@pytest.mark.asyncio
async def test_recompute_commission_returns_summary(store, seed_commission):
    seed_commission("C1", amount=15.00)
    seed_commission("C2", amount=5.00)
    store.seed("commission_payments", "cp1", {"commissionId": "C1", "amount": 10.0})

    result = await recompute_commission(store, "C1")

    assert result.status is CommissionStatus.PARTIAL
    assert result.previous_status is CommissionStatus.GENERATED
    assert result.paid_total == 10.0
    assert result.driver_balance.balance == 20.0
    assert result.driver_balance.pending_commissions == 2

    assert await recompute_commission(store, "ghost") is None


@pytest.mark.asyncio
async def test_recompute_driver_balance(store, seed_commission):
    seed_commission("C1", amount=15.00)
    seed_commission("C2", amount=5.00, status="PAID")

    snapshot = await recompute_driver_balance(store, "D1")

    assert snapshot.balance == 15.0
    assert snapshot.pending_commissions == 1
    assert snapshot.balance_document_id == "D1"
    assert store.doc("driver_account_balances", "D1")["balance"] == 15.0

    assert await recompute_driver_balance(store, "nobody") is None
    assert store.doc("driver_account_balances", "nobody") is None
# Fin del archivo tests/modules/billing/facades/reconciliation/test_reconciliation_core.py
