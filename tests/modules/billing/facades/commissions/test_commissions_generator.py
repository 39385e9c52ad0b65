# -*- coding: utf-8 -*-
from datetime import datetime

import pytest

from qorinti.modules.billing.enums import HandlerOutcome
from qorinti.modules.billing.facades.commissions import generate_commission, resolve_driver_id


def _payment(**overrides):
    data = {"paymentMethodId": "M1", "assignmentId": "A1", "totalAmount": 100.00}
    data.update(overrides)
    return data


@pytest.mark.asyncio
async def test_direct_payment_generates_commission(store, seed_direct_chain):
    seed_direct_chain("DIRECT_CASH")

    result = await generate_commission(store, payment_id="p1", payment=_payment())

    assert result.outcome == HandlerOutcome.APPLIED
    commission = store.doc("commissions", "p1")
    assert commission["paymentId"] == "p1"
    assert commission["assignmentId"] == "A1"
    assert commission["driverId"] == "D1"
    assert commission["baseAmount"] == 100.0
    assert commission["percentage"] == 15.0
    assert commission["amount"] == 15.0
    assert commission["status"] == "GENERATED"
    assert isinstance(commission["createdAt"], datetime)
    # Sólo se escribe la comisión
    assert [w for w in store.writes] == [("create", "commissions", "p1")]


@pytest.mark.asyncio
async def test_direct_code_is_case_insensitive(store, seed_direct_chain):
    seed_direct_chain("direct_transfer")
    result = await generate_commission(store, payment_id="p1", payment=_payment())
    assert result.outcome == HandlerOutcome.APPLIED


@pytest.mark.asyncio
async def test_invalid_total_generates_zero_commission(store, seed_direct_chain):
    seed_direct_chain()
    await generate_commission(store, payment_id="p1", payment=_payment(totalAmount="n/a"))
    commission = store.doc("commissions", "p1")
    assert commission["baseAmount"] == 0.0
    assert commission["amount"] == 0.0


@pytest.mark.asyncio
@pytest.mark.parametrize("code", ["APP_CARD", "CASH", ""])
async def test_non_direct_methods_do_not_generate(store, seed_direct_chain, code):
    seed_direct_chain(code)
    result = await generate_commission(store, payment_id="p1", payment=_payment())
    assert result.outcome == HandlerOutcome.SKIPPED
    assert result.reason == "not_direct_method"
    assert store.all("commissions") == {}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides, reason",
    [
        ({"paymentMethodId": None}, "missing_payment_method"),
        ({"assignmentId": None}, "missing_assignment"),
        ({"assignmentId": "ghost"}, "assignment_not_found"),
    ],
)
async def test_missing_references_skip(store, seed_direct_chain, overrides, reason):
    seed_direct_chain()
    result = await generate_commission(store, payment_id="p1", payment=_payment(**overrides))
    assert result.outcome == HandlerOutcome.SKIPPED
    assert result.reason == reason
    assert store.all("commissions") == {}


@pytest.mark.asyncio
async def test_broken_driver_chain_skips(store, seed_direct_chain):
    seed_direct_chain()
    store.seed("driver_vehicle_links", "L1", {"vehicleId": "V1"})

    result = await generate_commission(store, payment_id="p1", payment=_payment())

    assert result.outcome == HandlerOutcome.SKIPPED
    assert result.reason == "link_without_driver"
    assert store.all("commissions") == {}


@pytest.mark.asyncio
async def test_resolve_driver_id_reports_missing_link(store):
    store.seed("assignments", "A1", {"driverVehicleLinkId": "L404"})
    resolution = await resolve_driver_id(store, "A1")
    assert resolution.resolved is False
    assert resolution.missing == "driver_vehicle_link_not_found"

    store.seed("assignments", "A2", {})
    resolution = await resolve_driver_id(store, "A2")
    assert resolution.missing == "assignment_without_link"


@pytest.mark.asyncio
async def test_redelivery_does_not_duplicate_commission(store, seed_direct_chain):
    seed_direct_chain()

    first = await generate_commission(store, payment_id="p1", payment=_payment())
    second = await generate_commission(store, payment_id="p1", payment=_payment(totalAmount=999))

    assert first.outcome == HandlerOutcome.APPLIED
    assert second.outcome == HandlerOutcome.DUPLICATE
    assert len(store.all("commissions")) == 1
    assert store.doc("commissions", "p1")["amount"] == 15.0


@pytest.mark.asyncio
async def test_generator_with_fake_commission_repo(store, seed_direct_chain):
    seed_direct_chain()
    created = []

    class FakeCommissionRepo:
        async def create(self, store, obj_id, obj):
            created.append((obj_id, obj))
            return True

    result = await generate_commission(
        store,
        payment_id="p9",
        payment=_payment(totalAmount=40),
        commission_repo=FakeCommissionRepo(),
    )

    assert result.outcome == HandlerOutcome.APPLIED
    assert created[0][0] == "p9"
    assert created[0][1].amount == 6.0
# Fin del archivo tests/modules/billing/facades/commissions/test_commissions_generator.py
