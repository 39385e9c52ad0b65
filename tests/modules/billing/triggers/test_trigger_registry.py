# -*- coding: utf-8 -*-
import pytest

from qorinti.modules.billing.schemas import DocumentCreatedEvent, HandlerResult
from qorinti.modules.billing.triggers import TriggerDispatchError, TriggerRegistry
from qorinti.modules.billing.triggers.registry import compile_document_pattern


def _event(path: str) -> DocumentCreatedEvent:
    return DocumentCreatedEvent(
        event_id="evt-1",
        document_path=path,
        document_id=path.rsplit("/", 1)[-1],
        data={},
    )


def test_compile_pattern_extracts_params():
    regex = compile_document_pattern("payments/{paymentId}")
    assert regex.match("payments/abc").groupdict() == {"paymentId": "abc"}
    assert regex.match("payments/abc/extra/x") is None
    assert regex.match("receipts/abc") is None


@pytest.mark.parametrize("pattern", ["payments", "payments/{a}/sub", "payments/{a", "a/{x}/b/{x}"])
def test_compile_pattern_rejects_invalid(pattern):
    with pytest.raises(ValueError):
        compile_document_pattern(pattern)


def test_match_returns_all_bindings_for_path():
    registry = TriggerRegistry()

    @registry.on_document_created("payments/{paymentId}")
    async def first(store, event, params):
        return HandlerResult.applied("first")

    @registry.on_document_created("payments/{paymentId}", name="second")
    async def _second(store, event, params):
        return HandlerResult.applied("second")

    matches = registry.match("payments/p1")
    assert [b.name for b, _ in matches] == ["first", "second"]
    assert matches[0][1] == {"paymentId": "p1"}
    assert registry.match("commission_payments/x") == []


def test_duplicate_handler_name_is_rejected():
    registry = TriggerRegistry()

    async def handler(store, event, params):
        return HandlerResult.applied("h")

    registry.register("payments/{id}", handler)
    with pytest.raises(ValueError):
        registry.register("payments/{id}", handler)


@pytest.mark.asyncio
async def test_dispatch_runs_handlers_with_params(store):
    registry = TriggerRegistry()
    seen = []

    @registry.on_document_created("payments/{paymentId}")
    async def handler(store, event, params):
        seen.append(params["paymentId"])
        return HandlerResult.skipped("handler", "not_applicable")

    results = await registry.dispatch(store, _event("payments/p1"))

    assert seen == ["p1"]
    assert [r.reason for r in results] == ["not_applicable"]


@pytest.mark.asyncio
async def test_dispatch_isolates_failures(store):
    registry = TriggerRegistry()
    calls = []

    @registry.on_document_created("payments/{paymentId}")
    async def broken(store, event, params):
        calls.append("broken")
        raise RuntimeError("firestore unavailable")

    @registry.on_document_created("payments/{paymentId}")
    async def healthy(store, event, params):
        calls.append("healthy")
        return HandlerResult.applied("healthy", document_id=params["paymentId"])

    with pytest.raises(TriggerDispatchError) as ei:
        await registry.dispatch(store, _event("payments/p1"))

    assert calls == ["broken", "healthy"]
    assert set(ei.value.failures) == {"broken"}
    assert [r.handler for r in ei.value.results] == ["healthy"]


@pytest.mark.asyncio
async def test_dispatch_without_handlers_returns_empty(store):
    assert await TriggerRegistry().dispatch(store, _event("drivers/d1")) == []
# Fin del archivo tests/modules/billing/triggers/test_trigger_registry.py
