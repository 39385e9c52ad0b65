# -*- coding: utf-8 -*-
import pytest
from google.api_core.exceptions import AlreadyExists

from qorinti.shared.firestore.store import DocumentStore, FirestoreDocumentStore


class _FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data
        self.exists = data is not None

    def to_dict(self):
        return self._data


class _FakeDocRef:
    def __init__(self, docs, doc_id):
        self._docs = docs
        self.id = doc_id

    async def get(self, transaction=None):
        return _FakeSnapshot(self.id, self._docs.get(self.id))

    async def create(self, data):
        if self.id in self._docs:
            raise AlreadyExists(self.id)
        self._docs[self.id] = dict(data)

    async def set(self, data, merge=False):
        self._docs[self.id] = dict(data)

    async def update(self, data):
        self._docs[self.id].update(data)


class _FakeCollection:
    def __init__(self, docs):
        self._docs = docs

    def document(self, doc_id):
        return _FakeDocRef(self._docs, doc_id)


class _FakeClient:
    def __init__(self):
        self.data = {}

    def collection(self, name):
        return _FakeCollection(self.data.setdefault(name, {}))


def test_firestore_store_satisfies_protocol():
    assert isinstance(FirestoreDocumentStore(_FakeClient()), DocumentStore)


def test_memory_store_matches_protocol_surface():
    from tests.fixtures.memory_store import InMemoryDocumentStore

    protocol_ops = {"get", "find", "create", "set", "update", "run_in_transaction"}
    assert isinstance(InMemoryDocumentStore(), DocumentStore)
    for name in protocol_ops:
        assert callable(getattr(FirestoreDocumentStore, name))
    assert not hasattr(FirestoreDocumentStore, "add")


@pytest.mark.asyncio
async def test_create_returns_false_when_document_exists():
    client = _FakeClient()
    store = FirestoreDocumentStore(client)

    assert await store.create("receipts", "p1", {"series": "B001"}) is True
    assert await store.create("receipts", "p1", {"series": "F001"}) is False
    assert client.data["receipts"]["p1"] == {"series": "B001"}


@pytest.mark.asyncio
async def test_get_missing_returns_none():
    store = FirestoreDocumentStore(_FakeClient())
    assert await store.get("payments", "ghost") is None

    await store.set("payments", "p1", {"totalAmount": 10})
    doc = await store.get("payments", "p1")
    assert doc.id == "p1"
    assert doc.data == {"totalAmount": 10}
# Fin del archivo tests/shared/firestore/test_firestore_store.py
