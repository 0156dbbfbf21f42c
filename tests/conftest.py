import copy
import os
from types import SimpleNamespace

import httpx
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

os.environ.setdefault('ACCESS_KEY', 'test-secret')

from creativesnap import create_app  # noqa: E402
from creativesnap.core.security import create_access_token  # noqa: E402
from creativesnap.services.gateway import PaymentGateway  # noqa: E402


def _matches(document: dict, query: dict) -> bool:
    for key, expected in query.items():
        value = document.get(key)
        if isinstance(expected, dict) and any(op.startswith('$') for op in expected):
            for op, operand in expected.items():
                if op == '$gt' and not (value is not None and value > operand):
                    return False
        elif value != expected:
            return False
    return True


def _apply(document: dict, update: dict, inserting: bool = False) -> None:
    for key, value in update.get('$set', {}).items():
        document[key] = value
    if inserting:
        for key, value in update.get('$setOnInsert', {}).items():
            document[key] = value
    for key, amount in update.get('$inc', {}).items():
        document[key] = document.get(key, 0) + amount


class FakeCursor:
    def __init__(self, documents):
        self._documents = documents

    def sort(self, key, direction=1):
        self._documents.sort(
            key=lambda d: (d.get(key) is not None, d.get(key)),
            reverse=direction < 0,
        )
        return self

    async def to_list(self, length):
        return self._documents if length is None else self._documents[:length]


class FakeCollection:
    """In-memory stand-in for the motor collection calls the API makes"""

    def __init__(self):
        self.documents = []
        self.writes = 0

    def find(self, query=None):
        return FakeCursor([copy.deepcopy(d) for d in self.documents if _matches(d, query or {})])

    async def find_one(self, query, session=None):
        for document in self.documents:
            if _matches(document, query):
                return copy.deepcopy(document)
        return None

    async def insert_one(self, document, session=None):
        self.writes += 1
        document.setdefault('_id', ObjectId())
        self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(acknowledged=True, inserted_id=document['_id'])

    async def update_one(self, query, update, upsert=False, session=None):
        self.writes += 1
        for document in self.documents:
            if _matches(document, query):
                before = copy.deepcopy(document)
                _apply(document, update)
                return SimpleNamespace(
                    acknowledged=True, matched_count=1,
                    modified_count=int(before != document), upserted_id=None,
                )
        if not upsert:
            return SimpleNamespace(acknowledged=True, matched_count=0, modified_count=0, upserted_id=None)
        document = {k: v for k, v in query.items() if not isinstance(v, dict)}
        document['_id'] = ObjectId()
        _apply(document, update, inserting=True)
        self.documents.append(document)
        return SimpleNamespace(acknowledged=True, matched_count=0, modified_count=0, upserted_id=document['_id'])

    async def find_one_and_update(self, query, update, return_document=None, session=None):
        self.writes += 1
        for document in self.documents:
            if _matches(document, query):
                _apply(document, update)
                return copy.deepcopy(document)
        return None

    async def delete_one(self, query, session=None):
        self.writes += 1
        for index, document in enumerate(self.documents):
            if _matches(document, query):
                del self.documents[index]
                return SimpleNamespace(acknowledged=True, deleted_count=1)
        return SimpleNamespace(acknowledged=True, deleted_count=0)


class FakeStore:
    """Store with in-memory collections; a failed transaction restores the snapshot"""

    def __init__(self):
        self.users = FakeCollection()
        self.classes = FakeCollection()
        self.cards = FakeCollection()
        self.payments = FakeCollection()
        self.indexes_ensured = 0
        self.reachable = True

    @property
    def collections(self):
        return [self.users, self.classes, self.cards, self.payments]

    @property
    def writes(self):
        return sum(c.writes for c in self.collections)

    async def run_transaction(self, callback):
        snapshot = [copy.deepcopy(c.documents) for c in self.collections]
        try:
            return await callback(None)
        except Exception:
            for collection, documents in zip(self.collections, snapshot):
                collection.documents = documents
            raise

    async def ensure_indexes(self):
        self.indexes_ensured += 1

    async def ping(self):
        return self.reachable

    def close(self):
        pass


class StripeStub:
    """Records payment intent requests and answers like Stripe"""

    def __init__(self):
        self.requests = []
        self.status_code = 200

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={'error': {'message': 'card_declined'}})
        return httpx.Response(200, json={'id': 'pi_123', 'client_secret': 'pi_123_secret_456'})


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def stripe():
    return StripeStub()


@pytest.fixture
def client(store, stripe):
    gateway = PaymentGateway('sk_test', transport=httpx.MockTransport(stripe))
    with TestClient(create_app(store=store, gateway=gateway)) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    def _headers(email='student@example.com'):
        return {'Authorization': f"Bearer {create_access_token({'email': email})}"}
    return _headers
