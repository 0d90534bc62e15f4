from datetime import timedelta
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.main import app
from app.models.user import Admin, User
from app.utils.auth_utils import create_access_token


class FakeCursor:
    """Async iterator standing in for a Motor cursor."""

    def __init__(self, documents, error=None):
        self._documents = list(documents)
        self._error = error

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for document in self._documents:
            yield dict(document)
        if self._error is not None:
            raise self._error


class FakeBookingCollection:
    def __init__(self, documents, fail_ids=(), find_error=None, cancel_before_update=()):
        self.documents = {doc["_id"]: dict(doc) for doc in documents}
        self.fail_ids = set(fail_ids)
        self.find_error = find_error
        self.cancel_before_update = set(cancel_before_update)
        self.updates = []

    @staticmethod
    def _matches(document, query):
        return all(document.get(key) == value for key, value in query.items())

    def find(self, query, projection=None):
        matching = [doc for doc in self.documents.values() if self._matches(doc, query)]
        return FakeCursor(matching, error=self.find_error)

    async def update_one(self, query, update):
        booking_id = query["_id"]
        if booking_id in self.fail_ids:
            raise RuntimeError(f"write failed for {booking_id}")
        if booking_id in self.cancel_before_update:
            self.documents[booking_id]["status"] = "canceled"

        self.updates.append((query, update))
        document = self.documents.get(booking_id)
        if document is None or not self._matches(document, query):
            return SimpleNamespace(modified_count=0)
        document.update(update["$set"])
        return SimpleNamespace(modified_count=1)

    def status_of(self, booking_id):
        return self.documents[booking_id]["status"]


@pytest.fixture
def client():
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def user():
    return User(
        _id=str(ObjectId()),
        userName="ravi",
        email="ravi@example.com",
        fullName="Ravi Kumar",
    )


@pytest.fixture
def admin():
    return Admin(
        _id=str(ObjectId()),
        userName="greenfield",
        email="owner@greenfield.example.com",
        companyName="Greenfield Turfs",
    )


@pytest.fixture
def make_token():
    def _make(principal_id, expires_delta=None):
        return create_access_token({"_id": str(principal_id)}, expires_delta=expires_delta)

    return _make


@pytest.fixture
def expired_token(make_token):
    def _make(principal_id):
        return make_token(principal_id, expires_delta=timedelta(seconds=-30))

    return _make


@pytest.fixture
def fake_bookings():
    return FakeBookingCollection
