"""Shared fixtures: an in-memory stand-in for the students collection."""

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import ReturnDocument
from pymongo.errors import ServerSelectionTimeoutError
from pymongo.results import InsertOneResult, DeleteResult

from main import app
from app.deps import get_student_service
from app.services.students import StudentService


def _matches(doc, query):
    return all(doc.get(key) == value for key, value in (query or {}).items())


class FakeCursor:
    def __init__(self, docs):
        self.docs = docs

    async def to_list(self, length):
        return list(self.docs) if length is None else self.docs[:length]


class FakeCollection:
    """Subset of the Motor collection API used by StudentService."""

    def __init__(self):
        self.docs = []

    def find(self, query=None):
        return FakeCursor([dict(d) for d in self.docs if _matches(d, query)])

    async def insert_one(self, doc):
        doc.setdefault("_id", ObjectId())
        self.docs.append(dict(doc))
        return InsertOneResult(doc["_id"], acknowledged=True)

    async def find_one(self, query):
        for doc in self.docs:
            if _matches(doc, query):
                return dict(doc)
        return None

    async def find_one_and_update(self, query, update, return_document=ReturnDocument.BEFORE):
        for doc in self.docs:
            if _matches(doc, query):
                before = dict(doc)
                doc.update(update.get("$set", {}))
                return dict(doc) if return_document == ReturnDocument.AFTER else before
        return None

    async def delete_one(self, query):
        for i, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[i]
                return DeleteResult({"n": 1}, acknowledged=True)
        return DeleteResult({"n": 0}, acknowledged=True)


class UnreachableCollection:
    """Every call fails the way Motor does when no server is reachable."""

    def _fail(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("localhost:27017: [Errno 111] Connection refused")

    def find(self, query=None):
        cursor = FakeCursor([])
        cursor.to_list = self._async_fail
        return cursor

    async def _async_fail(self, *args, **kwargs):
        self._fail()

    insert_one = find_one = find_one_and_update = delete_one = _async_fail


@pytest.fixture
def students_collection():
    return FakeCollection()


@pytest.fixture
def service(students_collection):
    return StudentService(students_collection)


@pytest.fixture
def client(students_collection):
    app.dependency_overrides[get_student_service] = lambda: StudentService(students_collection)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def unreachable_client():
    app.dependency_overrides[get_student_service] = lambda: StudentService(UnreachableCollection())
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
