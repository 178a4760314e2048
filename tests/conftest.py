"""
Shared fixtures: an in-memory stand-in for the Firestore ``AsyncClient``
covering the calls the ODM makes (document get/set/delete, collection
stream, equality ``where(filter=...)``).
"""

import copy
from typing import Any, Dict, List, Optional

import pytest
import pytest_asyncio

from firestore_blog_graphql import DOCUMENT_MODELS, FirestoreDB, init_firestore_odm


class FakeSnapshot:
    def __init__(self, doc_id: str, data: Optional[Dict[str, Any]]):
        self.id = doc_id
        self._data = data

    @property
    def exists(self) -> bool:
        return self._data is not None

    def to_dict(self) -> Optional[Dict[str, Any]]:
        return copy.deepcopy(self._data)


class FakeDocumentReference:
    def __init__(self, client: "FakeFirestoreClient", collection: str, doc_id: str):
        self._client = client
        self._collection = collection
        self.id = doc_id

    async def get(self) -> FakeSnapshot:
        self._client.calls.append(("get", self._collection, self.id))
        return FakeSnapshot(self.id, self._client.data[self._collection].get(self.id))

    async def set(self, data: Dict[str, Any]) -> None:
        self._client.calls.append(("set", self._collection, self.id))
        self._client.data[self._collection][self.id] = copy.deepcopy(data)

    async def delete(self) -> None:
        self._client.calls.append(("delete", self._collection, self.id))
        self._client.data[self._collection].pop(self.id, None)


class FakeQuery:
    def __init__(self, client: "FakeFirestoreClient", collection: str, filters: List[Any]):
        self._client = client
        self._collection = collection
        self._filters = filters

    def where(self, *, filter) -> "FakeQuery":
        return FakeQuery(self._client, self._collection, self._filters + [filter])

    def _matches(self, data: Dict[str, Any]) -> bool:
        for field_filter in self._filters:
            assert field_filter.op_string == "=="
            if data.get(field_filter.field_path) != field_filter.value:
                return False
        return True

    async def stream(self):
        self._client.calls.append(("stream", self._collection, len(self._filters)))
        for doc_id, data in list(self._client.data[self._collection].items()):
            if self._matches(data):
                yield FakeSnapshot(doc_id, data)


class FakeCollectionReference(FakeQuery):
    def __init__(self, client: "FakeFirestoreClient", collection: str):
        super().__init__(client, collection, [])

    def document(self, doc_id: str) -> FakeDocumentReference:
        return FakeDocumentReference(self._client, self._collection, doc_id)


class FakeFirestoreClient:
    def __init__(self):
        self.data: Dict[str, Dict[str, Dict[str, Any]]] = {
            "users": {},
            "posts": {},
            "comments": {},
        }
        self.calls: List[tuple] = []
        self.closed = False

    def collection(self, name: str) -> FakeCollectionReference:
        self.data.setdefault(name, {})
        return FakeCollectionReference(self, name)

    def close(self) -> None:
        self.closed = True


def make_firestore_db(client) -> FirestoreDB:
    """FirestoreDB around ``client`` without creating a real AsyncClient."""
    db = FirestoreDB.__new__(FirestoreDB)
    db.project_id = "test-project"
    db.database = None
    db.credentials = None
    db._emulator_host = None
    db.client = client
    return db


@pytest.fixture
def fake_client():
    return FakeFirestoreClient()


@pytest.fixture
def firestore_db(fake_client):
    return make_firestore_db(fake_client)


@pytest_asyncio.fixture
async def initialized_models(firestore_db):
    """Register the document models against the in-memory client."""
    init_firestore_odm(firestore_db, DOCUMENT_MODELS)
    return {cls.__name__: cls for cls in DOCUMENT_MODELS}
