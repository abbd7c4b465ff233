"""Shared pytest configuration for unit tests.

The app is built with ``create_app(settings, db, verifier)`` so tests inject an
in-memory Firestore double and a token table instead of real Firebase clients.
"""
import copy
import re
import uuid
from datetime import datetime, timezone

import pytest
from firebase_admin import firestore
from google.api_core import exceptions as google_exceptions

from career_admin.app import create_app
from career_admin.config.settings import Settings
from career_admin.errors import Unauthenticated
from career_admin.services.identity_service import IdentityVerifier

ADMIN_TOKEN = "admin-token"
STAFF_TOKEN = "staff-token"
ORPHAN_TOKEN = "orphan-token"

# Firestore rejects document ids of the form __.*__
RESERVED_ID = re.compile(r"^__.*__$")


def _apply_value(current, value):
    """Resolve Firestore transforms the way the server would"""
    if value is firestore.SERVER_TIMESTAMP:
        return datetime.now(timezone.utc)
    if isinstance(value, firestore.ArrayUnion):
        existing = list(current or [])
        return existing + [v for v in value.values if v not in existing]
    if isinstance(value, firestore.ArrayRemove):
        return [v for v in (current or []) if v not in value.values]
    return copy.deepcopy(value)


class FakeSnapshot:
    def __init__(self, reference, data):
        self.reference = reference
        self.id = reference.id
        self._data = copy.deepcopy(data)

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data)


class FakeDocumentRef:
    def __init__(self, db, collection_name, doc_id):
        self._db = db
        self._collection_name = collection_name
        self.id = doc_id

    @property
    def _docs(self):
        return self._db.docs.setdefault(self._collection_name, {})

    def get(self, **kwargs):
        if RESERVED_ID.match(self.id):
            raise google_exceptions.InvalidArgument(f"Document id '{self.id}' is reserved")
        return FakeSnapshot(self, self._docs.get(self.id))

    def set(self, data, merge=False):
        current = self._docs.get(self.id, {}) if merge else {}
        doc = dict(current)
        for key, value in data.items():
            doc[key] = _apply_value(doc.get(key), value)
        self._docs[self.id] = doc

    def update(self, data):
        if self.id not in self._docs:
            raise google_exceptions.NotFound(f"No document to update: {self._collection_name}/{self.id}")
        doc = self._docs[self.id]
        for key, value in data.items():
            doc[key] = _apply_value(doc.get(key), value)

    def delete(self):
        self._docs.pop(self.id, None)


class FakeQuery:
    OPS = {
        '==': lambda a, b: a == b,
        '!=': lambda a, b: a != b,
    }

    def __init__(self, collection, filters=None, limit=None):
        self._collection = collection
        self._filters = filters or []
        self._limit = limit

    def where(self, field_path=None, op_string=None, value=None, *, filter=None):
        if filter is not None:
            field_path, op_string, value = filter.field_path, filter.op_string, filter.value
        return FakeQuery(self._collection, self._filters + [(field_path, op_string, value)], self._limit)

    def limit(self, count):
        return FakeQuery(self._collection, self._filters, count)

    def stream(self, **kwargs):
        results = []
        for snapshot in self._collection.stream():
            data = snapshot.to_dict()
            if all(self.OPS[op](data.get(field), value) for field, op, value in self._filters):
                results.append(snapshot)
        if self._limit is not None:
            results = results[:self._limit]
        return iter(results)

    def get(self, **kwargs):
        return list(self.stream())


class FakeCollection(FakeQuery):
    def __init__(self, db, name):
        super().__init__(self)
        self._db = db
        self.name = name

    def document(self, doc_id=None):
        return FakeDocumentRef(self._db, self.name, doc_id or uuid.uuid4().hex[:20])

    def stream(self, **kwargs):
        docs = self._db.docs.get(self.name, {})
        return iter([FakeSnapshot(self.document(doc_id), data) for doc_id, data in list(docs.items())])


class FakeBatch:
    def __init__(self, db):
        self._db = db
        self._writes = []

    def set(self, ref, data, merge=False):
        self._writes.append(lambda: ref.set(data, merge=merge))

    def update(self, ref, data):
        self._writes.append(lambda: ref.update(data))

    def delete(self, ref):
        self._writes.append(ref.delete)

    def commit(self):
        saved = copy.deepcopy(self._db.docs)
        try:
            for write in self._writes:
                write()
        except Exception:
            # All-or-nothing, like a Firestore commit
            self._db.docs = saved
            raise
        self._db.commits += 1
        return []


class FakeFirestore:
    """Dict-backed stand-in for a Firestore client"""

    def __init__(self):
        self.docs = {}
        self.commits = 0

    def collection(self, name):
        return FakeCollection(self, name)

    def batch(self):
        return FakeBatch(self)

    def seed(self, collection_name, doc_id, data):
        self.docs.setdefault(collection_name, {})[doc_id] = copy.deepcopy(data)

    def data(self, collection_name, doc_id):
        return copy.deepcopy(self.docs.get(collection_name, {}).get(doc_id))

    def ids(self, collection_name):
        return set(self.docs.get(collection_name, {}))


class FakeVerifier(IdentityVerifier):
    """Token table in place of Firebase ID token verification"""

    def __init__(self, tokens):
        super().__init__()
        self.tokens = tokens

    def verify(self, id_token):
        if id_token not in self.tokens:
            raise Unauthenticated("Invalid or expired token")
        return self.tokens[id_token]


def ts(year, month=1, day=1):
    return datetime(year, month, day, tzinfo=timezone.utc)


@pytest.fixture
def fake_db():
    db = FakeFirestore()
    db.seed("users", "admin-uid", {"name": "Ada Admin", "email": "ada@example.com", "role": "admin",
                                   "createdAt": ts(2024)})
    db.seed("users", "staff-uid", {"name": "Sam Student", "email": "sam@example.com", "role": "student",
                                   "createdAt": ts(2024, 6)})
    return db


@pytest.fixture
def verifier():
    return FakeVerifier({
        ADMIN_TOKEN: {"uid": "admin-uid", "email": "ada@example.com"},
        STAFF_TOKEN: {"uid": "staff-uid", "email": "sam@example.com"},
        ORPHAN_TOKEN: {"uid": "ghost-uid", "email": "ghost@example.com"},
    })


@pytest.fixture
def make_app(fake_db, verifier):
    """Factory so tests can vary settings such as DELETE_POLICY"""
    def _make(**overrides):
        overrides.setdefault("DELETE_POLICY", "orphan")
        overrides.setdefault("LOG_LEVEL", "INFO")
        app = create_app(Settings(**overrides), db=fake_db, verifier=verifier)
        app.config["TESTING"] = True
        return app
    return _make


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def staff_headers():
    return {"Authorization": f"Bearer {STAFF_TOKEN}"}


@pytest.fixture
def orphan_headers():
    return {"Authorization": f"Bearer {ORPHAN_TOKEN}"}
