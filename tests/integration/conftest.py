"""Shared pytest configuration for integration tests.

These run against the Firestore emulator (``python start_emulators.py``) and
are skipped when it is not reachable. Identity verification still uses the
token table from the unit suite; the admin gate reads real user documents.
"""
import os
import socket

import pytest
from google.auth.credentials import AnonymousCredentials
from google.cloud import firestore

from career_admin.app import create_app
from career_admin.config.settings import Settings
from tests.unit.conftest import ADMIN_TOKEN, FakeVerifier

PROJECT_ID = "demo-career-admin"


def configure_emulators():
    """Point the Firestore client at the local emulator"""
    os.environ.setdefault("FIRESTORE_EMULATOR_HOST", "localhost:8080")
    os.environ["GCLOUD_PROJECT"] = PROJECT_ID


configure_emulators()


def emulator_running() -> bool:
    host, port = os.environ["FIRESTORE_EMULATOR_HOST"].split(":")
    try:
        with socket.create_connection((host, int(port)), timeout=1):
            return True
    except OSError:
        return False


def pytest_collection_modifyitems(config, items):
    """Skip the integration folder when the emulator is not running"""
    if emulator_running():
        return
    skip_marker = pytest.mark.skip(
        reason=f"Firestore emulator not running on {os.environ['FIRESTORE_EMULATOR_HOST']}. "
               f"Start it with: python start_emulators.py"
    )
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(skip_marker)


def clear_database(db):
    for collection in db.collections():
        for snapshot in collection.stream():
            snapshot.reference.delete()


@pytest.fixture
def db():
    client = firestore.Client(project=PROJECT_ID, credentials=AnonymousCredentials())
    clear_database(client)
    client.collection("users").document("admin-uid").set({"name": "Ada Admin", "role": "admin"})
    yield client
    clear_database(client)


@pytest.fixture
def make_client(db):
    def _make(policy="orphan"):
        verifier = FakeVerifier({ADMIN_TOKEN: {"uid": "admin-uid"}})
        app = create_app(Settings(DELETE_POLICY=policy, LOG_LEVEL="INFO"), db=db, verifier=verifier)
        app.config["TESTING"] = True
        return app.test_client()
    return _make


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}
