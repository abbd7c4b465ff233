import logging
from contextlib import contextmanager
from typing import Dict, Any, List

from firebase_admin import firestore
from google.api_core import exceptions as google_exceptions

from career_admin.errors import NotFound, StoreError
from career_admin.utils.validators import Helpers

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(action: str, not_found: str = None):
    """Translate Firestore client failures into StoreError.

    When ``not_found`` is given, a NOT_FOUND from the store (e.g. a batch
    update on a missing document) becomes a NotFound with that message.
    """
    try:
        yield
    except google_exceptions.NotFound as e:
        if not_found:
            logger.info("Not found while %s: %s", action, e)
            raise NotFound(not_found) from e
        logger.error("Firestore error while %s: %s", action, e)
        raise StoreError() from e
    except google_exceptions.GoogleAPIError as e:
        logger.error("Firestore error while %s: %s", action, e)
        raise StoreError() from e


class FirestoreModel:
    """Generic document CRUD for one Firestore collection"""

    collection_name = None
    label = 'Document'

    def __init__(self, db):
        self.db = db
        self.collection = db.collection(self.collection_name)

    @staticmethod
    def serialize_sorted(snapshots) -> List[Dict[str, Any]]:
        """Newest first by createdAt; documents without one sort last"""
        ordered = sorted(
            snapshots,
            key=lambda snap: Helpers.created_at_seconds(snap.to_dict() or {}),
            reverse=True,
        )
        return [Helpers.serialize_document(snap.id, snap.to_dict()) for snap in ordered]

    def list_all(self) -> List[Dict[str, Any]]:
        with store_errors(f"listing {self.collection_name}"):
            snapshots = list(self.collection.stream())
        return self.serialize_sorted(snapshots)

    def require(self, doc_id: str):
        """Return the snapshot for doc_id or raise NotFound"""
        with store_errors(f"reading {self.collection_name}/{doc_id}"):
            snapshot = self.collection.document(doc_id).get()
        if not snapshot.exists:
            raise NotFound(f"{self.label} not found")
        return snapshot

    def create(self, data: Dict[str, Any]) -> str:
        ref = self.collection.document()
        doc = dict(data)
        doc['createdAt'] = firestore.SERVER_TIMESTAMP
        with store_errors(f"creating {self.collection_name}"):
            ref.set(doc)
        logger.info("Created %s/%s", self.collection_name, ref.id)
        return ref.id

    def update(self, doc_id: str, data: Dict[str, Any]) -> None:
        self.require(doc_id)
        with store_errors(f"updating {self.collection_name}/{doc_id}", not_found=f"{self.label} not found"):
            self.collection.document(doc_id).update(data)
        logger.info("Updated %s/%s fields=%s", self.collection_name, doc_id, sorted(data))

    def delete(self, doc_id: str) -> None:
        self.require(doc_id)
        with store_errors(f"deleting {self.collection_name}/{doc_id}"):
            self.collection.document(doc_id).delete()
        logger.info("Deleted %s/%s", self.collection_name, doc_id)
