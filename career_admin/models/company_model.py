import logging
from typing import Tuple
from urllib.parse import unquote

from google.api_core import exceptions as google_exceptions
from google.cloud.firestore_v1.base_query import FieldFilter

from career_admin.errors import NotFound
from career_admin.models.base_model import FirestoreModel, store_errors
from career_admin.models.collections import COLLECTION_COMPANIES

logger = logging.getLogger(__name__)

BY_ID = 'ID'
BY_NAME = 'name'


class CompanyModel(FirestoreModel):
    """Company documents; status moves Pending -> Approved <-> Suspended"""

    collection_name = COLLECTION_COMPANIES
    label = 'Company'

    STATUS_CHANGES = {
        'approve': {'approved': True, 'status': 'Approved'},
        'suspend': {'approved': False, 'status': 'Suspended'},
    }

    def find_by_id(self, company_id: str):
        """Snapshot for a literal document id, or None"""
        try:
            ref = self.collection.document(company_id)
        except ValueError:
            # Not a usable document path (e.g. a name containing '/')
            return None
        with store_errors(f"reading companies/{company_id}"):
            try:
                snapshot = ref.get()
            except google_exceptions.InvalidArgument:
                # Server-rejected ids such as "__Acme__" can only be names
                return None
        return snapshot if snapshot.exists else None

    def find_by_name(self, name: str):
        """First company whose name equals name exactly, or None"""
        query = self.collection.where(filter=FieldFilter('name', '==', name)).limit(1)
        with store_errors(f"querying companies by name '{name}'"):
            matches = list(query.stream())
        return matches[0] if matches else None

    def resolve(self, identifier: str) -> Tuple[object, str]:
        """Resolve an id-or-name identifier to (document ref, how it matched).

        The direct id lookup always runs first; the name query only runs on a miss.
        """
        identifier = unquote(identifier)

        snapshot = self.find_by_id(identifier)
        if snapshot is not None:
            return snapshot.reference, BY_ID

        snapshot = self.find_by_name(identifier)
        if snapshot is not None:
            return snapshot.reference, BY_NAME

        raise NotFound("Company not found")

    def change_status(self, identifier: str, action: str) -> str:
        """Apply approve/suspend to the resolved company; returns the match mode"""
        ref, matched_by = self.resolve(identifier)
        with store_errors(f"{action} company {ref.id}", not_found="Company not found"):
            ref.update(self.STATUS_CHANGES[action])
        logger.info("Company %s: %s (matched by %s)", ref.id, action, matched_by)
        return matched_by
