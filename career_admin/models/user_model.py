from typing import Dict, Any, Optional

from career_admin.models.base_model import FirestoreModel, store_errors
from career_admin.models.collections import COLLECTION_USERS


class UserModel(FirestoreModel):
    """User profiles. Created by the platform's signup flow, never by this API."""

    collection_name = COLLECTION_USERS
    label = 'User'

    def get_user(self, uid: str) -> Optional[Dict[str, Any]]:
        """Raw user document keyed by Firebase UID, or None"""
        with store_errors(f"reading users/{uid}"):
            snapshot = self.collection.document(uid).get()
        if not snapshot.exists:
            return None
        return snapshot.to_dict() or {}
