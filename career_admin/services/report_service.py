from typing import Dict

from career_admin.models.base_model import store_errors
from career_admin.models.collections import (
    COLLECTION_ADMISSIONS,
    COLLECTION_COMPANIES,
    COLLECTION_INSTITUTIONS,
    COLLECTION_USERS,
)


class ReportService:
    """Collection counts for the admin summary view"""

    COUNTED_COLLECTIONS = {
        'totalInstitutions': COLLECTION_INSTITUTIONS,
        'totalCompanies': COLLECTION_COMPANIES,
        'totalUsers': COLLECTION_USERS,
        'totalAdmissions': COLLECTION_ADMISSIONS,
    }

    def __init__(self, db):
        self.db = db

    def count(self, collection_name: str) -> int:
        with store_errors(f"counting {collection_name}"):
            return len(list(self.db.collection(collection_name).stream()))

    def summary(self) -> Dict[str, int]:
        """Fresh full-collection counts; no caching, no status filters"""
        return {key: self.count(name) for key, name in self.COUNTED_COLLECTIONS.items()}
