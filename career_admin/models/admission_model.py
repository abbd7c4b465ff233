import logging
from typing import List

from career_admin.models.base_model import FirestoreModel, store_errors
from career_admin.models.collections import COLLECTION_ADMISSIONS

logger = logging.getLogger(__name__)


class AdmissionModel(FirestoreModel):
    collection_name = COLLECTION_ADMISSIONS
    label = 'Admission'

    def publish(self, admission_ids: List[str]) -> int:
        """Mark every listed admission published in one atomic batch.

        A missing id fails the whole commit, so either all listed admissions
        are published or none are.
        """
        batch = self.db.batch()
        for admission_id in admission_ids:
            batch.update(self.collection.document(admission_id), {'published': True})

        with store_errors("publishing admissions", not_found="One or more admissions not found"):
            batch.commit()

        logger.info("Published %d admission(s)", len(admission_ids))
        return len(admission_ids)
