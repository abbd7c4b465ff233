import logging
from typing import Dict, Any, List

from google.cloud.firestore_v1.base_query import FieldFilter

from career_admin.errors import Conflict
from career_admin.models.base_model import FirestoreModel, store_errors
from career_admin.models.collections import COLLECTION_COURSES, COLLECTION_FACULTIES
from career_admin.services.validation_service import ValidationService

logger = logging.getLogger(__name__)


class FacultyModel(FirestoreModel):
    """Faculty documents; each embeds a {id, name} summary of its courses"""

    collection_name = COLLECTION_FACULTIES
    label = 'Faculty'

    def __init__(self, db, delete_policy: str = 'orphan'):
        super().__init__(db)
        self.delete_policy = delete_policy

    def list_by_institution(self, institution_id: str) -> List[Dict[str, Any]]:
        query = self.collection.where(filter=FieldFilter('institutionId', '==', institution_id))
        with store_errors(f"listing faculties of institution {institution_id}"):
            snapshots = list(query.stream())
        return self.serialize_sorted(snapshots)

    def create_faculty(self, institution_id: str, data: Dict[str, Any]) -> str:
        return self.create({
            'name': data['name'],
            'institutionId': institution_id,
            'courses': [],
        })

    def faculty_refs(self, institution_id: str) -> list:
        query = self.collection.where(filter=FieldFilter('institutionId', '==', institution_id))
        with store_errors(f"listing faculties of institution {institution_id}"):
            return [snap.reference for snap in query.stream()]

    def course_refs(self, faculty_id: str) -> list:
        query = self.db.collection(COLLECTION_COURSES).where(filter=FieldFilter('facultyId', '==', faculty_id))
        with store_errors(f"listing courses of faculty {faculty_id}"):
            return [snap.reference for snap in query.stream()]

    def delete_faculty(self, faculty_id: str) -> None:
        if self.delete_policy == 'orphan':
            self.delete(faculty_id)
            return

        faculty_ref = self.require(faculty_id).reference

        course_refs = self.course_refs(faculty_id)
        if self.delete_policy == 'restrict':
            if course_refs:
                raise Conflict(f"Faculty has {len(course_refs)} course(s); delete them first")
            self.delete(faculty_id)
            return

        commit_deletes(self.db, course_refs + [faculty_ref], f"cascading delete of faculty {faculty_id}")
        logger.info("Deleted faculty %s with %d course(s)", faculty_id, len(course_refs))


def commit_deletes(db, refs: list, action: str) -> None:
    """Delete all refs in a single atomic write batch"""
    if len(refs) > ValidationService.MAX_BATCH_SIZE:
        raise Conflict("Too many dependent records to delete atomically")

    batch = db.batch()
    for ref in refs:
        batch.delete(ref)
    with store_errors(action):
        batch.commit()
