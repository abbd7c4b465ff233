import logging

from career_admin.errors import Conflict
from career_admin.models.base_model import FirestoreModel
from career_admin.models.collections import COLLECTION_INSTITUTIONS
from career_admin.models.faculty_model import FacultyModel, commit_deletes

logger = logging.getLogger(__name__)


class InstitutionModel(FirestoreModel):
    collection_name = COLLECTION_INSTITUTIONS
    label = 'Institution'

    def __init__(self, db, delete_policy: str = 'orphan'):
        super().__init__(db)
        self.delete_policy = delete_policy

    def delete_institution(self, institution_id: str) -> None:
        """Delete an institution, handling its faculties per the delete policy"""
        if self.delete_policy == 'orphan':
            # Faculties and courses referencing this institution are left in place
            self.delete(institution_id)
            return

        institution_ref = self.require(institution_id).reference

        faculties = FacultyModel(self.db, self.delete_policy)
        faculty_refs = faculties.faculty_refs(institution_id)

        if self.delete_policy == 'restrict':
            if faculty_refs:
                raise Conflict(f"Institution has {len(faculty_refs)} faculty(ies); delete them first")
            self.delete(institution_id)
            return

        course_refs = []
        for faculty_ref in faculty_refs:
            course_refs.extend(faculties.course_refs(faculty_ref.id))

        commit_deletes(self.db, course_refs + faculty_refs + [institution_ref],
                       f"cascading delete of institution {institution_id}")
        logger.info("Deleted institution %s with %d faculty(ies) and %d course(s)",
                    institution_id, len(faculty_refs), len(course_refs))
