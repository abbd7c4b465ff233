"""
Course documents and the faculty course-summary they are mirrored into.

Every course write touches two documents: ``courses/<id>`` and the parent
``faculties/<facultyId>.courses`` array of ``{id, name}`` entries. Both writes
go into one Firestore write batch so they commit or fail together.
"""
import logging

from firebase_admin import firestore

from career_admin.errors import NotFound
from career_admin.models.base_model import FirestoreModel, store_errors
from career_admin.models.collections import COLLECTION_COURSES
from career_admin.models.faculty_model import FacultyModel

logger = logging.getLogger(__name__)


class CourseModel(FirestoreModel):
    collection_name = COLLECTION_COURSES
    label = 'Course'

    def __init__(self, db):
        super().__init__(db)
        self.faculties = FacultyModel(db)

    def add_to_faculty(self, faculty_id: str, name: str) -> str:
        """Create a course and append its summary to the faculty; returns the course id"""
        faculty_ref = self.faculties.require(faculty_id).reference

        course_ref = self.collection.document()
        batch = self.db.batch()
        batch.set(course_ref, {
            'name': name,
            'facultyId': faculty_id,
            'createdAt': firestore.SERVER_TIMESTAMP,
        })
        batch.update(faculty_ref, {
            'courses': firestore.ArrayUnion([{'id': course_ref.id, 'name': name}]),
        })
        # The faculty may vanish between the check and the commit; the batch then fails whole
        with store_errors(f"adding course to faculty {faculty_id}", not_found="Faculty not found"):
            batch.commit()

        logger.info("Added course %s to faculty %s", course_ref.id, faculty_id)
        return course_ref.id

    def delete_from_faculty(self, faculty_id: str, course_id: str) -> None:
        """Delete a course and remove its summary from the faculty"""
        faculty_ref = self.faculties.require(faculty_id).reference
        course_snapshot = self.require(course_id)

        course_data = course_snapshot.to_dict() or {}
        owner = course_data.get('facultyId')
        if owner and owner != faculty_id:
            raise NotFound("Course not found in this faculty")

        batch = self.db.batch()
        batch.delete(course_snapshot.reference)
        batch.update(faculty_ref, {
            'courses': firestore.ArrayRemove([{'id': course_id, 'name': course_data.get('name')}]),
        })
        with store_errors(f"deleting course {course_id} from faculty {faculty_id}",
                          not_found="Faculty not found"):
            batch.commit()

        logger.info("Deleted course %s from faculty %s", course_id, faculty_id)
