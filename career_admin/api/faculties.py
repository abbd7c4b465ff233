from flask import request, jsonify
from . import admin_bp
from career_admin.extensions import get_db, get_settings
from career_admin.middleware.auth_middleware import admin_required
from career_admin.models.course_model import CourseModel
from career_admin.models.faculty_model import FacultyModel
from career_admin.services.validation_service import ValidationService


# ========== FACULTIES ==========

@admin_bp.get("/institutions/<institution_id>/faculties")
@admin_required
def list_faculties(institution_id):
    """Faculties belonging to an institution, newest first."""
    faculties = FacultyModel(get_db()).list_by_institution(institution_id)
    return jsonify({"count": len(faculties), "faculties": faculties}), 200


@admin_bp.post("/institutions/<institution_id>/faculties")
@admin_required
def add_faculty(institution_id):
    """
    Create a faculty under an institution.

    Body: {"name": "..."}
    """
    payload = request.get_json(force=True, silent=True)
    data = ValidationService.validate_create("faculty", payload)
    faculty_id = FacultyModel(get_db()).create_faculty(institution_id, data)
    return jsonify({"id": faculty_id, "message": "Faculty added successfully"}), 201


@admin_bp.delete("/faculties/<faculty_id>")
@admin_required
def delete_faculty(faculty_id):
    FacultyModel(get_db(), get_settings().DELETE_POLICY).delete_faculty(faculty_id)
    return jsonify({"message": "Faculty deleted successfully"}), 200


# ========== COURSES ==========

@admin_bp.post("/faculties/<faculty_id>/courses")
@admin_required
def add_course(faculty_id):
    """
    Create a course and add it to the faculty's embedded course list.

    Body: {"name": "..."}
    """
    payload = request.get_json(force=True, silent=True)
    data = ValidationService.validate_create("course", payload)
    course_id = CourseModel(get_db()).add_to_faculty(faculty_id, data["name"])
    return jsonify({"id": course_id, "message": "Course added successfully"}), 201


@admin_bp.delete("/faculties/<faculty_id>/courses/<course_id>")
@admin_required
def delete_course(faculty_id, course_id):
    CourseModel(get_db()).delete_from_faculty(faculty_id, course_id)
    return jsonify({"message": "Course deleted successfully"}), 200
