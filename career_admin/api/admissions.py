from flask import request, jsonify
from . import admin_bp
from career_admin.extensions import get_db
from career_admin.middleware.auth_middleware import admin_required
from career_admin.models.admission_model import AdmissionModel
from career_admin.services.validation_service import ValidationService


@admin_bp.get("/admissions")
@admin_required
def list_admissions():
    admissions = AdmissionModel(get_db()).list_all()
    return jsonify({"count": len(admissions), "admissions": admissions}), 200


@admin_bp.post("/admissions/publish")
@admin_required
def publish_admissions():
    """
    Publish a batch of admissions atomically.

    Body: {"admissionIds": ["id1", "id2", ...]}
    """
    payload = request.get_json(force=True, silent=True)
    admission_ids = ValidationService.validate_admission_ids(payload)
    published = AdmissionModel(get_db()).publish(admission_ids)
    return jsonify({"message": "Admissions published successfully", "published": published}), 200
