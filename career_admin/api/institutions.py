from flask import request, jsonify
from . import admin_bp
from career_admin.extensions import get_db, get_settings
from career_admin.middleware.auth_middleware import admin_required
from career_admin.models.institution_model import InstitutionModel
from career_admin.services.validation_service import ValidationService


def _institutions():
    return InstitutionModel(get_db(), get_settings().DELETE_POLICY)


@admin_bp.get("/institutions")
@admin_required
def list_institutions():
    """All institutions, newest first."""
    institutions = _institutions().list_all()
    return jsonify({"count": len(institutions), "institutions": institutions}), 200


@admin_bp.post("/institutions")
@admin_required
def add_institution():
    """
    Create an institution.

    Body: {"name": "...", "location": "...", "type": "...", "description": "..."}
    name, location and type are required.
    """
    payload = request.get_json(force=True, silent=True)
    data = ValidationService.validate_create("institution", payload)
    institution_id = _institutions().create(data)
    return jsonify({"id": institution_id, "message": "Institution added successfully"}), 201


@admin_bp.put("/institutions/<institution_id>")
@admin_required
def update_institution(institution_id):
    """Partial update limited to name, location, type and description."""
    payload = request.get_json(force=True, silent=True)
    data = ValidationService.validate_update("institution", payload)
    _institutions().update(institution_id, data)
    return jsonify({"message": "Institution updated successfully"}), 200


@admin_bp.delete("/institutions/<institution_id>")
@admin_required
def delete_institution(institution_id):
    _institutions().delete_institution(institution_id)
    return jsonify({"message": "Institution deleted successfully"}), 200
