from flask import jsonify
from . import admin_bp
from career_admin.extensions import get_db
from career_admin.middleware.auth_middleware import admin_required
from career_admin.models.company_model import CompanyModel


@admin_bp.get("/companies")
@admin_required
def list_companies():
    companies = CompanyModel(get_db()).list_all()
    return jsonify({"count": len(companies), "companies": companies}), 200


@admin_bp.patch("/companies/<company_id>/approve")
@admin_required
def approve_company(company_id):
    """
    Approve a company. The path segment may be a document id or, failing
    that, an exact company name.
    """
    matched_by = CompanyModel(get_db()).change_status(company_id, "approve")
    return jsonify({"message": f"Company approved successfully (by {matched_by})"}), 200


@admin_bp.patch("/companies/<company_id>/suspend")
@admin_required
def suspend_company(company_id):
    """Suspend a company, resolved by id or name like approve."""
    matched_by = CompanyModel(get_db()).change_status(company_id, "suspend")
    return jsonify({"message": f"Company suspended successfully (by {matched_by})"}), 200


@admin_bp.delete("/companies/<company_id>")
@admin_required
def delete_company(company_id):
    CompanyModel(get_db()).delete(company_id)
    return jsonify({"message": "Company deleted successfully"}), 200
