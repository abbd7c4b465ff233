from flask import jsonify
from . import admin_bp
from career_admin.extensions import get_db
from career_admin.middleware.auth_middleware import admin_required
from career_admin.services.report_service import ReportService


@admin_bp.get("/reports/summary")
@admin_required
def reports_summary():
    """Document counts for institutions, companies, users and admissions."""
    return jsonify(ReportService(get_db()).summary()), 200
