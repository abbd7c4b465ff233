from flask import jsonify
from . import admin_bp
from career_admin.extensions import get_db
from career_admin.middleware.auth_middleware import admin_required
from career_admin.models.user_model import UserModel


@admin_bp.get("/users")
@admin_required
def list_users():
    users = UserModel(get_db()).list_all()
    return jsonify({"count": len(users), "users": users}), 200


@admin_bp.delete("/users/<user_id>")
@admin_required
def delete_user(user_id):
    """Remove a user profile document. The Firebase Auth account is left untouched."""
    UserModel(get_db()).delete(user_id)
    return jsonify({"message": "User deleted successfully"}), 200
