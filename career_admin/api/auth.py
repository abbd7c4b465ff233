"""
Admin login endpoint.
Sign-in itself happens client-side with the Firebase SDK; the client then
sends the resulting ID token as a bearer token on every other admin route.
"""
from flask import jsonify
from . import admin_bp


@admin_bp.post("/login")
def login():
    """Acknowledge an admin login. No token is required or issued here."""
    return jsonify({"message": "Admin login successful"}), 200
