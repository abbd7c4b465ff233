import logging

from flask import Flask, jsonify
from flask_cors import CORS

from career_admin.api import admin_bp
from career_admin.config.settings import Settings
from career_admin.extensions import DB_KEY, VERIFIER_KEY, SETTINGS_KEY
from career_admin.middleware.error_middleware import configure_logging, register_error_handlers
from career_admin.services.identity_service import IdentityVerifier

logger = logging.getLogger(__name__)


def init_firebase(settings):
    """Build the Firestore client and token verifier from configured credentials.

    Returns (db, verifier), or (None, None) when Firebase cannot be initialized
    so the app can still start and report itself as not configured.
    """
    from career_admin.config.firebase_config import FirebaseConfig

    try:
        firebase = FirebaseConfig(settings)
    except ValueError as e:
        logger.warning("Firebase not configured: %s", e)
        return None, None

    verifier = IdentityVerifier(app=firebase.app, check_revoked=settings.CHECK_REVOKED_TOKENS)
    return firebase.db, verifier


def create_app(settings=None, db=None, verifier=None):
    """Create and configure the Flask application.

    Args:
        settings: Settings instance; read from the environment when omitted.
        db: Firestore client (or a compatible test double).
        verifier: object with ``extract_bearer_token`` and ``verify``.
            When both db and verifier are omitted they are built from the
            configured Firebase credentials.
    """
    settings = settings or Settings()
    settings.validate()
    configure_logging(settings.LOG_LEVEL)

    if db is None and verifier is None:
        db, verifier = init_firebase(settings)

    app = Flask(__name__)
    app.config['DEBUG'] = settings.DEBUG
    app.extensions[SETTINGS_KEY] = settings
    app.extensions[DB_KEY] = db
    app.extensions[VERIFIER_KEY] = verifier

    # Only the bare string "*" makes flask-cors send a wildcard header
    origins = "*" if settings.CORS_ORIGINS == ["*"] else settings.CORS_ORIGINS
    CORS(app,
         resources={r"/*": {"origins": origins}},
         allow_headers=["Content-Type", "Authorization"],
         methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])

    firebase_ready = db is not None and verifier is not None

    @app.get("/")
    def health():
        return jsonify({
            "status": "ok",
            "service": "career-admin-api",
            "firebase": "connected" if firebase_ready else "not configured"
        }), 200

    register_error_handlers(app)
    app.register_blueprint(admin_bp)

    if firebase_ready:
        logger.info("Admin API ready (delete policy: %s)", settings.DELETE_POLICY)
    else:
        logger.warning("Admin API started without Firebase; admin routes will fail")

    return app


def main():
    """Main entry point for running the application."""
    settings = Settings()
    app = create_app(settings)
    app.run(host="0.0.0.0", port=settings.PORT, debug=settings.DEBUG)


if __name__ == "__main__":  # pragma: no cover
    main()
