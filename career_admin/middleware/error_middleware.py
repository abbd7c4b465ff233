"""
Error Handling Middleware
Centralized error handling and logging
"""
import logging
import traceback
from flask import request, jsonify
from werkzeug.exceptions import HTTPException

from career_admin.errors import AdminAPIError, StoreError
from career_admin.utils.validators import Helpers

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def configure_logging(level: str = 'INFO'):
    """Configure root logging once for the process"""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


class ErrorHandler:
    """Centralized error handling service"""

    @staticmethod
    def handle_api_error(error: AdminAPIError) -> tuple:
        """Map an AdminAPIError to its JSON envelope and status"""
        if isinstance(error, StoreError):
            # Detail of the underlying store failure was logged where it was raised
            logger.error("Store error on %s %s", request.method, request.path)
        elif error.status_code in (401, 403):
            logger.warning("%s on %s %s: %s", error.code, request.method, request.path, error.message)
        else:
            logger.info("%s on %s %s: %s", error.code, request.method, request.path, error.message)

        return jsonify(Helpers.build_error_response(
            message=error.message,
            code=error.code
        )), error.status_code

    @staticmethod
    def handle_http_error(error: HTTPException) -> tuple:
        """Routing-level errors (unknown endpoint, wrong method, bad JSON)"""
        codes = {
            400: "VALIDATION_ERROR",
            404: "NOT_FOUND",
            405: "METHOD_NOT_ALLOWED",
        }
        logger.info("HTTP %s on %s %s", error.code, request.method, request.path)
        return jsonify(Helpers.build_error_response(
            message=error.description or error.name,
            code=codes.get(error.code, "HTTP_ERROR")
        )), error.code

    @staticmethod
    def handle_generic_error(error: Exception) -> tuple:
        """Handle generic errors"""
        logger.error(f"Unexpected error: {str(error)}")
        logger.error(f"Traceback: {traceback.format_exc()}")

        return jsonify(Helpers.build_error_response(
            message="An unexpected error occurred",
            code="INTERNAL_ERROR"
        )), 500


def register_error_handlers(app):
    """Register error handlers with Flask app"""

    @app.errorhandler(AdminAPIError)
    def handle_admin_api_error(error):
        return ErrorHandler.handle_api_error(error)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return ErrorHandler.handle_http_error(error)

    @app.errorhandler(Exception)
    def handle_unhandled_exception(error):
        return ErrorHandler.handle_generic_error(error)
