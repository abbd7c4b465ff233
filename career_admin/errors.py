"""
Error taxonomy for the admin API.
Every error carries the HTTP status and machine-readable code it maps to.
"""


class AdminAPIError(Exception):
    """Base class for errors surfaced to API clients"""

    status_code = 500
    code = "INTERNAL_ERROR"
    default_message = "An unexpected error occurred"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(AdminAPIError):
    status_code = 401
    code = "AUTHENTICATION_ERROR"
    default_message = "Authentication failed"


class Forbidden(AdminAPIError):
    status_code = 403
    code = "AUTHORIZATION_ERROR"
    default_message = "Insufficient permissions"


class ValidationError(AdminAPIError):
    status_code = 400
    code = "VALIDATION_ERROR"
    default_message = "Validation failed"


class NotFound(AdminAPIError):
    status_code = 404
    code = "NOT_FOUND"
    default_message = "Resource not found"


class Conflict(AdminAPIError):
    status_code = 409
    code = "CONFLICT"
    default_message = "Resource has dependent records"


class StoreError(AdminAPIError):
    """Unexpected failure from Firestore; detail is logged, never returned"""

    status_code = 500
    code = "DATABASE_ERROR"
    default_message = "Database operation failed"
