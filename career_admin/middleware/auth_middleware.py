from functools import wraps
from flask import request, g

from career_admin.errors import Forbidden, NotFound
from career_admin.extensions import get_db, get_verifier
from career_admin.models.user_model import UserModel


class AuthMiddleware:
    """Authentication middleware for Firebase ID tokens"""

    @staticmethod
    def verify_token(f):
        """Decorator to verify the bearer token and expose its claims on ``g``"""
        @wraps(f)
        def decorated_function(*args, **kwargs):
            verifier = get_verifier()
            token = verifier.extract_bearer_token(request.headers.get('Authorization', ''))
            g.current_user = verifier.verify(token)
            return f(*args, **kwargs)

        return decorated_function

    @staticmethod
    def get_current_user():
        """Get decoded token claims for the current request"""
        return getattr(g, 'current_user', None)


class RoleMiddleware:
    """Role-based access control middleware"""

    ADMIN_ROLE = 'admin'

    @staticmethod
    def require_admin(f):
        """Decorator requiring the caller's user document to carry role == admin.

        Must be applied beneath ``AuthMiddleware.verify_token``.
        """
        @wraps(f)
        def decorated_function(*args, **kwargs):
            claims = AuthMiddleware.get_current_user()
            if not claims:
                raise Forbidden("Authentication required")

            uid = claims.get('uid')
            user_data = UserModel(get_db()).get_user(uid)
            if user_data is None:
                raise NotFound("Admin user not found")

            if user_data.get('role') != RoleMiddleware.ADMIN_ROLE:
                raise Forbidden("Forbidden: Admins only")

            g.current_user_data = dict(user_data, uid=uid)
            return f(*args, **kwargs)

        return decorated_function


def admin_required(f):
    """Verified token and admin role, in that order"""
    return AuthMiddleware.verify_token(RoleMiddleware.require_admin(f))
