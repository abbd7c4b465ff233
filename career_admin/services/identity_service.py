import logging
from typing import Dict, Any

from firebase_admin import auth as firebase_auth

from career_admin.errors import Unauthenticated

logger = logging.getLogger(__name__)


class IdentityVerifier:
    """Verifies Firebase ID tokens against the auth provider"""

    def __init__(self, app=None, check_revoked: bool = False):
        self.app = app
        self.check_revoked = check_revoked

    @staticmethod
    def extract_bearer_token(auth_header: str) -> str:
        """Pull the token out of an ``Authorization: Bearer <token>`` header"""
        if not auth_header:
            raise Unauthenticated("Token is missing")

        parts = auth_header.split()
        if len(parts) != 2 or parts[0].lower() != 'bearer':
            raise Unauthenticated("Invalid token format")
        return parts[1]

    def verify(self, id_token: str) -> Dict[str, Any]:
        """Verify the token and return its decoded claims"""
        if not id_token:
            raise Unauthenticated("Token is missing")

        try:
            return firebase_auth.verify_id_token(id_token, app=self.app, check_revoked=self.check_revoked)
        except firebase_auth.ExpiredIdTokenError as e:
            logger.info("Expired ID token: %s", e)
            raise Unauthenticated("Token has expired") from e
        except firebase_auth.RevokedIdTokenError as e:
            logger.info("Revoked ID token: %s", e)
            raise Unauthenticated("Token has been revoked") from e
        except (firebase_auth.InvalidIdTokenError, firebase_auth.UserDisabledError, ValueError) as e:
            logger.info("Invalid ID token: %s", e)
            raise Unauthenticated("Invalid or expired token") from e
        except firebase_auth.CertificateFetchError as e:
            logger.error("Could not fetch token signing certificates: %s", e)
            raise Unauthenticated("Token verification unavailable") from e
