import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DELETE_POLICIES = ('orphan', 'restrict', 'cascade')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _env_flag(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).strip().lower() == 'true'


class Settings:
    """Runtime configuration read from the environment (and .env)"""

    def __init__(self, **overrides):
        # Flask settings
        self.FLASK_ENV = os.getenv('FLASK_ENV', 'development')
        self.DEBUG = self.FLASK_ENV == 'development'
        self.PORT = int(os.getenv('PORT', 5000))

        # CORS settings
        self.CORS_ORIGINS = [
            origin.strip() for origin in os.getenv('CORS_ORIGINS', '*').split(',') if origin.strip()
        ]

        # Firebase settings
        self.FIREBASE_APP_NAME = os.getenv('FIREBASE_APP_NAME', 'career-admin')
        self.GCLOUD_PROJECT = os.getenv('GCLOUD_PROJECT')
        self.FIRESTORE_EMULATOR_HOST = os.getenv('FIRESTORE_EMULATOR_HOST')
        self.FIREBASE_AUTH_EMULATOR_HOST = os.getenv('FIREBASE_AUTH_EMULATOR_HOST')
        self.CHECK_REVOKED_TOKENS = _env_flag('CHECK_REVOKED_TOKENS')

        # Application settings
        self.LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
        self.DELETE_POLICY = os.getenv('DELETE_POLICY', 'orphan').strip().lower()

        for key, value in overrides.items():
            setattr(self, key, value)

    @property
    def use_emulators(self) -> bool:
        return bool(self.FIRESTORE_EMULATOR_HOST or self.FIREBASE_AUTH_EMULATOR_HOST)

    def validate(self):
        """Validate settings"""
        if self.DELETE_POLICY not in DELETE_POLICIES:
            raise ValueError(
                f"DELETE_POLICY must be one of {', '.join(DELETE_POLICIES)}, got '{self.DELETE_POLICY}'"
            )

        if self.LOG_LEVEL not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{self.LOG_LEVEL}'")

        return True
