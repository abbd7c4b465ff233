import logging

import firebase_admin
from firebase_admin import credentials, firestore

from career_admin.firebase_utils import get_firebase_credentials

logger = logging.getLogger(__name__)


class FirebaseConfig:
    """Owns the firebase-admin App and the Firestore client built from it.

    Constructed explicitly by the app factory and handed to request handlers
    through ``app.extensions``; nothing here is a module-level singleton.
    """

    def __init__(self, settings):
        self.settings = settings
        self.app = self._initialize_app()
        self.db = firestore.client(app=self.app)

    def _initialize_app(self):
        name = self.settings.FIREBASE_APP_NAME
        try:
            return firebase_admin.get_app(name)
        except ValueError:
            pass

        if self.settings.use_emulators:
            project_id = self.settings.GCLOUD_PROJECT or 'demo-no-project'
            logger.info("Firebase emulator mode (firestore=%s, auth=%s, project=%s)",
                        self.settings.FIRESTORE_EMULATOR_HOST,
                        self.settings.FIREBASE_AUTH_EMULATOR_HOST,
                        project_id)
            return firebase_admin.initialize_app(options={'projectId': project_id}, name=name)

        cred = credentials.Certificate(get_firebase_credentials())
        app = firebase_admin.initialize_app(cred, name=name)
        logger.info("Firebase initialized for project: %s", app.project_id)
        return app
