"""Accessors for the clients the app factory injects into ``app.extensions``."""
from flask import current_app

from career_admin.errors import StoreError

DB_KEY = 'firestore'
VERIFIER_KEY = 'identity_verifier'
SETTINGS_KEY = 'settings'


def _require(key: str, what: str):
    client = current_app.extensions.get(key)
    if client is None:
        raise StoreError(f"{what} is not configured")
    return client


def get_db():
    return _require(DB_KEY, "Database")


def get_verifier():
    return _require(VERIFIER_KEY, "Token verification")


def get_settings():
    return current_app.extensions[SETTINGS_KEY]
