"""Firebase credential utilities for loading credentials from various sources."""
import os
import json
from typing import Dict, Any


def _load_json_file(path: str) -> Dict[str, Any]:
    with open(path, 'r') as f:
        return json.load(f)


def get_firebase_credentials() -> Dict[str, Any]:
    """
    Load Firebase service account credentials from environment variables or file.

    Sources, in order:
    1. FIREBASE_SERVICE_ACCOUNT_KEY - service account JSON as a string
    2. FIREBASE_CREDENTIALS_JSON - JSON string or path to JSON file
    3. FIREBASE_CREDENTIALS_PATH - path to service account JSON file
    4. GOOGLE_APPLICATION_CREDENTIALS - path to service account JSON file
    5. ./serviceAccountKey.json in the working directory
    6. Individual environment variables (FIREBASE_PROJECT_ID, etc.)

    Returns:
        Dict containing Firebase service account credentials

    Raises:
        ValueError: If no valid credentials are found
    """
    service_account_key = os.getenv('FIREBASE_SERVICE_ACCOUNT_KEY')
    if service_account_key:
        try:
            return json.loads(service_account_key)
        except json.JSONDecodeError as e:
            raise ValueError(f"FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON: {e}") from e

    creds_json = os.getenv('FIREBASE_CREDENTIALS_JSON')
    if creds_json:
        try:
            return json.loads(creds_json)
        except json.JSONDecodeError:
            if os.path.exists(creds_json):
                return _load_json_file(creds_json)

    creds_path = os.getenv('FIREBASE_CREDENTIALS_PATH')
    if creds_path and os.path.exists(creds_path):
        return _load_json_file(creds_path)

    google_creds_path = os.getenv('GOOGLE_APPLICATION_CREDENTIALS')
    if google_creds_path and os.path.exists(google_creds_path):
        return _load_json_file(google_creds_path)

    if os.path.exists('serviceAccountKey.json'):
        return _load_json_file('serviceAccountKey.json')

    if os.getenv('FIREBASE_PROJECT_ID'):
        return {
            "type": "service_account",
            "project_id": os.getenv('FIREBASE_PROJECT_ID'),
            "private_key_id": os.getenv('FIREBASE_PRIVATE_KEY_ID'),
            "private_key": os.getenv('FIREBASE_PRIVATE_KEY', '').replace('\\n', '\n'),
            "client_email": os.getenv('FIREBASE_CLIENT_EMAIL'),
            "client_id": os.getenv('FIREBASE_CLIENT_ID'),
            "auth_uri": "https://accounts.google.com/o/oauth2/auth",
            "token_uri": "https://oauth2.googleapis.com/token",
            "auth_provider_x509_cert_url": "https://www.googleapis.com/oauth2/v1/certs",
            "client_x509_cert_url": os.getenv('FIREBASE_CLIENT_CERT_URL'),
            "universe_domain": "googleapis.com"
        }

    raise ValueError(
        "Firebase credentials not found. Please set one of:\n"
        "1. FIREBASE_SERVICE_ACCOUNT_KEY (service account JSON string)\n"
        "2. FIREBASE_CREDENTIALS_JSON (JSON string or path to JSON file)\n"
        "3. FIREBASE_CREDENTIALS_PATH (path to service account JSON file)\n"
        "4. GOOGLE_APPLICATION_CREDENTIALS (path to service account JSON file)\n"
        "5. Individual env vars (FIREBASE_PROJECT_ID, FIREBASE_PRIVATE_KEY, etc.)"
    )
