#!/usr/bin/env python3
"""Verify Firebase credentials load and Firestore is reachable.

Writes testCollection/connectionTest and reads it back.
"""
import sys
from datetime import datetime, timezone

from career_admin.config.firebase_config import FirebaseConfig
from career_admin.config.settings import Settings


def main():
    try:
        firebase = FirebaseConfig(Settings())
    except ValueError as e:
        print(f"❌ Error loading credentials: {e}")
        return 1

    print(f"✓ Firebase app initialized (project: {firebase.app.project_id})")

    try:
        doc_ref = firebase.db.collection("testCollection").document("connectionTest")
        doc_ref.set({"success": True, "timestamp": datetime.now(timezone.utc)})
        doc = doc_ref.get()
    except Exception as e:
        print(f"❌ Firebase connection failed: {e}")
        return 1

    if doc.exists:
        print("✅ Firebase connection successful!")
        print(f"  Document data: {doc.to_dict()}")
        return 0

    print("⚠️  Firebase connected but document not found.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
