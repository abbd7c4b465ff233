"""Firestore collection names.

Every model and query refers to collections through these constants.
"""

COLLECTION_INSTITUTIONS = "institutions"
COLLECTION_FACULTIES = "faculties"
COLLECTION_COURSES = "courses"
COLLECTION_COMPANIES = "companies"
COLLECTION_USERS = "users"
COLLECTION_ADMISSIONS = "admissions"
