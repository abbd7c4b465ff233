"""
Centralized Input Validation Service
Per-entity create and update schemas for admin payloads
"""
from typing import Dict, Any

from career_admin.errors import ValidationError
from career_admin.utils.validators import Validators, Helpers


class ValidationService:
    """Centralized validation service for all admin inputs"""

    # Firestore rejects batches with more writes than this
    MAX_BATCH_SIZE = 500

    REQUIRED_ON_CREATE = {
        'institution': ['name', 'location', 'type'],
        'faculty': ['name'],
        'course': ['name'],
    }

    OPTIONAL_ON_CREATE = {
        'institution': ['description'],
        'faculty': [],
        'course': [],
    }

    UPDATABLE_FIELDS = {
        'institution': ['name', 'location', 'type', 'description'],
    }

    @staticmethod
    def _require_object(payload: Any) -> Dict[str, Any]:
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object")
        return payload

    @staticmethod
    def _clean(value: Any) -> Any:
        if isinstance(value, str):
            return Helpers.sanitize_string(value)
        return value

    @staticmethod
    def validate_create(entity: str, payload: Any) -> Dict[str, Any]:
        """Return the cleaned create fields or raise ValidationError"""
        payload = ValidationService._require_object(payload)
        required = ValidationService.REQUIRED_ON_CREATE[entity]

        missing = Validators.missing_fields(payload, required)
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        data = {field: ValidationService._clean(payload[field]) for field in required}
        for field in ValidationService.OPTIONAL_ON_CREATE[entity]:
            data[field] = ValidationService._clean(payload.get(field) or "")
        return data

    @staticmethod
    def validate_update(entity: str, payload: Any) -> Dict[str, Any]:
        """Return the cleaned partial update or raise ValidationError"""
        payload = ValidationService._require_object(payload)
        if not payload:
            raise ValidationError("No fields provided for update")

        allowed = ValidationService.UPDATABLE_FIELDS[entity]
        unknown = Validators.unknown_fields(payload, allowed)
        if unknown:
            raise ValidationError(f"Fields cannot be updated: {', '.join(unknown)}")

        required = ValidationService.REQUIRED_ON_CREATE.get(entity, [])
        blank = [field for field in payload if field in required and Validators.is_blank(payload[field])]
        if blank:
            raise ValidationError(f"Fields cannot be empty: {', '.join(blank)}")

        return {field: ValidationService._clean(value) for field, value in payload.items()}

    @staticmethod
    def validate_admission_ids(payload: Any) -> list:
        """Return de-duplicated admission ids, preserving order"""
        payload = ValidationService._require_object(payload)
        ids = payload.get('admissionIds')
        if not ids:
            raise ValidationError("No admission IDs provided")
        if not Validators.validate_id_list(ids):
            raise ValidationError("admissionIds must be a list of non-empty document ids")

        unique_ids = list(dict.fromkeys(i.strip() for i in ids))
        if len(unique_ids) > ValidationService.MAX_BATCH_SIZE:
            raise ValidationError(
                f"Cannot publish more than {ValidationService.MAX_BATCH_SIZE} admissions at once"
            )
        return unique_ids
