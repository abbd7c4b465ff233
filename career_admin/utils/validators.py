from datetime import datetime, timezone
from typing import Dict, Any, List, Optional


class Validators:
    """Input validation utilities"""

    @staticmethod
    def is_blank(value: Any) -> bool:
        """True for None, empty strings and whitespace-only strings"""
        if value is None:
            return True
        if isinstance(value, str):
            return not value.strip()
        return False

    @staticmethod
    def missing_fields(payload: Dict[str, Any], required: List[str]) -> List[str]:
        """Return the required fields that are absent or blank in payload"""
        return [field for field in required if Validators.is_blank(payload.get(field))]

    @staticmethod
    def unknown_fields(payload: Dict[str, Any], allowed: List[str]) -> List[str]:
        """Return payload keys outside the allowed set"""
        return sorted(key for key in payload if key not in allowed)

    @staticmethod
    def validate_id_list(ids: Any) -> bool:
        """Validate a non-empty list of non-blank document ids.

        An id containing "/" would address a document path outside the
        collection, so it is rejected.
        """
        if not isinstance(ids, list) or not ids:
            return False
        return all(isinstance(i, str) and i.strip() and "/" not in i for i in ids)


class Helpers:
    """Utility helper functions"""

    @staticmethod
    def get_current_timestamp() -> datetime:
        """Get current timestamp"""
        return datetime.now(timezone.utc)

    @staticmethod
    def format_timestamp(timestamp: datetime) -> str:
        """Format timestamp for API response"""
        if timestamp.tzinfo is None:
            return timestamp.isoformat() + 'Z'
        return timestamp.isoformat()

    @staticmethod
    def created_at_seconds(document: Dict[str, Any]) -> float:
        """Sort key for createdAt; missing or unreadable timestamps count as epoch 0"""
        created_at = document.get('createdAt')
        if isinstance(created_at, datetime):
            if created_at.tzinfo is None:
                created_at = created_at.replace(tzinfo=timezone.utc)
            return created_at.timestamp()
        return 0

    @staticmethod
    def serialize_document(doc_id: str, data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Flatten a Firestore snapshot into {id, **fields} with ISO timestamps"""
        result = {'id': doc_id}
        for key, value in (data or {}).items():
            if isinstance(value, datetime):
                value = Helpers.format_timestamp(value)
            result[key] = value
        return result

    @staticmethod
    def sanitize_string(text: str) -> str:
        """Sanitize string input"""
        if not text:
            return ""
        return text.strip()

    @staticmethod
    def build_error_response(message: str, code: str = "INTERNAL_ERROR") -> Dict[str, Any]:
        """Build standardized error response"""
        return {
            'error': message,
            'code': code,
            'timestamp': Helpers.format_timestamp(Helpers.get_current_timestamp())
        }
