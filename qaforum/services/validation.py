"""Input checks shared by the services. All failures are ValidationErrors."""

from typing import Optional

from qaforum.database.database import is_valid_object_id
from qaforum.errors import ValidationError


def require_object_id(value: Optional[str], kind: str) -> str:
    """Ensure an identifier parameter is present and a well-formed ObjectId."""
    if not value:
        raise ValidationError(f"Please provide a {kind} id")
    if not is_valid_object_id(value):
        raise ValidationError(f"Please provide a valid {kind} id")
    return value


def require_value(value: Optional[str], message: str) -> str:
    if not value:
        raise ValidationError(message)
    return value


def require_min_length(value: str, min_length: int, message: str) -> str:
    if len(value) < min_length:
        raise ValidationError(message)
    return value
