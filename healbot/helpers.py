# healbot/helpers.py
from flask import abort
from flask_jwt_extended import get_jwt_identity

from healbot.errors import ValidationError

# upper bound of the INTEGER primary and foreign key columns
MAX_DB_ID = 2**31 - 1


def api_response(success, message, data=None, status_code=200):
    return {
        "success": success,
        "message": message,
        "data": data
    }, status_code


def current_user_id() -> int:
    """User id from the verified JWT; call inside a jwt_required view."""
    identity = get_jwt_identity()
    try:
        return int(identity)
    except (ValueError, TypeError):
        abort(401, description="Invalid user ID format in token")


def optional_int_arg(value, field):
    """Parse an optional query/body id; blank means absent."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {field}")
    try:
        parsed = int(value)
    except (ValueError, TypeError):
        raise ValidationError(f"Invalid {field}")
    if not is_db_id(parsed):
        raise ValidationError(f"Invalid {field}")
    return parsed


def is_db_id(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= MAX_DB_ID


def check_length(value, column, field):
    """Reject text longer than the String column it is stored in."""
    limit = column.type.length
    if value is not None and limit is not None and len(value) > limit:
        raise ValidationError(f"{field} must be at most {limit} characters")
    return value
