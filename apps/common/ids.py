"""Identifier helpers."""
import uuid


def generate_id() -> str:
    """Default primary key for string-keyed reference tables."""
    return str(uuid.uuid4())


def parse_uuid(value):
    """Return ``value`` as a UUID, or None if it is not one."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None
