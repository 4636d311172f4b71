import uuid
from datetime import datetime, timezone

# legacy ids and quantities are stored in 32-bit INTEGER columns
MIN_INTEGER = -(2 ** 31)
MAX_INTEGER = 2 ** 31 - 1


def new_object_id() -> str:
    return uuid.uuid4().hex


def parse_object_id(value: str):
    """Return the canonical store identifier for ``value``, or None."""
    try:
        return uuid.UUID(value).hex
    except (ValueError, AttributeError, TypeError):
        return None


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
