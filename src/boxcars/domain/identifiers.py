from __future__ import annotations

from uuid import UUID

from boxcars.domain.errors import invalid_uuid


def is_uuid(value: str) -> bool:
    try:
        UUID(value)
    except (TypeError, ValueError, AttributeError):
        return False
    return True


def ensure_uuid(value: str, field: str) -> str:
    """
    Reject identifiers that are not UUIDs before they reach the store.

    Raises:
        ValidationError: If value is not a valid UUID
    """
    if not is_uuid(value):
        raise invalid_uuid(field)
    return value
