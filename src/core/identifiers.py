"""Helpers for identifiers received from the outside world."""

from uuid import UUID


def parse_identifier(value: UUID | str) -> UUID | None:
    """Return ``value`` as a UUID, or None when it is not a well-formed id."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None
