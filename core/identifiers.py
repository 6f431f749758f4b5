"""
Identifier helpers.

Every stored document uses a server-generated UUID primary key. IDs are
opaque to clients, so anything that is not a UUID simply cannot match a
stored row.
"""

from typing import Iterable, List
from uuid import UUID


def is_valid_id(value: str) -> bool:
    """Return True if value parses as a UUID."""
    try:
        UUID(str(value))
    except ValueError:
        return False
    return True


def valid_ids(values: Iterable[str]) -> List[str]:
    """Return the distinct parseable IDs in values, preserving first-seen order."""
    seen = []
    for value in values:
        if value not in seen and is_valid_id(value):
            seen.append(value)
    return seen
