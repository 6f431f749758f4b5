"""
Input sanitization utilities.

Shared helpers used by request model validators.
This module has no dependencies on models or services to avoid circular imports.
"""

import re
from typing import Iterable, List


def sanitize_tag(value: str) -> str:
    """
    Normalise a free-text tag such as a program category.

    - Replaces newlines, tabs and other control characters with spaces
    - Collapses multiple spaces into one
    - Strips leading/trailing whitespace

    Length is not enforced here; callers reject over-long tags.

    Args:
        value: Raw user-provided string

    Returns:
        Sanitized tag, possibly empty
    """
    sanitized = re.sub(r"[\n\r\t\x00-\x1f\x7f-\x9f]", " ", value)
    sanitized = re.sub(r" +", " ", sanitized)
    return sanitized.strip()


def unique_tags(values: Iterable[str]) -> List[str]:
    """Sanitize tags, dropping empties and duplicates while keeping first-seen order."""
    result: List[str] = []
    for value in values:
        tag = sanitize_tag(value)
        if tag and tag not in result:
            result.append(tag)
    return result


def has_surrounding_whitespace(value: str) -> bool:
    """True if value starts or ends with whitespace."""
    return value != value.strip()
