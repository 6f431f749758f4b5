"""
Shared constants.

This module has no dependencies on models or services to avoid circular imports.
"""

# Program fields
MAX_PROGRAM_NAME_LENGTH = 200
MAX_CATEGORY_LENGTH = 50
MAX_CATEGORIES_COUNT = 20
MAX_SCHEDULE_DAYS = 31
MAX_DAY_NAME_LENGTH = 200

# Exercise catalog
MAX_EXERCISE_NAME_LENGTH = 200

# Registration
MAX_USER_NAME_LENGTH = 64
MAX_PERSON_NAME_LENGTH = 100
MIN_PASSWORD_LENGTH = 8
# Longer inputs are rejected rather than silently truncated by the hasher
MAX_PASSWORD_LENGTH = 72
