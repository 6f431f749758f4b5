"""
Password hashing helpers.

Only the derived hash is ever persisted. The hash format is whatever
werkzeug's current default is (scrypt on recent releases); the method is
embedded in the hash string so older hashes keep verifying.
"""

from werkzeug.security import check_password_hash, generate_password_hash


def hash_password(password: str) -> str:
    """Derive a salted hash suitable for storage."""
    return generate_password_hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    """Check password against a stored hash in constant time."""
    if not password_hash:
        return False
    return check_password_hash(password_hash, password)
