"""
Security utility functions for password hashing and album access hashes.
"""
import secrets

from passlib.context import CryptContext

# Password hashing context
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

ACCESS_HASH_MIN = 100000
ACCESS_HASH_MAX = 999999


def hash_password(password: str) -> str:
    """
    Hash a password with a per-password salt.

    Args:
        password: Plain text password

    Returns:
        Hashed password string
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against a hash.

    Args:
        plain_password: Plain text password to verify
        hashed_password: Hashed password to compare against

    Returns:
        True if password matches
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a recognised hash
        return False


def generate_access_hash() -> str:
    """
    Generate a 6-digit album access hash.

    Returns:
        Numeric string drawn uniformly from 100000-999999
    """
    span = ACCESS_HASH_MAX - ACCESS_HASH_MIN + 1
    return str(ACCESS_HASH_MIN + secrets.randbelow(span))
