"""
Utility functions package.
"""
from snapshare.utils.security import (
    hash_password,
    verify_password,
    generate_access_hash,
)

__all__ = [
    "hash_password",
    "verify_password",
    "generate_access_hash",
]
