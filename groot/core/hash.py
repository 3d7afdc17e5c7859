"""Hash utilities for Groot.

Every object id is the lowercase hex SHA-1 of the object's bytes.
"""

import hashlib
import string

HASH_LENGTH = 40

_HEX_DIGITS = frozenset(string.hexdigits.lower())


def hash_object(data: bytes) -> str:
    """
    Compute SHA-1 hash of data.
    
    Args:
        data: Bytes to hash
        
    Returns:
        40-character hex string
    """
    return hashlib.sha1(data).hexdigest()


def is_hex_id(value: str) -> bool:
    """Check that value is non-empty and only holds lowercase hex digits."""
    return bool(value) and set(value) <= _HEX_DIGITS


def is_full_id(value: str) -> bool:
    """Check that value looks like a complete object id."""
    return len(value) == HASH_LENGTH and is_hex_id(value)
