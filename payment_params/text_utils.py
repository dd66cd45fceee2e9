"""Blank checks and hashing for outgoing parameter values."""
import hashlib
from typing import Optional


def is_blank(value: Optional[str]) -> bool:
    """True for None, empty, or whitespace-only strings."""
    return value is None or not value.strip()


def null_if_blank(value: Optional[str]) -> Optional[str]:
    """Return None for blank input so the pruner can drop the field."""
    if is_blank(value):
        return None
    return value


def sha_hash_input(value: Optional[str]) -> Optional[str]:
    """SHA-256 hex digest (lowercase) of the UTF-8 encoded value."""
    if value is None:
        return None
    return hashlib.sha256(value.encode("utf-8")).hexdigest()
