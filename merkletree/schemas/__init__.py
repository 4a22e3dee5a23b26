"""
Schemas & Canonicalization

Public API for canonical serialization and the error taxonomy.
"""

# Canonical serialization API
from .canonical import (
    CANONICAL_JSON_SEPARATORS,
    canonical_equals,
    canonicalize_value,
    dumps_canonical,
    ensure_utc,
    format_datetime_canonical,
    loads_canonical,
)

# Error models and exceptions
from .errors import (
    CanonicalizationException,
    ConfigException,
    ErrorCodes,
    IndexOutOfRangeException,
    InvalidArgumentException,
    MerkleError,
    MerkleTreeException,
    UnsupportedAlgorithmException,
)

__all__ = [
    # Canonical
    "CANONICAL_JSON_SEPARATORS",
    "canonical_equals",
    "canonicalize_value",
    "dumps_canonical",
    "ensure_utc",
    "format_datetime_canonical",
    "loads_canonical",
    # Errors
    "CanonicalizationException",
    "ConfigException",
    "ErrorCodes",
    "IndexOutOfRangeException",
    "InvalidArgumentException",
    "MerkleError",
    "MerkleTreeException",
    "UnsupportedAlgorithmException",
]
