"""
Digest utilities.

Resolves named hashlib algorithms or custom callables into the single
digest contract used by the Merkle tree.
"""
from .hashing import (
    DEFAULT_ALGORITHM,
    DigestFunction,
    DigestSpec,
    digest,
    hash_canonical,
    hash_pair,
    is_algorithm_available,
    resolve_digest,
    serialize_pair,
)

__all__ = [
    "DEFAULT_ALGORITHM",
    "DigestFunction",
    "DigestSpec",
    "digest",
    "hash_canonical",
    "hash_pair",
    "is_algorithm_available",
    "resolve_digest",
    "serialize_pair",
]
