"""
Digest Adapter
Normalizes a caller-supplied digest specification into a single
callable ``(str) -> str`` returning a lowercase hex digest.

This module provides:
- Named algorithm resolution against hashlib
- The static ``digest(algorithm, value)`` convenience
- Canonical pair serialization used for every interior node

Determinism Notes:
- Non-string values are canonicalized before hashing
- Strings are hashed as their UTF-8 bytes, without JSON quoting
- Pair serialization is order-sensitive: [left, right]
"""
from __future__ import annotations

import hashlib
import logging
from functools import partial
from typing import Any, Callable, Union

from merkletree.schemas.canonical import dumps_canonical
from merkletree.schemas.errors import (
    InvalidArgumentException,
    UnsupportedAlgorithmException,
)


logger = logging.getLogger(__name__)

DigestFunction = Callable[[str], str]
DigestSpec = Union[str, DigestFunction]

DEFAULT_ALGORITHM = "sha256"


def _normalize_name(algorithm: str) -> str:
    return algorithm.strip().lower()


def _new_hash(algorithm: str) -> "hashlib._Hash":
    """
    Instantiate a hash object from the provider.

    Raises:
        UnsupportedAlgorithmException: If hashlib does not know the name,
            or the algorithm has no fixed digest size (shake_*).
    """
    name = _normalize_name(algorithm)
    try:
        hasher = hashlib.new(name)
    except (ValueError, TypeError) as e:
        raise UnsupportedAlgorithmException(
            message=f"Unsupported digest algorithm: {algorithm!r}",
            algorithm=algorithm,
            details={"provider_error": str(e)},
        ) from e

    if hasher.digest_size == 0:
        raise UnsupportedAlgorithmException(
            message=f"Digest algorithm {algorithm!r} has variable output length",
            algorithm=algorithm,
        )
    return hasher


def is_algorithm_available(algorithm: str) -> bool:
    """Return True if ``algorithm`` resolves to a fixed-size hashlib digest."""
    if not isinstance(algorithm, str):
        return False
    try:
        _new_hash(algorithm)
    except UnsupportedAlgorithmException:
        return False
    return True


def digest(algorithm: str, value: Any) -> str:
    """
    Hash a value with a named algorithm and return its hex digest.

    Non-string values are first converted to canonical JSON.

    Args:
        algorithm: Name known to hashlib (e.g. "sha256", "sha1")
        value: Any value; strings are hashed verbatim

    Returns:
        Lowercase hex digest

    Raises:
        UnsupportedAlgorithmException: If the algorithm is unknown
        InvalidArgumentException: If algorithm is not a string

    Example:
        >>> digest("sha256", "hello world")
        'b94d27b9934d3e08a52e52d7da7dabfac484efe37a5380ee9088f7ace2efcde9'
    """
    if not isinstance(algorithm, str):
        raise InvalidArgumentException(
            message=f"Digest algorithm must be a name, got {type(algorithm).__name__}",
            argument="algorithm",
            details={"type": type(algorithm).__name__},
        )
    if not isinstance(value, str):
        value = dumps_canonical(value)
    hasher = _new_hash(algorithm)
    hasher.update(value.encode("utf-8"))
    return hasher.hexdigest()


def hash_canonical(value: Any, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """
    Hash a value's canonical JSON form.

    Unlike digest(), strings are canonicalized too, so "1" and 1
    produce different hashes.
    """
    return digest(algorithm, dumps_canonical(value))


def resolve_digest(spec: DigestSpec) -> DigestFunction:
    """
    Turn a digest specification into a digest callable.

    Args:
        spec: Algorithm name or a one-argument callable returning hex

    Returns:
        Callable mapping a string to a hex digest string

    Raises:
        UnsupportedAlgorithmException: Named algorithm unavailable
        InvalidArgumentException: Neither a string nor a callable
    """
    if isinstance(spec, str):
        try:
            _new_hash(spec)
        except UnsupportedAlgorithmException:
            logger.warning("Digest algorithm %r is not available", spec)
            raise
        return partial(digest, _normalize_name(spec))

    if callable(spec):
        return spec

    logger.warning("Rejected digest specification of type %s", type(spec).__name__)
    raise InvalidArgumentException(
        message="A Merkle tree requires a digest function or algorithm name",
        argument="digest_fn",
        details={"type": type(spec).__name__},
    )


def serialize_pair(left: Any, right: Any) -> str:
    """Canonical serialization of a node pair: ``[left,right]``."""
    return dumps_canonical([left, right])


def hash_pair(digest_fn: DigestFunction, left: Any, right: Any) -> str:
    """
    Compute the parent node of a pair.

    Raises:
        InvalidArgumentException: If a custom digest returns a non-string
    """
    node = digest_fn(serialize_pair(left, right))
    if not isinstance(node, str):
        raise InvalidArgumentException(
            message=f"Digest function returned {type(node).__name__}, expected str",
            argument="digest_fn",
        )
    return node


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
