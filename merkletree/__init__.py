"""
merkletree

Merkle hash trees over ordered sequences of arbitrary values,
with inclusion proof paths for any leaf.
"""

from merkletree.crypto import digest
from merkletree.merkle import MerkleTree, ProofStep, compute_tree_depth
from merkletree.schemas.errors import (
    IndexOutOfRangeException,
    InvalidArgumentException,
    MerkleTreeException,
    UnsupportedAlgorithmException,
)

__version__ = "0.1.0"

__all__ = [
    "MerkleTree",
    "ProofStep",
    "compute_tree_depth",
    "digest",
    "IndexOutOfRangeException",
    "InvalidArgumentException",
    "MerkleTreeException",
    "UnsupportedAlgorithmException",
]
