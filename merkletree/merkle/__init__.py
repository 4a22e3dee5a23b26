"""
Merkle Tree and Proof Paths

Deterministic Merkle tree construction over arbitrary values,
with per-leaf proof path derivation.

Usage:
    from merkletree.merkle import MerkleTree

    tree = MerkleTree("sha256", [1, 2, 3, 4, 5, 6])
    root = tree.root
    path = tree.proof(3)
"""
from .merkle_tree import (
    MerkleTree,
    ProofStep,
    compute_tree_depth,
)


__all__ = [
    "MerkleTree",
    "ProofStep",
    "compute_tree_depth",
]
