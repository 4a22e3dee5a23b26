"""
Merkle Tree Implementation
Deterministic Merkle tree construction and proof path derivation.

Canonical Commitment Rules (Hard Contracts):
1. Level 0 holds the caller's values, unhashed, in original order.
2. Parent node: digest(dumps_canonical([left, right]))
3. Self-pairing: an unpaired trailing node is paired with itself.
4. Level 0 is always reduced at least once, so a single leaf
   has root digest([leaf, leaf]) and depth 2.
5. Reduction stops as soon as a level holds exactly one node.

Proof Paths:
- One (left, right) pair per level where the tracked node has a sibling.
- The last node of an odd-width level is skipped; its parent index
  is still floor(index / 2).
- Verifying a path is left to the consumer.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any, NamedTuple, Optional, TYPE_CHECKING

from merkletree.crypto.hashing import DigestSpec, digest, hash_pair, resolve_digest
from merkletree.schemas.errors import IndexOutOfRangeException, InvalidArgumentException

if TYPE_CHECKING:
    from merkletree.config.runtime import RuntimeConfig


logger = logging.getLogger(__name__)

Level = tuple[Any, ...]


class ProofStep(NamedTuple):
    """A sibling pair on the path from a leaf to the root."""
    left: Any
    right: Any


def compute_tree_depth(num_leaves: int) -> int:
    """
    Compute the depth of a tree with the given number of leaves.

    Depth counts levels from the leaf level through the root level.
    The leaf level is always reduced at least once, so a single leaf
    gives depth 2.

    Args:
        num_leaves: Number of leaves in the tree

    Returns:
        Tree depth (0 for empty tree)
    """
    if num_leaves < 0:
        raise InvalidArgumentException(
            f"Leaf count must be non-negative, got {num_leaves}",
            argument="num_leaves",
        )
    if num_leaves == 0:
        return 0

    depth = 2
    n = math.ceil(num_leaves / 2)
    while n > 1:
        n = math.ceil(n / 2)
        depth += 1
    return depth


class MerkleTree:
    """
    Immutable Merkle tree over an ordered sequence of values.

    Example:
        >>> tree = MerkleTree("sha256", [1, 2, 3, 4, 5, 6])
        >>> tree.root
        'b0f83986db9ecaa36bd08d732a99fc461f113b78e75612bade03892cd7bb8d25'
        >>> tree.depth
        4
    """

    def __init__(self, digest_fn: DigestSpec, data: Sequence[Any]) -> None:
        """
        Build the tree.

        Args:
            digest_fn: hashlib algorithm name, or a callable mapping a
                string to a hex digest string
            data: Non-empty sequence of leaf values; a copy is kept

        Raises:
            InvalidArgumentException: Bad digest spec, non-sequence or empty data
            UnsupportedAlgorithmException: Named algorithm unavailable
        """
        self.digest_fn = resolve_digest(digest_fn)
        leaves = self._copy_leaves(data)
        self._levels: tuple[Level, ...] = (leaves,) + self._derive(leaves)

        logger.debug(
            "Built Merkle tree: %d leaves, depth %d", len(leaves), self.depth
        )

    @classmethod
    def from_config(
        cls,
        data: Sequence[Any],
        config: Optional["RuntimeConfig"] = None,
    ) -> "MerkleTree":
        """Build a tree with the configured default algorithm."""
        from merkletree.config.runtime import RuntimeConfig

        config = config or RuntimeConfig.from_env()
        return cls(config.tree.default_algorithm, data)

    @staticmethod
    def digest(algorithm: str, value: Any) -> str:
        """Hash any value with a named algorithm; see crypto.hashing.digest."""
        return digest(algorithm, value)

    @staticmethod
    def _copy_leaves(data: Sequence[Any]) -> Level:
        if isinstance(data, (str, bytes, bytearray)) or not isinstance(data, Sequence):
            raise InvalidArgumentException(
                "A Merkle tree requires a sequence of values",
                argument="data",
                details={"type": type(data).__name__},
            )
        if len(data) == 0:
            raise InvalidArgumentException(
                "A Merkle tree requires at least one value",
                argument="data",
            )
        return tuple(data)

    def _derive(self, data: Level) -> tuple[Level, ...]:
        """Reduce pairwise until a level with a single node is produced."""
        levels: list[Level] = []
        level = data

        while True:
            next_level = []
            for i in range(0, len(level), 2):
                left = level[i]
                right = level[i + 1] if i + 1 < len(level) else left
                next_level.append(hash_pair(self.digest_fn, left, right))

            levels.append(tuple(next_level))
            if len(next_level) == 1:
                return tuple(levels)
            level = next_level

    def proof(self, index: int) -> list[ProofStep]:
        """
        Retrieve the proof path for a leaf.

        Args:
            index: 0-based leaf index

        Returns:
            Sibling pairs, leaf level first

        Raises:
            InvalidArgumentException: If index is not an int
            IndexOutOfRangeException: If index is outside [0, len(leaves))

        Example:
            >>> tree = MerkleTree("sha256", [1, 2, 3, 4, 5, 6])
            >>> tree.proof(3)[0]
            ProofStep(left=3, right=4)
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgumentException(
                f"Leaf index must be an int, got {type(index).__name__}",
                argument="index",
            )
        size = len(self.leaves)
        if index < 0 or index >= size:
            raise IndexOutOfRangeException(
                f"Leaf index {index} out of range for {size} leaves",
                index=index,
                size=size,
            )

        path: list[ProofStep] = []
        leaf_index = index
        for level in self._levels:
            width = len(level)
            if not (index == width - 1 and width % 2 == 1):
                if index % 2:
                    path.append(ProofStep(level[index - 1], level[index]))
                else:
                    path.append(ProofStep(level[index], level[index + 1]))
            index //= 2

        logger.debug("Derived proof for leaf %d: %d steps", leaf_index, len(path))
        return path

    @property
    def root(self) -> str:
        """The single node of the final level."""
        return self._levels[-1][0]

    @property
    def depth(self) -> int:
        """Number of levels, leaf level and root level included."""
        return len(self._levels)

    @property
    def levels(self) -> tuple[Level, ...]:
        """All levels, leaves first, root last."""
        return self._levels

    @property
    def leaves(self) -> Level:
        """The original values, in original order."""
        return self._levels[0]

    def __len__(self) -> int:
        return len(self.leaves)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MerkleTree):
            return NotImplemented
        return self._levels == other._levels

    def __hash__(self) -> int:
        return hash(self.root)

    def __repr__(self) -> str:
        return (
            f"MerkleTree(leaves={len(self)}, depth={self.depth}, "
            f"root={self.root[:12]!r})"
        )


__all__ = [
    "MerkleTree",
    "ProofStep",
    "compute_tree_depth",
]
