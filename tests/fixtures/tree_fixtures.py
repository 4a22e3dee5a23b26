"""
Reference values and helpers for Merkle tree tests.

The reference tree is sha256 over [1, 2, 3, 4, 5, 6]. Its levels are
pinned as regression fixtures; any change to pair serialization or
the self-pairing rule changes them.
"""

from typing import Any, Sequence

from merkletree.crypto.hashing import hash_pair


SAMPLE_DATA = [1, 2, 3, 4, 5, 6]

SAMPLE_ROOT = "b0f83986db9ecaa36bd08d732a99fc461f113b78e75612bade03892cd7bb8d25"

SAMPLE_LEVELS = (
    tuple(SAMPLE_DATA),
    (
        "49a64717d5d4cb19952e6eac2946415cf6879adacf9908e7d872332d32c6e684",
        "8be6d66e9099c68d8feb52ce42478d2153cac2763b784174ae6ae96cd636b596",
        "2f9cf80b937f44b41379ae3765c65668e5e96241d19d2088e76d72d18ea324b2",
    ),
    (
        "2450f5c346c26103f2bf4ba7052954556e58a1d577b78e17faa7d54c29cf6741",
        "340c611ef9c540adf73ee22e41b148f9549c5bd88dfdf1a0792a23d564380dde",
    ),
    (SAMPLE_ROOT,),
)


def is_self_paired(width: int, index: int) -> bool:
    """True when the node at index is the unpaired tail of an odd level."""
    return index == width - 1 and width % 2 == 1


def recompute_root(tree: Any, index: int, path: Sequence[Any]) -> str:
    """
    Fold a proof path back up to a root, the way an external verifier would.

    Levels whose tracked node was self-paired carry no step, so the node
    is hashed with itself there. Asserts that every step contains the
    tracked node on the correct side.
    """
    current = tree.leaves[index]
    steps = iter(path)

    for level in tree.levels[:-1]:
        if is_self_paired(len(level), index):
            current = hash_pair(tree.digest_fn, current, current)
        else:
            step = next(steps)
            assert step[index % 2] == current
            current = hash_pair(tree.digest_fn, step.left, step.right)
        index //= 2

    assert next(steps, None) is None, "proof has more steps than levels"
    return current
