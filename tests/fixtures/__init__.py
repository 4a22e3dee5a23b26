"""
Test fixtures package for merkletree tests.

- tree_fixtures.py: pinned reference tree and proof helpers

Usage:
    from fixtures import SAMPLE_ROOT, recompute_root
"""

from .tree_fixtures import (
    SAMPLE_DATA,
    SAMPLE_LEVELS,
    SAMPLE_ROOT,
    is_self_paired,
    recompute_root,
)

__all__ = [
    "SAMPLE_DATA",
    "SAMPLE_LEVELS",
    "SAMPLE_ROOT",
    "is_self_paired",
    "recompute_root",
]
