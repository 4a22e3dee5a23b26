"""
Pytest configuration and shared fixtures for merkletree tests.

This conftest.py:
1. Adds project root and tests root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from fixtures import SAMPLE_DATA  # noqa: E402
from merkletree.merkle import MerkleTree  # noqa: E402


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def sample_data():
    """Fresh copy of the reference leaf values."""
    return list(SAMPLE_DATA)


@pytest.fixture
def sha256_tree(sample_data):
    """Reference tree over [1..6] with sha256."""
    return MerkleTree("sha256", sample_data)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove merkletree environment overrides for the duration of a test."""
    for var in ("MERKLETREE_ALGORITHM", "MERKLETREE_LOG_LEVEL", "MERKLETREE_LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
