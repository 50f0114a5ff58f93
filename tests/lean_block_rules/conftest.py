"""
Shared pytest fixtures for all lean_block_rules tests.

The symbolic hashes `h1`, `h2`, ... are distinct block hashes.
`h_canonical` and `h_other` compete for the same height.
"""

from __future__ import annotations

import pytest

from lean_block_rules.types import BlockHash
from tests.lean_block_rules.helpers import make_hash


@pytest.fixture
def h1() -> BlockHash:
    """First symbolic block hash."""
    return make_hash(1)


@pytest.fixture
def h2() -> BlockHash:
    """Second symbolic block hash."""
    return make_hash(2)


@pytest.fixture
def h3() -> BlockHash:
    """Third symbolic block hash."""
    return make_hash(3)


@pytest.fixture
def h_canonical() -> BlockHash:
    """Hash pinned as canonical by a fork block rule."""
    return BlockHash("0x" + "ca" * 32)


@pytest.fixture
def h_other() -> BlockHash:
    """Hash competing with the canonical one at the same height."""
    return BlockHash("0x" + "0f" * 32)
