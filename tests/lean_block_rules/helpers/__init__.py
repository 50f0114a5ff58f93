"""Test helpers for building block hashes and heights."""

from __future__ import annotations

from lean_block_rules.types import BlockHash, BlockNumber


def make_hash(seed: int) -> BlockHash:
    """Build a distinct, deterministic block hash from a small integer."""
    return BlockHash(seed.to_bytes(32, "big"))


def make_number(height: int) -> BlockNumber:
    """Build a block number."""
    return BlockNumber(height)


__all__ = ["make_hash", "make_number"]
