"""
Block rules for the block import pipeline.

What Are Block Rules?
---------------------
A chain spec may single out blocks that need special treatment during
import: bad blocks to reject, and canonical hashes pinned at specific
heights. A running node may additionally mark blocks it must never
finalize. The registry collects these rules and classifies candidate
blocks against them.
"""

from __future__ import annotations

__all__ = [
    # Registry
    "BlockRules",
    "ForkBlocks",
    "BadBlocks",
    # Verdicts
    "LookupResult",
    "Verdict",
    "NotSpecial",
    "KnownBad",
    "KnownUnfinalized",
    "Expected",
    # Chain spec loading
    "ChainSpecRules",
    # Configuration constants
    "HASH_DISPLAY_LEN",
]

from .chain_spec import ChainSpecRules
from .config import HASH_DISPLAY_LEN
from .lookup import Expected, KnownBad, KnownUnfinalized, LookupResult, NotSpecial, Verdict
from .registry import BadBlocks, BlockRules, ForkBlocks
