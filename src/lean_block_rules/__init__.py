"""In-memory block rules registry for a blockchain client's import pipeline."""

from .rules import (
    BadBlocks,
    BlockRules,
    ChainSpecRules,
    Expected,
    ForkBlocks,
    KnownBad,
    KnownUnfinalized,
    LookupResult,
    NotSpecial,
)
from .types import BlockHash, BlockNumber

__all__ = [
    "BlockRules",
    "ForkBlocks",
    "BadBlocks",
    "LookupResult",
    "NotSpecial",
    "KnownBad",
    "KnownUnfinalized",
    "Expected",
    "ChainSpecRules",
    "BlockHash",
    "BlockNumber",
]
