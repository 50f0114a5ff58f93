"""Reusable type definitions for the block rules registry."""

from .base import CamelModel
from .byte_arrays import ZERO_HASH, BaseBytes, BlockHash, Bytes32
from .uint import BaseUint, BlockNumber, Uint64

__all__ = [
    # Core types
    "BaseUint",
    "Uint64",
    "BlockNumber",
    "BaseBytes",
    "Bytes32",
    "BlockHash",
    "ZERO_HASH",
    "CamelModel",
]
