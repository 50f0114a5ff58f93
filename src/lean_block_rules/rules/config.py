"""
Block rules configuration constants.

Display parameters shared by the registry and the chain spec loader.
"""

from __future__ import annotations

from typing import Final

HASH_DISPLAY_LEN: Final[int] = 16
"""Number of hex characters of a block hash shown in log messages."""
