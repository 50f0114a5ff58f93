"""
Chain-specific block filtering rules.

Why Block Rules?
----------------
A chain occasionally ships with blocks that every node must treat specially:

1. **Bad blocks**: Blocks that were produced but must never be imported,
   for example after a consensus bug was exploited.
2. **Fork blocks**: Heights where only one specific hash is canonical,
   pinning every node to the same side of a planned or emergency fork.
3. **Unfinalized blocks**: Blocks a node keeps in its store but refuses to
   finalize. These are learned at runtime rather than shipped.

The first two come from the chain spec and never change. The third grows
while the node runs.

Lookup Precedence
-----------------
A lookup with both height and hash evaluates the rules in a fixed order:

1. A fork entry at the height with a different hash -> `Expected`
2. The hash is a known bad block -> `KnownBad`
3. The hash is marked unfinalized -> `KnownUnfinalized`
4. Otherwise -> `NotSpecial`

A matching fork entry does not short-circuit. A block that is canonical at
its height can still be bad or unfinalized.

Concurrency
-----------
Lookups are frequent and come from the import pipeline. Marking is rare.
The unfinalized set is therefore held as an immutable snapshot:

- Readers consult whatever snapshot is current, without locking.
- Writers serialize on a lock, build a new snapshot, and swap it in.

A reader sees either the snapshot before a write or the one after it,
never a partially updated set.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping
from threading import Lock
from types import MappingProxyType
from typing import Generic, TypeVar

from .config import HASH_DISPLAY_LEN
from .lookup import Expected, KnownBad, KnownUnfinalized, LookupResult, NotSpecial

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)
"""Block height type."""

H = TypeVar("H", bound=Hashable)
"""Block hash type."""

type ForkBlocks[NumberT, HashT] = Iterable[tuple[NumberT, HashT]] | None
"""
Canonical hashes pinned at specific heights, in declaration order.

`None` is equivalent to an empty sequence.
"""

type BadBlocks[HashT] = Iterable[HashT] | None
"""
Hashes of blocks that must never be imported.

`None` is equivalent to an empty set.
"""


def _short(block_hash: object) -> str:
    """Render a hash for log output."""
    raw = block_hash.hex() if isinstance(block_hash, (bytes, bytearray)) else str(block_hash)
    return raw[:HASH_DISPLAY_LEN]


def _fold_forks(fork_blocks: Iterable[tuple[N, H]]) -> dict[N, H]:
    """
    Fold a sequence of (height, hash) pairs into a mapping.

    Duplicate heights resolve to the last pair in iteration order.
    """
    forks: dict[N, H] = {}
    for number, block_hash in fork_blocks:
        previous = forks.get(number)
        if previous is not None and previous != block_hash:
            logger.debug(
                "Fork block at height %s overridden: %s -> %s",
                number,
                _short(previous),
                _short(block_hash),
            )
        forks[number] = block_hash
    return forks


class BlockRules(Generic[N, H]):
    """
    Chain-specific block filtering rules.

    Holds known bad blocks and known good forks, usually sourced from the
    chain spec, plus blocks marked unfinalized at runtime.

    Attributes:
        _bad: Hashes of blocks that must be rejected outright.
        _forks: Canonical hash expected at each pinned height.
        _unfinalized: Hashes of blocks that must never be finalized.
            Replaced wholesale on every insertion, never mutated in place.
        _write_lock: Serializes writers to the unfinalized snapshot.
    """

    __slots__ = ("_bad", "_forks", "_unfinalized", "_write_lock")

    def __init__(
        self,
        fork_blocks: ForkBlocks[N, H] = None,
        bad_blocks: BadBlocks[H] = None,
    ) -> None:
        """
        Build block rules from the chain spec collections.

        Both collections are copied, so later changes to the caller's
        objects do not leak into the registry.

        Args:
            fork_blocks: (height, hash) pairs. For duplicate heights the
                last pair wins.
            bad_blocks: Hashes to reject on import.
        """
        self._bad = frozenset(() if bad_blocks is None else bad_blocks)
        self._forks = MappingProxyType(_fold_forks(() if fork_blocks is None else fork_blocks))
        self._unfinalized = frozenset()
        self._write_lock = Lock()

        logger.debug(
            "Block rules initialized: %d fork blocks, %d bad blocks",
            len(self._forks),
            len(self._bad),
        )

    def mark_unfinalized(self, block_hash: H) -> None:
        """
        Mark a block as not possible to be finalized.

        Marking the same hash again has no effect.
        """
        # Fast path: already marked, no need to contend for the lock.
        if block_hash in self._unfinalized:
            return

        with self._write_lock:
            current = self._unfinalized
            if block_hash in current:
                return
            self._unfinalized = current | {block_hash}

        logger.debug("Block %s marked unfinalized", _short(block_hash))

    def lookup(self, number: N, block_hash: H) -> LookupResult[H]:
        """
        Check if there is any rule affecting the given block.

        Prefer this over `lookup_hash` whenever the block height is known:
        only this variant can detect a block on the wrong side of a fork.

        Args:
            number: Height of the candidate block.
            block_hash: Hash of the candidate block.

        Returns:
            The verdict for the block.
        """
        hash_for_height = self._forks.get(number)
        if hash_for_height is not None and hash_for_height != block_hash:
            return Expected(hash_for_height)

        return self.lookup_hash(block_hash)

    def lookup_hash(self, block_hash: H) -> LookupResult[H]:
        """
        Check if there is any rule affecting the given block hash.

        Without a height the fork rules cannot apply, so this never
        returns `Expected`.
        """
        if block_hash in self._bad:
            return KnownBad()

        if block_hash in self._unfinalized:
            return KnownUnfinalized()

        return NotSpecial()

    def expected_hash(self, number: N) -> H | None:
        """Get the canonical hash pinned at a height, if any."""
        return self._forks.get(number)

    def is_bad(self, block_hash: H) -> bool:
        """Check if a hash is a known bad block."""
        return block_hash in self._bad

    def is_unfinalized(self, block_hash: H) -> bool:
        """Check if a hash has been marked unfinalized."""
        return block_hash in self._unfinalized

    @property
    def fork_blocks(self) -> Mapping[N, H]:
        """Read-only view of the pinned canonical hashes."""
        return self._forks

    @property
    def bad_blocks(self) -> frozenset[H]:
        """Known bad block hashes."""
        return self._bad

    @property
    def unfinalized_blocks(self) -> frozenset[H]:
        """Snapshot of the hashes marked unfinalized so far."""
        return self._unfinalized

    def __repr__(self) -> str:
        """Summarize the rule counts."""
        return (
            f"{type(self).__name__}(forks={len(self._forks)}, "
            f"bad={len(self._bad)}, unfinalized={len(self._unfinalized)})"
        )
