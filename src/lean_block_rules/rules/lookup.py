"""
Verdicts returned by the block rules registry.

Every lookup resolves to exactly one of four outcomes:

- **NotSpecial**: no rule applies to the block
- **KnownBad**: the block must be rejected on import
- **KnownUnfinalized**: the block may be imported but must never be finalized
- **Expected**: a different hash is canonical at this height

The variants are plain frozen dataclasses, so callers branch on them with
structural pattern matching::

    match rules.lookup(number, block_hash):
        case Expected(hash=canonical):
            ...
        case KnownBad():
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

H = TypeVar("H")
"""Block hash type carried by the `Expected` verdict."""


@dataclass(frozen=True, slots=True)
class Verdict:
    """Common base of all lookup outcomes."""

    def is_unfinalized(self) -> bool:
        """Whether the result indicates a block that should not be finalized."""
        return isinstance(self, KnownUnfinalized)


@dataclass(frozen=True, slots=True)
class NotSpecial(Verdict):
    """The rules do not contain anything about this block."""


@dataclass(frozen=True, slots=True)
class KnownBad(Verdict):
    """The block is known to be bad and should not be imported."""


@dataclass(frozen=True, slots=True)
class KnownUnfinalized(Verdict):
    """The block is known not to be finalized."""


@dataclass(frozen=True, slots=True)
class Expected(Verdict, Generic[H]):
    """
    A canonical block hash is pinned for the queried height.

    Only returned when the candidate's hash differs from the pinned one.
    """

    hash: H
    """The only hash accepted at the queried height."""


type LookupResult[HashT] = NotSpecial | KnownBad | KnownUnfinalized | Expected[HashT]
"""Outcome of a block rules lookup."""
