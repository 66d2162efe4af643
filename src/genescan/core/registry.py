"""Gene record registry.

An append-only, ordered store of (start, stop) codon offsets filled by the
scanner. Backing storage is a fixed block of slots that doubles when full,
so appends are amortized O(1) and growth never reorders existing records.

Example:
    >>> from genescan.core.registry import GeneRecord, GeneRegistry
    >>> registry = GeneRegistry(initial_capacity=2)
    >>> registry.append(GeneRecord(0, 3))
    >>> registry.append(GeneRecord(10, 13))
    >>> registry.append(GeneRecord(20, None))
    >>> registry.capacity
    4
    >>> [r.start for r in registry.terminated()]
    [0, 10]
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import attrs

from genescan.core.codons import CODON_LENGTH
from genescan.core.exceptions import RegistryFrozenError

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 30


def _check_stop(instance: "GeneRecord", attribute: attrs.Attribute, value: int | None) -> None:
    if value is not None and value < instance.start + CODON_LENGTH:
        raise ValueError(
            f"stop ({value}) must be at least start + {CODON_LENGTH} ({instance.start + CODON_LENGTH})"
        )


@attrs.define(frozen=True)
class GeneRecord:
    """Offsets of a matched start codon and its paired stop codon.

    Attributes:
        start: Offset of the first base of the start codon.
        stop: Offset of the first base of the stop codon, or None if no
            in-frame stop codon was found.
    """

    start: int = attrs.field(validator=attrs.validators.ge(0))
    stop: int | None = attrs.field(default=None, validator=_check_stop)

    @property
    def is_terminated(self) -> bool:
        return self.stop is not None

    @property
    def length(self) -> int | None:
        """Gene length including both codons, or None if unterminated."""
        if self.stop is None:
            return None
        return self.stop - self.start + CODON_LENGTH


class GeneRegistry:
    """Growable, insertion-ordered sequence of GeneRecords.

    Single writer, not thread-safe. Once ``freeze`` is called the registry
    is read-only.

    Attributes:
        capacity: Number of slots currently allocated.
    """

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY) -> None:
        if initial_capacity < 1:
            raise ValueError(f"initial_capacity must be >= 1, got {initial_capacity}")
        self._slots: list[GeneRecord | None] = [None] * initial_capacity
        self._count = 0
        self._frozen = False

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def append(self, record: GeneRecord) -> None:
        """Append a record, doubling capacity first if full.

        Raises:
            RegistryFrozenError: If the registry has been frozen.
        """
        if self._frozen:
            raise RegistryFrozenError("Cannot append to a frozen gene registry")
        if self._count >= len(self._slots):
            self._grow()
        self._slots[self._count] = record
        self._count += 1

    def _grow(self) -> None:
        new_slots: list[GeneRecord | None] = [None] * (len(self._slots) * 2)
        new_slots[: self._count] = self._slots[: self._count]
        logger.debug(f"Growing gene registry: {len(self._slots)} -> {len(new_slots)} slots")
        self._slots = new_slots

    def freeze(self) -> None:
        """Mark the registry read-only."""
        self._frozen = True

    def count(self) -> int:
        """Number of appended records, terminated or not."""
        return self._count

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[GeneRecord]:
        for i in range(self._count):
            yield self._slots[i]  # type: ignore[misc]

    def __getitem__(self, index: int) -> GeneRecord:
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("gene registry index out of range")
        return self._slots[index]  # type: ignore[return-value]

    def terminated(self) -> Iterator[GeneRecord]:
        """Iterate over records that have a stop codon."""
        return (r for r in self if r.stop is not None)

    def unterminated(self) -> Iterator[GeneRecord]:
        """Iterate over records without a stop codon."""
        return (r for r in self if r.stop is None)

    def __repr__(self) -> str:
        return f"GeneRegistry(count={self._count}, capacity={self.capacity})"
