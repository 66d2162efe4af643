"""Gene string extraction.

Turns registry records into the literal substrings they span, inclusive of
both codons. Records without a stop codon are never emitted; depending on
the policy they are dropped silently or reported with an
``UnterminatedGeneWarning``.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterator
from enum import Enum

import attrs

from genescan.core.codons import CODON_LENGTH
from genescan.core.exceptions import UnterminatedGeneWarning
from genescan.core.registry import GeneRecord, GeneRegistry

logger = logging.getLogger(__name__)


class UnterminatedPolicy(Enum):
    """Handling of records whose start codon has no in-frame stop."""

    DROP = "drop"  # exclude, debug log only
    WARN = "warn"  # exclude and warn


@attrs.define(frozen=True)
class ExtractedGene:
    """A gene string with the offsets it was cut from.

    Attributes:
        start: Offset of the start codon.
        stop: Offset of the stop codon.
        sequence: Bases from ``start`` through ``stop + 2``.
    """

    start: int
    stop: int
    sequence: str

    @property
    def length(self) -> int:
        return len(self.sequence)


class GeneExtractor:
    """Extracts gene strings from a sequence and its scanned registry.

    Example:
        >>> from genescan.core.scanner import scan_genes
        >>> seq = "atgtaaccccatgtag"
        >>> extractor = GeneExtractor(seq, scan_genes(seq))
        >>> extractor.extract()
        ['atgtaa', 'atgtag']
    """

    def __init__(
        self,
        sequence: str,
        registry: GeneRegistry,
        policy: UnterminatedPolicy | str = UnterminatedPolicy.DROP,
    ) -> None:
        self.sequence = sequence
        self.registry = registry
        self.policy = UnterminatedPolicy(policy)

    def genes(self) -> Iterator[ExtractedGene]:
        """Yield extracted genes in detection order."""
        for record in self.registry:
            if record.stop is None:
                self._handle_unterminated(record)
                continue
            yield ExtractedGene(
                start=record.start,
                stop=record.stop,
                sequence=self.sequence[record.start : record.stop + CODON_LENGTH],
            )

    def iterate(self) -> Iterator[str]:
        """Yield gene strings lazily in detection order."""
        for gene in self.genes():
            yield gene.sequence

    def __iter__(self) -> Iterator[str]:
        return self.iterate()

    def extract(self) -> list[str]:
        """Return all gene strings as a list."""
        return list(self.iterate())

    def count(self) -> int:
        """Number of gene strings that will be emitted."""
        return sum(1 for _ in self.registry.terminated())

    def _handle_unterminated(self, record: GeneRecord) -> None:
        logger.debug(f"Dropping start codon at {record.start}: no in-frame stop codon")
        if self.policy is UnterminatedPolicy.WARN:
            warnings.warn(UnterminatedGeneWarning(record.start), stacklevel=3)
