"""Start/stop codon scanning.

The scanner makes a single forward pass over the sequence. Every offset is
tested for the start codon; each hit opens a record and triggers an in-frame
search (steps of three) for the nearest stop codon. The outer pass always
resumes at the next offset, so a start codon inside an earlier gene opens
its own, overlapping record.

Example:
    >>> from genescan.core.scanner import scan_genes
    >>> registry = scan_genes("atgatgtaa")
    >>> [(r.start, r.stop) for r in registry]
    [(0, 6), (3, 6)]
"""

from __future__ import annotations

import logging
from collections.abc import Collection

from genescan.core.codons import CODON_LENGTH, START_CODON, STOP_CODONS, is_start_codon, is_stop_codon
from genescan.core.registry import DEFAULT_CAPACITY, GeneRecord, GeneRegistry

logger = logging.getLogger(__name__)

# A start codon needs room for at least one following codon.
MIN_GENE_LENGTH = 2 * CODON_LENGTH


class GeneScanner:
    """Scans a validated sequence and fills a gene registry.

    Each scanner owns the registry it fills. The registry is frozen once
    the scan completes and is then handed out read-only.

    Attributes:
        sequence: The validated base sequence.
        registry: Records found so far, in detection order.

    Example:
        >>> scanner = GeneScanner("atgtaaccccatgtag")
        >>> registry = scanner.scan()
        >>> registry.count()
        2
    """

    def __init__(
        self,
        sequence: str,
        start_codon: str = START_CODON,
        stop_codons: Collection[str] = STOP_CODONS,
        initial_capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        """Initialize the scanner.

        Args:
            sequence: Base sequence; must already have passed validation.
            start_codon: Codon that opens a gene.
            stop_codons: Codons that close a gene.
            initial_capacity: Initial slot count of the registry.
        """
        self.sequence = sequence
        self.start_codon = start_codon
        self.stop_codons = frozenset(stop_codons)
        self.registry = GeneRegistry(initial_capacity)
        self._scanned = False

    def scan(self) -> GeneRegistry:
        """Run the scan and return the frozen registry.

        Calling ``scan`` again returns the same registry without rescanning.
        """
        if self._scanned:
            return self.registry

        sequence = self.sequence
        for i in range(len(sequence) - MIN_GENE_LENGTH + 1):
            if is_start_codon(sequence, i, self.start_codon):
                self.registry.append(GeneRecord(i, self._find_stop(i)))

        self.registry.freeze()
        self._scanned = True

        n_open = sum(1 for _ in self.registry.unterminated())
        logger.debug(
            f"Scanned {len(sequence):,} bases: {self.registry.count()} start codons, "
            f"{n_open} without an in-frame stop"
        )
        return self.registry

    def _find_stop(self, start: int) -> int | None:
        """Return the offset of the nearest in-frame stop codon after ``start``."""
        sequence = self.sequence
        last = len(sequence) - CODON_LENGTH
        for j in range(start + CODON_LENGTH, last + 1, CODON_LENGTH):
            if is_stop_codon(sequence, j, self.stop_codons):
                return j
        return None


def scan_genes(
    sequence: str,
    start_codon: str = START_CODON,
    stop_codons: Collection[str] = STOP_CODONS,
    initial_capacity: int = DEFAULT_CAPACITY,
) -> GeneRegistry:
    """Scan a validated sequence and return a fresh, frozen registry.

    Pure function of its arguments: repeated calls return equal records.
    """
    scanner = GeneScanner(
        sequence,
        start_codon=start_codon,
        stop_codons=stop_codons,
        initial_capacity=initial_capacity,
    )
    return scanner.scan()
