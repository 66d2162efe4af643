"""One-call gene detection: validate, scan, extract.

Example:
    >>> from genescan.core.pipeline import find_genes
    >>> result = find_genes("atgccctga")
    >>> result.count()
    1
    >>> list(result.iterate())
    ['atgccctga']
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import attrs

from genescan.config import ScanConfig
from genescan.core.alphabet import validate_bases
from genescan.core.extractor import ExtractedGene, GeneExtractor
from genescan.core.registry import GeneRegistry
from genescan.core.scanner import scan_genes

logger = logging.getLogger(__name__)


@attrs.define(frozen=True)
class ScanResult:
    """Outcome of a gene scan over one sequence.

    Attributes:
        sequence: The scanned sequence.
        registry: All records, including unterminated ones.
        extractor: Extractor bound to the sequence and registry.
    """

    sequence: str = attrs.field(repr=False)
    registry: GeneRegistry
    extractor: GeneExtractor = attrs.field(repr=False)

    def count(self) -> int:
        """Number of gene strings."""
        return self.extractor.count()

    def iterate(self) -> Iterator[str]:
        """Gene strings in detection order."""
        return self.extractor.iterate()

    def genes(self) -> Iterator[ExtractedGene]:
        """Genes with their offsets, in detection order."""
        return self.extractor.genes()


def find_genes(sequence: str, config: ScanConfig | None = None) -> ScanResult:
    """Run the full detection pipeline on a sequence.

    Args:
        sequence: Sequence to scan.
        config: Scan configuration; defaults to ``ScanConfig()``.

    Returns:
        ScanResult exposing ``count()`` and ``iterate()``.

    Raises:
        InvalidBaseError: If the sequence contains a non-base symbol. Nothing
            is scanned in that case.
    """
    config = config or ScanConfig()

    validate_bases(sequence, config.alphabet)

    registry = scan_genes(
        sequence,
        start_codon=config.start_codon,
        stop_codons=config.stop_codons,
        initial_capacity=config.initial_capacity,
    )
    extractor = GeneExtractor(sequence, registry, policy=config.unterminated)
    logger.info(f"Found {extractor.count()} genes in {len(sequence):,} bases")
    return ScanResult(sequence=sequence, registry=registry, extractor=extractor)
