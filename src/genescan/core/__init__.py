"""Core scanning logic for genescan.

This module contains the gene detection pipeline, leaf-first:

- Alphabet validation
- Codon matching
- Gene registry
- Gene scanning
- Gene extraction

Example:
    >>> from genescan.core import scan_genes, GeneExtractor
    >>> from genescan.core.pipeline import find_genes
"""

from genescan.core.alphabet import BASES, find_invalid_base, validate_bases
from genescan.core.codons import START_CODON, STOP_CODONS, is_start_codon, is_stop_codon
from genescan.core.exceptions import (
    ConfigurationError,
    GeneScanError,
    InvalidBaseError,
    ReadError,
    RegistryFrozenError,
    UnterminatedGeneWarning,
)
from genescan.core.extractor import ExtractedGene, GeneExtractor, UnterminatedPolicy
from genescan.core.registry import GeneRecord, GeneRegistry
from genescan.core.scanner import GeneScanner, scan_genes

__all__: list[str] = [
    # Validation
    "BASES",
    "find_invalid_base",
    "validate_bases",
    # Codons
    "START_CODON",
    "STOP_CODONS",
    "is_start_codon",
    "is_stop_codon",
    # Registry and scanning
    "GeneRecord",
    "GeneRegistry",
    "GeneScanner",
    "scan_genes",
    # Extraction
    "ExtractedGene",
    "GeneExtractor",
    "UnterminatedPolicy",
    # Errors
    "ConfigurationError",
    "GeneScanError",
    "InvalidBaseError",
    "ReadError",
    "RegistryFrozenError",
    "UnterminatedGeneWarning",
]
