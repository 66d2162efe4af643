"""genescan: find start/stop codon delimited genes in base sequences.

genescan scans a lowercase ``acgt`` sequence for regions that open with the
start codon ``atg`` and close with the nearest in-frame stop codon
(``tga``, ``taa``, ``tag``), and reports the bases of every such region.

Example:
    >>> import genescan
    >>> result = genescan.find_genes("atgtaaccccatgtag")
    >>> list(result.iterate())
    ['atgtaa', 'atgtag']

Modules:
    core: Validation, codon matching, scanning, registry, extraction
    io: Raw and FASTA sequence input
    config: Configuration management
    utils: Logging utilities
"""

__version__ = "0.1.0"

from genescan.core import (
    ConfigurationError,
    GeneExtractor,
    GeneRecord,
    GeneRegistry,
    GeneScanError,
    GeneScanner,
    InvalidBaseError,
    ReadError,
    UnterminatedGeneWarning,
    scan_genes,
)
from genescan.core.pipeline import ScanResult, find_genes

__all__ = [
    "__version__",
    "ConfigurationError",
    "GeneExtractor",
    "GeneRecord",
    "GeneRegistry",
    "GeneScanError",
    "GeneScanner",
    "InvalidBaseError",
    "ReadError",
    "ScanResult",
    "UnterminatedGeneWarning",
    "find_genes",
    "scan_genes",
]
