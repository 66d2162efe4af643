"""Start and stop codon predicates.

Codons are never materialized; they are addressed by the offset of their
first base. Both predicates assume ``i + 2`` is a valid index, so callers
are responsible for bounds.

Example:
    >>> from genescan.core.codons import is_start_codon, is_stop_codon
    >>> is_start_codon("ccatg", 2)
    True
    >>> is_stop_codon("atgtag", 3)
    True
"""

from __future__ import annotations

from collections.abc import Collection

# =============================================================================
# Constants
# =============================================================================

CODON_LENGTH = 3

START_CODON = "atg"

STOP_CODONS = ("tga", "taa", "tag")


# =============================================================================
# Predicates
# =============================================================================


def codon_at(sequence: str, i: int) -> str:
    """Return the triplet starting at offset ``i``."""
    return sequence[i : i + CODON_LENGTH]


def is_start_codon(sequence: str, i: int, start: str = START_CODON) -> bool:
    """Check whether ``sequence[i:i+3]`` is the start codon.

    Args:
        sequence: Validated base sequence.
        i: Offset of the first base; ``i + 2`` must be in range.
        start: Start codon to match.

    Returns:
        True if the triplet at ``i`` is the start codon.
    """
    return sequence.startswith(start, i, i + CODON_LENGTH)


def is_stop_codon(
    sequence: str,
    i: int,
    stops: Collection[str] = STOP_CODONS,
) -> bool:
    """Check whether ``sequence[i:i+3]`` is any accepted stop codon.

    Args:
        sequence: Validated base sequence.
        i: Offset of the first base; ``i + 2`` must be in range.
        stops: Accepted stop codons.

    Returns:
        True if the triplet at ``i`` is one of ``stops``.
    """
    return codon_at(sequence, i) in stops
