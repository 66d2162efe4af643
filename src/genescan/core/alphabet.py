"""Base alphabet validation.

Runs once over the whole sequence before any scanning. A sequence that fails
here is never scanned.
"""

from __future__ import annotations

import logging

from genescan.core.exceptions import InvalidBaseError

logger = logging.getLogger(__name__)

BASES = "acgt"


def find_invalid_base(sequence: str, alphabet: str = BASES) -> int | None:
    """Find the first symbol that is not an accepted base.

    Args:
        sequence: Sequence to check.
        alphabet: Accepted symbols (case-sensitive).

    Returns:
        Offset of the first invalid symbol, or None if all are valid.
    """
    accepted = frozenset(alphabet)
    for i, symbol in enumerate(sequence):
        if symbol not in accepted:
            return i
    return None


def validate_bases(sequence: str, alphabet: str = BASES) -> None:
    """Raise if the sequence contains a symbol outside ``alphabet``.

    Raises:
        InvalidBaseError: With the offset of the first offending symbol.
    """
    offset = find_invalid_base(sequence, alphabet)
    if offset is not None:
        raise InvalidBaseError(offset, sequence[offset])
    logger.debug(f"Validated {len(sequence):,} bases")
