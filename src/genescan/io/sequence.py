"""Sequence input for genescan.

Two input shapes are supported:

- Raw files holding a single base sequence, read in one operation and
  checked against the size on disk.
- FASTA files, read through pyfaidx with case preserved.

Example:
    >>> from genescan.io.sequence import read_sequence, iter_fasta_records
    >>> seq = read_sequence("genome.txt")
    >>> for name, seq in iter_fasta_records("genome.fa"):
    ...     print(name, len(seq))
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pyfaidx

from genescan.core.exceptions import ReadError

logger = logging.getLogger(__name__)

LINE_ENDINGS = "\r\n"


def read_sequence(path: Path | str, strip_line_endings: bool = True) -> str:
    """Read a raw sequence file in a single read.

    Args:
        path: File containing the bases and nothing else.
        strip_line_endings: Remove trailing ``\\r``/``\\n`` after reading.

    Returns:
        The sequence text.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ReadError: If fewer characters were read than the file size.
    """
    path = Path(path)
    expected = path.stat().st_size

    # newline="" keeps \r\n intact so character and byte counts agree
    with open(path, encoding="utf-8", errors="replace", newline="") as f:
        text = f.read(expected)

    if len(text) != expected:
        raise ReadError(path, expected, len(text))

    if strip_line_endings:
        text = text.rstrip(LINE_ENDINGS)

    logger.debug(f"Read {len(text):,} characters from {path.name}")
    return text


def iter_fasta_records(path: Path | str) -> Iterator[tuple[str, str]]:
    """Iterate over (name, sequence) pairs of a FASTA file.

    Case is preserved, so soft-masked (lowercase) genomes scan as-is.

    Args:
        path: FASTA file. A .fai index is created next to it if missing.

    Yields:
        Tuples of record name and full sequence.

    Raises:
        FileNotFoundError: If the file doesn't exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"FASTA file not found: {path}")

    fasta = pyfaidx.Fasta(str(path), sequence_always_upper=False, as_raw=True)
    try:
        logger.info(f"Opened FASTA: {path.name}, {len(fasta.keys())} records")
        for name in fasta.keys():
            yield name, fasta[name][:]
    finally:
        fasta.close()
