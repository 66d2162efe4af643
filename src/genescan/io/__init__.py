"""Input handlers for genescan.

- Raw sequence files (single read, length-checked)
- FASTA files (via pyfaidx)

Example:
    >>> from genescan.io import read_sequence
    >>> seq = read_sequence("genome.txt")
"""

from genescan.io.sequence import iter_fasta_records, read_sequence

__all__: list[str] = [
    "iter_fasta_records",
    "read_sequence",
]
