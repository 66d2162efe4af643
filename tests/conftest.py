"""Pytest configuration and shared fixtures for genescan tests.

Fixtures are organized by category:

- Sequence fixtures: Small hand-built sequences with known genes
- File fixtures: Raw and FASTA files written to tmp_path
"""

import random
from pathlib import Path

import pytest


# =============================================================================
# Sequence Fixtures
# =============================================================================


@pytest.fixture
def two_gene_sequence() -> str:
    """Two non-overlapping genes: (0, 3) and (10, 13)."""
    return "atgtaaccccatgtag"


@pytest.fixture
def random_sequence() -> str:
    """Reproducible random 2 kb sequence."""
    rng = random.Random(42)
    return "".join(rng.choice("acgt") for _ in range(2000))


# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def raw_sequence_file(tmp_path: Path, two_gene_sequence: str) -> Path:
    """Raw sequence file with a trailing newline."""
    path = tmp_path / "genome.txt"
    path.write_text(two_gene_sequence + "\n")
    return path


@pytest.fixture
def invalid_sequence_file(tmp_path: Path) -> Path:
    """Raw sequence file with an invalid base at position 4."""
    path = tmp_path / "invalid.txt"
    path.write_text("atgtNaccc")
    return path


@pytest.fixture
def synthetic_fasta(tmp_path: Path) -> Path:
    """FASTA file with two records.

    - seq1: two genes (atgtaa, atgtag)
    - seq2: one gene (atgccctga), written across two lines
    """
    fasta_path = tmp_path / "genome.fa"
    with open(fasta_path, "w") as f:
        f.write(">seq1\n")
        f.write("atgtaaccccatgtag\n")
        f.write(">seq2\n")
        f.write("ggatgcc\n")
        f.write("ctgagg\n")
    return fasta_path
