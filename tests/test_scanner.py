"""Unit tests for genescan.core.scanner module.

Tests cover:
- Single and multiple gene detection
- In-frame stop matching
- Overlapping records from the no-skip outer scan
- Unterminated start codons
- Scan bounds near the sequence end
"""

import pytest

from genescan.core.registry import GeneRecord
from genescan.core.scanner import GeneScanner, scan_genes


def _pairs(sequence: str, **kwargs) -> list[tuple[int, int | None]]:
    return [(r.start, r.stop) for r in scan_genes(sequence, **kwargs)]


class TestScanGenes:
    """Tests for scan_genes function."""

    def test_minimal_gene(self) -> None:
        assert _pairs("atgtaa") == [(0, 3)]

    def test_gene_with_body(self) -> None:
        assert _pairs("atgccctga") == [(0, 6)]

    def test_two_genes(self, two_gene_sequence: str) -> None:
        assert _pairs(two_gene_sequence) == [(0, 3), (10, 13)]

    def test_overlapping_starts(self) -> None:
        """A start inside an open gene opens its own record."""
        assert _pairs("atgatgtaa") == [(0, 6), (3, 6)]

    def test_start_inside_closed_gene(self) -> None:
        """Starts inside an already closed gene still open records."""
        # atg at 0 closes at 9; atg at 4 is in a different frame
        seq = "atgcatgcctaagtaa"
        assert _pairs(seq) == [(0, 9), (4, 13)]

    def test_out_of_frame_stop_ignored(self) -> None:
        """Stop codons not in frame with the start are skipped."""
        # "taa" at 4 is out of frame; "tga" at 9 is in frame
        assert _pairs("atgctaacctga") == [(0, 9)]

    def test_nearest_stop_wins(self) -> None:
        assert _pairs("atgtaatagtga") == [(0, 3)]

    @pytest.mark.parametrize("stop", ["tga", "taa", "tag"])
    def test_each_stop_codon(self, stop: str) -> None:
        assert _pairs("atgccc" + stop) == [(0, 6)]

    def test_unterminated_start(self) -> None:
        assert _pairs("atgcccccc") == [(0, None)]

    def test_partial_trailing_codon(self) -> None:
        """A stop codon truncated by the sequence end is not matched."""
        assert _pairs("atgcccta") == [(0, None)]

    def test_start_too_close_to_end(self) -> None:
        """A start codon with no room for a following codon is not opened."""
        assert _pairs("cccatgta") == []
        assert _pairs("ccatgtaa") == [(2, 5)]

    def test_no_start(self) -> None:
        assert _pairs("cccgggtaa") == []

    @pytest.mark.parametrize("sequence", ["", "a", "atg", "atgta"])
    def test_short_sequences(self, sequence: str) -> None:
        assert _pairs(sequence) == []

    def test_custom_codons(self) -> None:
        assert _pairs("gtgagg", start_codon="gtg", stop_codons={"agg"}) == [(0, 3)]

    def test_ascending_start_order(self, random_sequence: str) -> None:
        starts = [r.start for r in scan_genes(random_sequence)]
        assert starts == sorted(starts)
        assert len(starts) == len(set(starts))

    def test_records_are_consistent(self, random_sequence: str) -> None:
        """Every terminated record spans a start, in-frame body and stop."""
        for record in scan_genes(random_sequence):
            assert random_sequence[record.start : record.start + 3] == "atg"
            if record.stop is not None:
                assert (record.stop - record.start) % 3 == 0
                assert random_sequence[record.stop : record.stop + 3] in {"tga", "taa", "tag"}

    def test_idempotent(self, random_sequence: str) -> None:
        """Repeated scans give equal record sequences."""
        first = list(scan_genes(random_sequence))
        second = list(scan_genes(random_sequence))
        assert first == second

    def test_fresh_registry_each_call(self) -> None:
        assert scan_genes("atgtaa") is not scan_genes("atgtaa")

    def test_growth_beyond_capacity(self) -> None:
        """Many genes with a tiny initial capacity keep their order."""
        sequence = "atgtaa" * 50
        registry = scan_genes(sequence, initial_capacity=1)
        assert registry.count() == 50
        assert [r.start for r in registry] == list(range(0, 300, 6))


class TestGeneScanner:
    """Tests for GeneScanner class."""

    def test_registry_frozen_after_scan(self) -> None:
        scanner = GeneScanner("atgtaa")
        registry = scanner.scan()
        assert registry.frozen
        assert list(registry) == [GeneRecord(0, 3)]

    def test_scan_twice_returns_same_registry(self) -> None:
        scanner = GeneScanner("atgtaa")
        assert scanner.scan() is scanner.scan()
        assert scanner.registry.count() == 1

    def test_initial_capacity(self) -> None:
        scanner = GeneScanner("atgtaa", initial_capacity=4)
        assert scanner.registry.capacity == 4
