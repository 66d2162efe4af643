"""Tests for genescan.core.pipeline module."""

import pytest

import genescan
from genescan.config import ScanConfig
from genescan.core.exceptions import InvalidBaseError
from genescan.core.pipeline import ScanResult, find_genes


class TestFindGenes:
    """Tests for the find_genes pipeline."""

    def test_two_genes(self, two_gene_sequence: str) -> None:
        result = find_genes(two_gene_sequence)
        assert isinstance(result, ScanResult)
        assert result.count() == 2
        assert list(result.iterate()) == ["atgtaa", "atgtag"]

    def test_overlap(self) -> None:
        result = find_genes("atgatgtaa")
        assert [(g.start, g.stop) for g in result.genes()] == [(0, 6), (3, 6)]

    def test_invalid_base_aborts(self) -> None:
        """Nothing is scanned for an invalid sequence."""
        with pytest.raises(InvalidBaseError) as exc_info:
            find_genes("atgtaaXatgtag")
        assert exc_info.value.offset == 6

    def test_custom_config(self) -> None:
        config = ScanConfig(alphabet="ACGT", start_codon="ATG", stop_codons=("TAA",))
        result = find_genes("ATGTAGTAA", config)
        assert list(result.iterate()) == ["ATGTAGTAA"]

    def test_config_capacity(self) -> None:
        result = find_genes("atgtaa" * 10, ScanConfig(initial_capacity=3))
        assert result.count() == 10
        assert result.registry.capacity == 12

    def test_registry_read_only(self) -> None:
        result = find_genes("atgtaa")
        assert result.registry.frozen

    def test_empty_sequence(self) -> None:
        result = find_genes("")
        assert result.count() == 0
        assert list(result.iterate()) == []

    def test_top_level_export(self) -> None:
        assert genescan.find_genes is find_genes
        assert genescan.__version__ == "0.1.0"
