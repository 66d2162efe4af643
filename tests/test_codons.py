"""Unit tests for genescan.core.codons module."""

import pytest

from genescan.core.codons import (
    START_CODON,
    STOP_CODONS,
    codon_at,
    is_start_codon,
    is_stop_codon,
)


class TestConstants:
    """Tests for codon constants."""

    def test_start_codon(self) -> None:
        assert START_CODON == "atg"

    def test_stop_codons(self) -> None:
        """Three distinct stop codons."""
        assert set(STOP_CODONS) == {"tga", "taa", "tag"}
        assert len(set(STOP_CODONS)) == 3


class TestIsStartCodon:
    """Tests for is_start_codon function."""

    def test_at_zero(self) -> None:
        assert is_start_codon("atgccc", 0)

    def test_at_offset(self) -> None:
        assert is_start_codon("ccatgc", 2)
        assert not is_start_codon("ccatgc", 1)
        assert not is_start_codon("ccatgc", 3)

    @pytest.mark.parametrize("codon", ["atc", "gtg", "ttg", "aaa", "tga"])
    def test_non_start(self, codon: str) -> None:
        assert not is_start_codon(codon, 0)

    def test_only_triplet_is_compared(self) -> None:
        """Bases after the triplet don't matter."""
        assert is_start_codon("atgatg", 3)

    def test_custom_start(self) -> None:
        assert is_start_codon("gtg", 0, start="gtg")
        assert not is_start_codon("atg", 0, start="gtg")


class TestIsStopCodon:
    """Tests for is_stop_codon function."""

    @pytest.mark.parametrize("codon", ["tga", "taa", "tag"])
    def test_stop(self, codon: str) -> None:
        assert is_stop_codon("cc" + codon, 2)

    @pytest.mark.parametrize("codon", ["tgg", "tac", "aga", "atg", "ttt"])
    def test_non_stop(self, codon: str) -> None:
        assert not is_stop_codon(codon, 0)

    def test_custom_stops(self) -> None:
        assert is_stop_codon("aga", 0, stops={"aga"})
        assert not is_stop_codon("tga", 0, stops={"aga"})


def test_codon_at() -> None:
    """codon_at returns the triplet at an offset."""
    assert codon_at("atgtaa", 3) == "taa"
