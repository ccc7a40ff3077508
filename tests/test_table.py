"""Tests for codon table construction."""

import logging

import pytest

from ribokit.code import (
    AminoAcid,
    GeneticCode,
    all_codons,
    build_table,
    sense_codons,
    stop_codons,
    table_symbols,
    DNA_ALPHABET,
    RNA_ALPHABET,
)


@pytest.mark.parametrize("code", list(GeneticCode))
def test_table_is_complete(code):
    table = build_table(code)
    assert len(table) == 64
    assert set(table) == set(all_codons(RNA_ALPHABET))
    for codon, unit in table.items():
        assert unit.codon == codon
        assert len(codon) == 3 and set(codon) <= set("ACGU")


@pytest.mark.parametrize("code", list(GeneticCode))
def test_every_codon_is_carrier_or_release(code):
    for unit in build_table(code).values():
        if unit.is_release:
            assert unit.amino_acid is None
            assert unit.symbol == "*"
        else:
            assert isinstance(unit.amino_acid, AminoAcid)
            assert unit.symbol == unit.amino_acid.letter


@pytest.mark.parametrize("code,expected", [
    (GeneticCode.UNIVERSAL, ["UAA", "UAG", "UGA"]),
    (GeneticCode.MITOCHONDRIAL, ["AGA", "AGG", "UAA", "UAG"]),
    (GeneticCode.SECIS, ["UAA", "UAG"]),
])
def test_stop_codons(code, expected):
    assert sorted(stop_codons(code)) == expected
    assert len(sense_codons(code)) == 64 - len(expected)


def test_rebuilding_is_structurally_identical():
    first = build_table(GeneticCode.MITOCHONDRIAL)
    second = build_table(GeneticCode.MITOCHONDRIAL)
    assert first == second
    assert first is not second


def test_tables_do_not_alias():
    universal = build_table(GeneticCode.UNIVERSAL)
    secis = build_table(GeneticCode.SECIS)
    secis["UGA"] = universal["UGA"]
    assert build_table(GeneticCode.SECIS)["UGA"].symbol == "U"
    assert universal["UGA"].is_release


def test_table_symbols():
    symbols = table_symbols(build_table(GeneticCode.UNIVERSAL))
    assert symbols["AUG"] == "M"
    assert symbols["UGG"] == "W"
    assert symbols["UAG"] == "*"
    assert "".join(sorted(set(symbols.values()) - {"*"})) == "ACDEFGHIKLMNPQRSTVWY"


def test_dna_alphabet_table():
    table = build_table(GeneticCode.MITOCHONDRIAL, DNA_ALPHABET)
    assert len(table) == 64
    assert table["ATG"].symbol == "M"
    assert table["ATG"].codon == "ATG"
    assert table["TGA"].symbol == "W"
    assert table["AGA"].is_release
    assert sorted(stop_codons(GeneticCode.UNIVERSAL, DNA_ALPHABET)) == ["TAA", "TAG", "TGA"]


def test_unsupported_alphabet():
    with pytest.raises(ValueError, match="Unsupported alphabet"):
        build_table(GeneticCode.UNIVERSAL, "ACGN")


def test_build_logs_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="ribokit.code.table")
    build_table(GeneticCode.SECIS)
    assert "secis" in caplog.text
    assert "2 stops" in caplog.text
