"""
Codon table construction.

A codon table maps each of the 64 codons over a four-letter alphabet
to its translation unit under one genetic code. Tables are built fresh
on every call and are never cached or shared between codes.
"""

import logging
from itertools import product
from typing import Dict, List

from ribokit.code.units import TranslationUnit, resolve
from ribokit.code.variants import GeneticCode

logger = logging.getLogger(__name__)

RNA_ALPHABET = "ACGU"
DNA_ALPHABET = "ACGT"

CodonTable = Dict[str, TranslationUnit]


def all_codons(alphabet: str = RNA_ALPHABET) -> List[str]:
    """
    Generate all 64 codons over an alphabet.

    Order is first letter outermost, third letter innermost.

    Example:
        >>> all_codons()[:3]
        ['AAA', 'AAC', 'AAG']
    """
    return ["".join(codon) for codon in product(alphabet, repeat=3)]


def build_table(
    code: GeneticCode = GeneticCode.UNIVERSAL,
    alphabet: str = RNA_ALPHABET
) -> CodonTable:
    """
    Build the codon table of a genetic code.

    Args:
        code: Genetic code variant
        alphabet: RNA_ALPHABET, or DNA_ALPHABET for tables keyed by
            DNA codons (resolved through their transcribed RNA codon)

    Returns:
        New dictionary of 64 codons to translation units

    Example:
        >>> table = build_table(GeneticCode.SECIS)
        >>> table["UGA"].symbol
        'U'
    """
    if alphabet not in (RNA_ALPHABET, DNA_ALPHABET):
        raise ValueError(f"Unsupported alphabet: {alphabet!r}")

    table: CodonTable = {}
    for codon in all_codons(alphabet):
        unit = resolve(codon.replace("T", "U"), code)
        if unit.codon != codon:
            unit = TranslationUnit(codon, unit.amino_acid)
        table[codon] = unit

    logger.debug(
        "Built %s codon table over %s: %d codons, %d stops",
        code.value, alphabet, len(table),
        sum(unit.is_release for unit in table.values())
    )
    return table


def table_symbols(table: CodonTable) -> Dict[str, str]:
    """Flatten a codon table to codon -> one-letter symbol."""
    return {codon: unit.symbol for codon, unit in table.items()}


def stop_codons(code: GeneticCode, alphabet: str = RNA_ALPHABET) -> List[str]:
    """Codons that act as release signals under a code."""
    return [c for c, unit in build_table(code, alphabet).items() if unit.is_release]


def sense_codons(code: GeneticCode, alphabet: str = RNA_ALPHABET) -> List[str]:
    """Codons that carry an amino acid under a code."""
    return [c for c, unit in build_table(code, alphabet).items() if not unit.is_release]
