"""
Genetic code model.

This subpackage provides:
- The amino acid catalog
- Genetic code variants and their codon exceptions
- Translation units and codon resolution
- Codon table construction
"""

from ribokit.code.amino_acids import (
    AminoAcid,
    all_amino_acids,
    STOP_CODONS,
)

from ribokit.code.variants import (
    GeneticCode,
    assigns,
    CODON_EXCEPTIONS,
)

from ribokit.code.units import (
    TranslationUnit,
    resolve,
    validate_codon,
    RIBONUCLEOTIDES,
    STOP_SYMBOL,
)

from ribokit.code.table import (
    build_table,
    all_codons,
    table_symbols,
    stop_codons,
    sense_codons,
    CodonTable,
    RNA_ALPHABET,
    DNA_ALPHABET,
)

__all__ = [
    # Catalog
    "AminoAcid",
    "all_amino_acids",
    "STOP_CODONS",
    # Variants
    "GeneticCode",
    "assigns",
    "CODON_EXCEPTIONS",
    # Units
    "TranslationUnit",
    "resolve",
    "validate_codon",
    "RIBONUCLEOTIDES",
    "STOP_SYMBOL",
    # Tables
    "build_table",
    "all_codons",
    "table_symbols",
    "stop_codons",
    "sense_codons",
    "CodonTable",
    "RNA_ALPHABET",
    "DNA_ALPHABET",
]
