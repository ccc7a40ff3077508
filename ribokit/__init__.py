"""
ribokit: Genetic-code translation for mRNA sequences

This package provides tools for:
- The amino acid catalog and genetic code variants
  (universal, mitochondrial, SECIS selenocysteine recoding)
- Codon tables and per-codon translation units
- Streaming mRNA/DNA -> protein translation with reading frames
- FASTA and plain sequence file I/O
- Numeric codon encodings on NumPy
"""

__version__ = "0.1.0"
__author__ = "ribokit Contributors"

from ribokit.code import (
    AminoAcid,
    all_amino_acids,
    GeneticCode,
    TranslationUnit,
    resolve,
    build_table,
    all_codons,
)

from ribokit.translation import (
    ReadingFrame,
    translate,
    translate_dna,
    translate_frames,
    iter_translation,
    translate_file,
    translate_fasta,
)

from ribokit.io import (
    read_fasta,
    write_fasta,
    FastaRecord,
)

from ribokit.sequence import (
    codon_index,
    codon_usage,
)

from ribokit.exceptions import (
    RibokitError,
    InvalidNucleotide,
    InvalidCodon,
    UnknownAminoAcid,
)

__all__ = [
    # Genetic code
    "AminoAcid",
    "all_amino_acids",
    "GeneticCode",
    "TranslationUnit",
    "resolve",
    "build_table",
    "all_codons",
    # Translation
    "ReadingFrame",
    "translate",
    "translate_dna",
    "translate_frames",
    "iter_translation",
    "translate_file",
    "translate_fasta",
    # I/O
    "read_fasta",
    "write_fasta",
    "FastaRecord",
    # Encoding
    "codon_index",
    "codon_usage",
    # Errors
    "RibokitError",
    "InvalidNucleotide",
    "InvalidCodon",
    "UnknownAminoAcid",
]
