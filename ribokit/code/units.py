"""
Translation units: what the ribosome pairs with each codon.

A unit is either a carrier (tRNA-like, bound to one amino acid) or a
release unit (stop signal, no amino acid). Both shapes share one
frozen dataclass; `amino_acid is None` marks a release unit.
"""

from dataclasses import dataclass
from typing import Optional

from ribokit.code.amino_acids import AminoAcid, all_amino_acids
from ribokit.code.variants import GeneticCode
from ribokit.exceptions import InvalidCodon

RIBONUCLEOTIDES = "ACGU"
STOP_SYMBOL = "*"


@dataclass(frozen=True)
class TranslationUnit:
    """
    The classification of a single codon under a genetic code.

    Attributes:
        codon: Three-letter codon this unit pairs with
        amino_acid: Carried amino acid, or None for a release unit
    """
    codon: str
    amino_acid: Optional[AminoAcid] = None

    @classmethod
    def carrier(cls, codon: str, amino_acid: AminoAcid) -> "TranslationUnit":
        return cls(codon, amino_acid)

    @classmethod
    def release(cls, codon: str) -> "TranslationUnit":
        return cls(codon, None)

    @property
    def is_release(self) -> bool:
        return self.amino_acid is None

    @property
    def symbol(self) -> str:
        """One-letter amino acid symbol, or '*' for a release unit."""
        if self.amino_acid is None:
            return STOP_SYMBOL
        return self.amino_acid.letter

    def __str__(self) -> str:
        return f"{self.codon}->{self.symbol}"


def validate_codon(codon: str) -> str:
    """Uppercase a codon and check it is three ribonucleotides."""
    normalized = codon.upper()
    if len(normalized) != 3:
        raise InvalidCodon(codon)
    for nucleotide in normalized:
        if nucleotide not in RIBONUCLEOTIDES:
            raise InvalidCodon(codon, nucleotide)
    return normalized


def resolve(codon: str, code: GeneticCode) -> TranslationUnit:
    """
    Classify a codon under a genetic code.

    The catalog is walked in its fixed order and the first amino acid
    the code assigns the codon to wins. No match means a stop codon.

    Args:
        codon: Three-letter RNA codon (any case)
        code: Genetic code variant

    Returns:
        A carrier unit, or a release unit for stop codons

    Raises:
        InvalidCodon: If the codon is not three of A, C, G, U

    Example:
        >>> resolve("aug", GeneticCode.UNIVERSAL).symbol
        'M'
        >>> resolve("UGA", GeneticCode.UNIVERSAL).is_release
        True
    """
    codon = validate_codon(codon)
    for amino_acid in all_amino_acids():
        if code.assigns(codon, amino_acid):
            return TranslationUnit.carrier(codon, amino_acid)
    return TranslationUnit.release(codon)
