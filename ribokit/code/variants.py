"""
Genetic code variants.

A variant decides whether a codon is assigned to a given amino acid.
Variants differ from the universal code only by a handful of codon
exceptions, kept here as plain tables and applied by a single
dispatch function.
"""

from enum import Enum
from typing import Dict, Optional

from ribokit.code.amino_acids import AminoAcid


class GeneticCode(Enum):
    """Named codon-assignment rule sets."""

    UNIVERSAL = "universal"
    MITOCHONDRIAL = "mitochondrial"
    SECIS = "secis"

    def assigns(self, codon: str, amino_acid: AminoAcid) -> bool:
        """Is `codon` assigned to `amino_acid` under this code?"""
        return assigns(self, codon, amino_acid)

    @classmethod
    def parse(cls, name: str) -> "GeneticCode":
        """
        Resolve a genetic code from a user-supplied name.

        Accepts member names and values in any case plus the aliases
        "standard" and "mito".

        Example:
            >>> GeneticCode.parse("Mito")
            <GeneticCode.MITOCHONDRIAL: 'mitochondrial'>
        """
        key = name.strip().lower()
        key = _ALIASES.get(key, key)
        for code in cls:
            if code.value == key:
                return code
        valid = sorted([c.value for c in cls] + list(_ALIASES))
        raise ValueError(f"Unknown genetic code: {name!r}. Valid: {valid}")


_ALIASES = {
    "standard": "universal",
    "mito": "mitochondrial",
}

# Codon exceptions per code. A codon mapped to None is never assigned
# (a forced stop); a codon mapped to an amino acid is assigned to it alone.
CODON_EXCEPTIONS: Dict[GeneticCode, Dict[str, Optional[AminoAcid]]] = {
    GeneticCode.UNIVERSAL: {
        "UGA": None,
    },
    GeneticCode.MITOCHONDRIAL: {
        "AGA": None,
        "AGG": None,
        "UGA": AminoAcid.TRP,
        "AUA": AminoAcid.MET,
    },
    GeneticCode.SECIS: {
        "UGA": AminoAcid.SEC,
    },
}


def assigns(code: GeneticCode, codon: str, amino_acid: AminoAcid) -> bool:
    """
    Decide whether `codon` encodes `amino_acid` under `code`.

    Codons listed in the code's exception table are decided by that
    table; every other codon falls back to the universal assignment.
    The predicate is total over uppercase ribonucleotide codons and does
    no validation of its own.

    Args:
        code: Genetic code variant
        codon: Uppercase three-letter RNA codon
        amino_acid: Candidate amino acid

    Returns:
        True if the codon is assigned to the amino acid

    Example:
        >>> assigns(GeneticCode.UNIVERSAL, "UGA", AminoAcid.SEC)
        False
        >>> assigns(GeneticCode.SECIS, "UGA", AminoAcid.SEC)
        True
    """
    exceptions = CODON_EXCEPTIONS[code]
    if codon in exceptions:
        return exceptions[codon] is amino_acid
    return codon in amino_acid.universal_codons
