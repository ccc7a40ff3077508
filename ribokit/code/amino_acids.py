"""
The amino acid catalog.

Each member carries its display name, three-letter abbreviation,
one-letter symbol and the codons assigned to it by the universal
(standard) genetic code. Member order is fixed and is the tie-break
order used when resolving codons against a genetic code.
"""

from enum import Enum
from typing import FrozenSet, Tuple

from ribokit.exceptions import UnknownAminoAcid

# Canonical stop codons of the universal code
STOP_CODONS = frozenset({"UAA", "UAG", "UGA"})


class AminoAcid(Enum):
    """The 20 standard amino acids plus selenocysteine."""

    ALA = ("L-Alanine", "Ala", "A", ("GCU", "GCC", "GCA", "GCG"))
    ARG = ("L-Arginine", "Arg", "R", ("CGU", "CGC", "CGA", "CGG", "AGA", "AGG"))
    ASN = ("L-Asparagine", "Asn", "N", ("AAU", "AAC"))
    ASP = ("L-Aspartic acid", "Asp", "D", ("GAU", "GAC"))
    CYS = ("L-Cysteine", "Cys", "C", ("UGU", "UGC"))
    GLU = ("L-Glutamic acid", "Glu", "E", ("GAA", "GAG"))
    GLN = ("L-Glutamine", "Gln", "Q", ("CAA", "CAG"))
    GLY = ("Glycine", "Gly", "G", ("GGU", "GGC", "GGA", "GGG"))
    HIS = ("L-Histidine", "His", "H", ("CAU", "CAC"))
    ILE = ("L-Isoleucine", "Ile", "I", ("AUU", "AUC", "AUA"))
    LEU = ("L-Leucine", "Leu", "L", ("UUA", "UUG", "CUU", "CUC", "CUA", "CUG"))
    LYS = ("L-Lysine", "Lys", "K", ("AAA", "AAG"))
    MET = ("L-Methionine", "Met", "M", ("AUG",))
    PHE = ("L-Phenylalanine", "Phe", "F", ("UUU", "UUC"))
    PRO = ("L-Proline", "Pro", "P", ("CCU", "CCC", "CCA", "CCG"))
    # UGA only reaches SEC through a code that recodes it
    SEC = ("L-Selenocysteine", "Sec", "U", ("UGA",))
    SER = ("L-Serine", "Ser", "S", ("UCU", "UCC", "UCA", "UCG", "AGU", "AGC"))
    THR = ("L-Threonine", "Thr", "T", ("ACU", "ACC", "ACA", "ACG"))
    TRP = ("L-Tryptophan", "Trp", "W", ("UGG",))
    TYR = ("L-Tyrosine", "Tyr", "Y", ("UAU", "UAC"))
    VAL = ("L-Valine", "Val", "V", ("GUU", "GUC", "GUA", "GUG"))

    def __init__(self, full_name: str, abbreviation: str, letter: str, codons: Tuple[str, ...]):
        self.full_name = full_name
        self.abbreviation = abbreviation
        self.letter = letter
        self.universal_codons: FrozenSet[str] = frozenset(codons)

    def __repr__(self) -> str:
        return f"<AminoAcid.{self.name}: {self.abbreviation}/{self.letter}>"

    @classmethod
    def from_letter(cls, letter: str) -> "AminoAcid":
        """Look up an amino acid by its one-letter symbol (case-insensitive)."""
        key = letter.upper()
        for amino_acid in cls:
            if amino_acid.letter == key:
                return amino_acid
        raise UnknownAminoAcid(letter)

    @classmethod
    def from_abbreviation(cls, abbreviation: str) -> "AminoAcid":
        """Look up an amino acid by its three-letter abbreviation."""
        key = abbreviation.capitalize()
        for amino_acid in cls:
            if amino_acid.abbreviation == key:
                return amino_acid
        raise UnknownAminoAcid(abbreviation)


def all_amino_acids() -> Tuple[AminoAcid, ...]:
    """Return the full catalog in its fixed resolution order."""
    return tuple(AminoAcid)
