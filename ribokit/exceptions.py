"""
Error types raised by ribokit.

Both validation errors derive from ValueError so callers that already
catch ValueError around sequence handling keep working.
"""

from typing import Optional


class RibokitError(Exception):
    """Base class for all ribokit errors."""


class InvalidNucleotide(RibokitError, ValueError):
    """
    A character outside the permitted nucleotide alphabet.

    Attributes:
        character: The offending character
        position: 0-based index in the raw input stream (for sequence
            files, counted over the sequence lines, headers excluded)
    """

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(
            f"Invalid nucleotide '{character}' at position {position}"
        )


class InvalidCodon(RibokitError, ValueError):
    """A codon that is not three ribonucleotide letters."""

    def __init__(self, codon: str, character: Optional[str] = None):
        self.codon = codon
        self.character = character
        if character is None:
            message = f"Invalid codon '{codon}': expected 3 nucleotides, got {len(codon)}"
        else:
            message = f"Invalid codon '{codon}': unknown nucleotide '{character}'"
        super().__init__(message)


class UnknownAminoAcid(RibokitError, KeyError):
    """Lookup of an amino acid by an unrecognised symbol or abbreviation."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown amino acid: {self.key!r}"
