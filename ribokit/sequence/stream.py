"""
Lazy, single-pass nucleotide streams.

Input may be a string, a file object or any iterable of text chunks.
Each stage is a generator so a sequence is consumed exactly once,
front to back, and validation happens while it is read.
"""

import logging
from itertools import islice
from typing import Iterable, Iterator

from ribokit.code.table import RNA_ALPHABET
from ribokit.exceptions import InvalidNucleotide

logger = logging.getLogger(__name__)


def normalize(
    chunks: Iterable[str],
    alphabet: str = RNA_ALPHABET
) -> Iterator[str]:
    """
    Uppercase, strip whitespace and validate a nucleotide stream.

    Args:
        chunks: String, file object or iterable of text chunks
        alphabet: Permitted nucleotide letters (uppercase)

    Yields:
        Single uppercase nucleotides

    Raises:
        InvalidNucleotide: On the first character outside the alphabet,
            with its 0-based position in the raw input

    Example:
        >>> "".join(normalize("aug\\ngcc"))
        'AUGGCC'
    """
    position = 0
    for chunk in chunks:
        for char in chunk:
            if not char.isspace():
                nucleotide = char.upper()
                if nucleotide not in alphabet:
                    raise InvalidNucleotide(char, position)
                yield nucleotide
            position += 1


def skip(nucleotides: Iterable[str], offset: int) -> Iterator[str]:
    """Drop the first `offset` nucleotides."""
    return islice(nucleotides, offset, None)


def transcribe(nucleotides: Iterable[str]) -> Iterator[str]:
    """Replace thymine with uracil (DNA -> RNA), lazily."""
    for nucleotide in nucleotides:
        yield "U" if nucleotide == "T" else nucleotide


def codons(nucleotides: Iterable[str]) -> Iterator[str]:
    """
    Group a nucleotide stream into consecutive, non-overlapping codons.

    A trailing window of one or two nucleotides cannot form a codon
    and is dropped.

    Example:
        >>> list(codons("AUGGCCUA"))
        ['AUG', 'GCC']
    """
    window = []
    for nucleotide in nucleotides:
        window.append(nucleotide)
        if len(window) == 3:
            yield "".join(window)
            window = []

    if window:
        logger.debug("Dropped %d trailing nucleotide(s): %s", len(window), "".join(window))
