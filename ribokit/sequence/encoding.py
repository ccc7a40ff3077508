"""
Numeric codon encodings.

Codon-level counterparts of k-mer encoding: a sequence is read in a
reading frame and each codon is mapped to its index in `all_codons`.
"""

import numpy as np

from ribokit.code.table import RNA_ALPHABET, all_codons
from ribokit.sequence.stream import codons, normalize, skip


def codon_index(
    sequence: str,
    frame: int = 0,
    alphabet: str = RNA_ALPHABET
) -> np.ndarray:
    """
    Encode a sequence as codon indices.

    Args:
        sequence: Nucleotide sequence over `alphabet`
        frame: Reading frame offset (0, 1 or 2)
        alphabet: Nucleotide alphabet, fixes the index order

    Returns:
        numpy array of shape (num_codons,) with values in [0, 64)

    Raises:
        InvalidNucleotide: If the sequence has characters outside `alphabet`

    Example:
        >>> codon_index("AAAAAC")
        array([0, 1], dtype=int32)
    """
    codon_to_idx = {codon: i for i, codon in enumerate(all_codons(alphabet))}
    stream = codons(skip(normalize(sequence, alphabet), frame))
    return np.fromiter(
        (codon_to_idx[codon] for codon in stream),
        dtype=np.int32
    )


def codon_usage(
    sequence: str,
    frame: int = 0,
    frequencies: bool = True,
    alphabet: str = RNA_ALPHABET
) -> np.ndarray:
    """
    Count codon occurrences in one reading frame.

    Args:
        sequence: Nucleotide sequence
        frame: Reading frame offset
        frequencies: If True, return frequencies; if False, return counts
        alphabet: Nucleotide alphabet

    Returns:
        numpy array of shape (64,) in `all_codons(alphabet)` order
    """
    counts = np.bincount(
        codon_index(sequence, frame, alphabet),
        minlength=64
    ).astype(np.float32)

    if frequencies and counts.sum() > 0:
        counts /= counts.sum()

    return counts
