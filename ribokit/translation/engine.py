"""
mRNA -> protein translation.

The engine composes the streaming stages of `ribokit.sequence`:
normalize and validate, skip the frame offset, window into codons,
then look each codon up in a codon table built for the call.
"""

import logging
from collections import deque
from typing import Dict, Iterable, Iterator, Union

from ribokit.code.table import DNA_ALPHABET, RNA_ALPHABET, build_table
from ribokit.code.units import TranslationUnit
from ribokit.code.variants import GeneticCode
from ribokit.sequence.stream import codons, normalize, skip, transcribe
from ribokit.translation.frames import ReadingFrame

logger = logging.getLogger(__name__)

DEFAULT_CODE = GeneticCode.UNIVERSAL
DEFAULT_FRAME = ReadingFrame.FIRST

Frame = Union[ReadingFrame, int]


def iter_translation(
    sequence: Iterable[str],
    frame: Frame = DEFAULT_FRAME,
    code: GeneticCode = DEFAULT_CODE,
    stop_at_termination: bool = False,
    dna: bool = False
) -> Iterator[TranslationUnit]:
    """
    Lazily translate a nucleotide stream into translation units.

    Args:
        sequence: String, file object or iterable of text chunks
        frame: Reading frame (ReadingFrame or offset 0-2)
        code: Genetic code variant
        stop_at_termination: Stop emitting at the first release unit; the
            rest of the input is still read and validated
        dna: Accept A/C/G/T input and transcribe it instead of A/C/G/U

    Yields:
        One TranslationUnit per complete codon, in 5' -> 3' order

    Raises:
        InvalidNucleotide: When a character outside the alphabet is read
    """
    frame = ReadingFrame.of(frame)
    table = build_table(code)

    if dna:
        nucleotides = transcribe(normalize(sequence, DNA_ALPHABET))
    else:
        nucleotides = normalize(sequence, RNA_ALPHABET)

    for codon in codons(skip(nucleotides, frame.offset)):
        unit = table[codon]
        if unit.is_release and stop_at_termination:
            logger.debug("Terminated at %s", codon)
            deque(nucleotides, maxlen=0)
            return
        yield unit


def translate(
    sequence: Iterable[str],
    frame: Frame = DEFAULT_FRAME,
    code: GeneticCode = DEFAULT_CODE,
    stop_at_termination: bool = False
) -> str:
    """
    Translate an mRNA sequence to protein.

    Whitespace and line breaks are ignored and case is normalized.
    Trailing nucleotides that do not fill a codon are discarded.

    Args:
        sequence: mRNA sequence, file object or iterable of text chunks
        frame: Reading frame (ReadingFrame or offset 0-2)
        code: Genetic code variant
        stop_at_termination: If True, end at (and exclude) the first stop

    Returns:
        One-letter amino acid symbols, '*' for stop codons

    Raises:
        InvalidNucleotide: On the first character outside A/C/G/U;
            no partial result is returned

    Example:
        >>> translate("AUGGCCUAG")
        'MA*'
        >>> translate("AUGGCCUAG", frame=1)
        'WP'
        >>> translate("AUGUAAGGG", stop_at_termination=True)
        'M'
    """
    return "".join(
        unit.symbol
        for unit in iter_translation(sequence, frame, code, stop_at_termination)
    )


def translate_dna(
    sequence: Iterable[str],
    frame: Frame = DEFAULT_FRAME,
    code: GeneticCode = DEFAULT_CODE,
    stop_at_termination: bool = False
) -> str:
    """
    Translate a coding-strand DNA sequence to protein.

    Same contract as `translate`, over A/C/G/T.

    Example:
        >>> translate_dna("ATGTGGTGA", code=GeneticCode.MITOCHONDRIAL)
        'MWW'
    """
    return "".join(
        unit.symbol
        for unit in iter_translation(sequence, frame, code, stop_at_termination, dna=True)
    )


def translate_frames(
    sequence: Iterable[str],
    code: GeneticCode = DEFAULT_CODE,
    stop_at_termination: bool = False,
    dna: bool = False
) -> Dict[ReadingFrame, str]:
    """
    Translate a sequence in all three forward reading frames.

    The input is read and validated once, then each frame is
    translated from the normalized copy.

    Returns:
        Mapping of ReadingFrame to protein sequence
    """
    alphabet = DNA_ALPHABET if dna else RNA_ALPHABET
    nucleotides = "".join(normalize(sequence, alphabet))

    return {
        frame: "".join(
            unit.symbol
            for unit in iter_translation(nucleotides, frame, code, stop_at_termination, dna)
        )
        for frame in ReadingFrame
    }
