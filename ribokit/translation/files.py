"""Translation of sequences stored in files."""

from contextlib import closing
from pathlib import Path
from typing import Iterator, Union

from ribokit.code.variants import GeneticCode
from ribokit.io.fasta import FastaRecord, read_fasta, stream_nucleotides
from ribokit.translation.engine import (
    DEFAULT_CODE,
    DEFAULT_FRAME,
    Frame,
    iter_translation,
)


def translate_file(
    filepath: Union[str, Path],
    frame: Frame = DEFAULT_FRAME,
    code: GeneticCode = DEFAULT_CODE,
    stop_at_termination: bool = False,
    dna: bool = False
) -> str:
    """
    Translate the sequence held in a plain or FASTA file.

    The file holds one sequence, optionally under a single FASTA header;
    a file with several records raises ValueError (see `translate_fasta`).
    The file is closed before returning, including when an invalid
    nucleotide aborts the translation. Error positions count sequence
    lines only.

    Example:
        >>> translate_file("mrna.txt", stop_at_termination=True)
        'MA'
    """
    with closing(stream_nucleotides(filepath)) as lines:
        return "".join(
            unit.symbol
            for unit in iter_translation(lines, frame, code, stop_at_termination, dna)
        )


def translate_fasta(
    filepath: Union[str, Path],
    frame: Frame = DEFAULT_FRAME,
    code: GeneticCode = DEFAULT_CODE,
    stop_at_termination: bool = False,
    dna: bool = False
) -> Iterator[FastaRecord]:
    """
    Translate every record of a FASTA file.

    Yields:
        Protein FastaRecords with the source record's id and description
    """
    for record in read_fasta(filepath):
        protein = "".join(
            unit.symbol
            for unit in iter_translation(record.sequence, frame, code, stop_at_termination, dna)
        )
        yield FastaRecord(id=record.id, description=record.description, sequence=protein)
