import gzip
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Union

logger = logging.getLogger(__name__)

DEFAULT_LINE_WIDTH = 60


@dataclass
class FastaRecord:
    """
    Represents a single FASTA record.

    Attributes:
        id: Sequence identifier (first word after '>')
        description: Full description line (everything after '>')
        sequence: The nucleotide/protein sequence
    """
    id: str
    description: str
    sequence: str

    def __len__(self) -> int:
        return len(self.sequence)

    def __str__(self) -> str:
        return f">{self.description}\n{self.sequence}"

    def to_fasta(self, line_width: int = DEFAULT_LINE_WIDTH) -> str:
        """Format as FASTA string with wrapped sequence lines."""
        lines = [f">{self.description}"]
        for i in range(0, len(self.sequence), line_width):
            lines.append(self.sequence[i:i + line_width])
        return "\n".join(lines)


def open_sequence_file(filepath: Union[str, Path], mode: str = "rt"):
    """Open a file, handling gzip compression if needed."""
    filepath = Path(filepath)
    logger.debug("Opening %s", filepath)
    if filepath.suffix == ".gz":
        return gzip.open(filepath, mode)
    return open(filepath, mode)


def read_fasta(filepath: Union[str, Path]) -> Iterator[FastaRecord]:
    """
    Read sequences from a FASTA file.

    Supports both plain text and gzip-compressed files. Sequence lines
    are kept as written; translation does its own normalization.

    Args:
        filepath: Path to FASTA file (.fasta, .fa, .fna, or .gz)

    Yields:
        FastaRecord objects

    Example:
        >>> for record in read_fasta("transcripts.fasta"):
        ...     print(f"{record.id}: {len(record)} nt")
    """
    with open_sequence_file(filepath, "rt") as f:
        yield from parse_fasta_lines(f)


def parse_fasta_string(content: str) -> Iterator[FastaRecord]:
    """Parse FASTA format from a string."""
    return parse_fasta_lines(content.split("\n"))


def parse_fasta_lines(lines: Iterable[str]) -> Iterator[FastaRecord]:
    """
    Parse FASTA records from an iterable of lines.

    Lines before the first header are ignored.
    """
    current_header = None
    current_sequence: List[str] = []

    for line in lines:
        line = line.strip()
        if not line:
            continue

        if line.startswith(">"):
            if current_header is not None:
                yield _make_record(current_header, current_sequence)
            current_header = line[1:].strip()
            current_sequence = []
        else:
            current_sequence.append(line)

    if current_header is not None:
        yield _make_record(current_header, current_sequence)


def _make_record(header: str, sequence: List[str]) -> FastaRecord:
    seq_id = header.split()[0] if header else ""
    return FastaRecord(id=seq_id, description=header, sequence="".join(sequence))


def stream_nucleotides(filepath: Union[str, Path]) -> Iterator[str]:
    """
    Stream the sequence lines of a plain or FASTA sequence file.

    A leading header line ('>') is skipped. The file must hold a single
    sequence; use `translate_fasta` for multi-record files. The file is
    closed when the stream is exhausted, when reading fails, or when the
    generator is closed early.

    Positions reported by `InvalidNucleotide` for this stream count
    sequence lines only; the header line is not included.

    Yields:
        Raw sequence lines (not yet normalized)

    Raises:
        ValueError: If a second header line is found
    """
    with open_sequence_file(filepath, "rt") as f:
        headers = 0
        for line in f:
            if line.startswith(">"):
                headers += 1
                if headers > 1:
                    raise ValueError(
                        f"{filepath} holds more than one FASTA record; "
                        "use translate_fasta to translate each record"
                    )
                continue
            yield line


def write_fasta(
    records: Union[FastaRecord, Iterable[FastaRecord]],
    filepath: Union[str, Path],
    line_width: int = DEFAULT_LINE_WIDTH,
    compress: bool = False
) -> None:
    """
    Write sequences to a FASTA file.

    Args:
        records: Single record or iterable of FastaRecord objects
        filepath: Output file path
        line_width: Number of characters per sequence line
        compress: If True, write gzip-compressed file
    """
    if isinstance(records, FastaRecord):
        records = [records]

    filepath = Path(filepath)
    if compress and not filepath.suffix == ".gz":
        filepath = Path(str(filepath) + ".gz")

    with open_sequence_file(filepath, "wt") as f:
        for record in records:
            f.write(record.to_fasta(line_width) + "\n")
