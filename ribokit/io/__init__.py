"""
Sequence file I/O.

Reading and writing FASTA files and streaming raw nucleotides from
plain or FASTA sequence files (optionally gzip-compressed).
"""

from ribokit.io.fasta import (
    read_fasta,
    write_fasta,
    FastaRecord,
    parse_fasta_string,
    parse_fasta_lines,
    stream_nucleotides,
    open_sequence_file,
    DEFAULT_LINE_WIDTH,
)

__all__ = [
    "read_fasta",
    "write_fasta",
    "FastaRecord",
    "parse_fasta_string",
    "parse_fasta_lines",
    "stream_nucleotides",
    "open_sequence_file",
    "DEFAULT_LINE_WIDTH",
]
