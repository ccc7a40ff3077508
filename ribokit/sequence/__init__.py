"""
Nucleotide stream processing.

This module provides:
- Streaming normalization and alphabet validation
- Reading-frame offsets and codon windowing
- DNA -> RNA transcription
- Numeric codon encodings (indices, usage vectors)
"""

from ribokit.sequence.stream import (
    normalize,
    skip,
    transcribe,
    codons,
)

from ribokit.sequence.encoding import (
    codon_index,
    codon_usage,
)

__all__ = [
    "normalize",
    "skip",
    "transcribe",
    "codons",
    "codon_index",
    "codon_usage",
]
