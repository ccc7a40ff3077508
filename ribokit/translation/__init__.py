"""
Translation engine.

This module provides:
- Reading frames
- Streaming mRNA (and DNA) translation under a genetic code
- Translation in all three forward frames
- Translation of sequence and FASTA files
"""

from ribokit.translation.frames import ReadingFrame

from ribokit.translation.engine import (
    translate,
    translate_dna,
    translate_frames,
    iter_translation,
    DEFAULT_CODE,
    DEFAULT_FRAME,
)

from ribokit.translation.files import (
    translate_file,
    translate_fasta,
)

__all__ = [
    "ReadingFrame",
    "translate",
    "translate_dna",
    "translate_frames",
    "iter_translation",
    "translate_file",
    "translate_fasta",
    "DEFAULT_CODE",
    "DEFAULT_FRAME",
]
