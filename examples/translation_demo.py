#!/usr/bin/env python3
"""
Example: Genetic-code translation with ribokit

This example walks through:
- The amino acid catalog and codon tables
- Translation under the universal, mitochondrial and SECIS codes
- Reading frames and early termination
- Codon usage vectors
"""

import sys
sys.path.insert(0, '..')

from ribokit import (
    GeneticCode,
    ReadingFrame,
    all_amino_acids,
    build_table,
    codon_usage,
    translate,
    translate_frames,
)
from ribokit.code import all_codons, stop_codons


def demo_catalog():
    """Show the amino acid catalog."""
    print("\n" + "=" * 60)
    print("AMINO ACID CATALOG")
    print("=" * 60)

    for aa in all_amino_acids():
        codons = ", ".join(sorted(aa.universal_codons))
        print(f"  {aa.letter}  {aa.abbreviation}  {aa.full_name:<18} {codons}")


def demo_codes():
    """Compare genetic codes on the same mRNA."""
    print("\n" + "=" * 60)
    print("GENETIC CODES")
    print("=" * 60)

    mrna = "AUGUGAAGAAUAUAA"
    print(f"\nmRNA: {mrna}")
    for code in GeneticCode:
        print(f"  {code.value:<14} stops={stop_codons(code)}  protein={translate(mrna, code=code)}")

    table = build_table(GeneticCode.SECIS)
    print(f"\nSECIS table: {len(table)} codons, UGA -> {table['UGA'].symbol}")


def demo_frames():
    """Translate in each reading frame."""
    print("\n" + "=" * 60)
    print("READING FRAMES")
    print("=" * 60)

    mrna = "AUGGCCUAGGGGCAUUAA"
    for frame, protein in translate_frames(mrna).items():
        print(f"  frame {frame.offset}: {protein}")

    print(f"\n  to stop: {translate(mrna, frame=ReadingFrame.FIRST, stop_at_termination=True)}")


def demo_usage():
    """Codon usage as a NumPy vector."""
    print("\n" + "=" * 60)
    print("CODON USAGE")
    print("=" * 60)

    usage = codon_usage("AUGGCCGCCGCCUAA")
    codons = all_codons()
    for i in usage.argsort()[::-1][:3]:
        print(f"  {codons[i]}: {usage[i]:.2f}")


if __name__ == "__main__":
    demo_catalog()
    demo_codes()
    demo_frames()
    demo_usage()
