"""
Command-line entry point: ribokit-translate.

Examples:
    ribokit-translate mrna.txt --to-stop
    ribokit-translate genes.fa --fasta --dna --code mitochondrial
    ribokit-translate genes.fa --fasta -o proteins.fa.gz
    cat mrna.txt | ribokit-translate - --all-frames
"""

import argparse
import logging
import sys
from typing import List, Optional

from ribokit.code.variants import GeneticCode
from ribokit.exceptions import RibokitError
from ribokit.io.fasta import DEFAULT_LINE_WIDTH, stream_nucleotides, write_fasta
from ribokit.translation import (
    translate_fasta,
    translate_file,
    translate_frames,
    iter_translation,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="ribokit-translate",
        description="Translate mRNA (or DNA) sequences to protein.",
    )
    ap.add_argument("input", help="Sequence or FASTA file, '-' for stdin")
    ap.add_argument("--code", default=GeneticCode.UNIVERSAL.value,
                    help="Genetic code: universal, mitochondrial, secis (default: universal)")
    ap.add_argument("--frame", type=int, choices=[0, 1, 2], default=0,
                    help="Reading frame offset")
    ap.add_argument("--all-frames", action="store_true",
                    help="Translate all three forward frames")
    ap.add_argument("--to-stop", action="store_true",
                    help="Stop at the first stop codon")
    ap.add_argument("--dna", action="store_true",
                    help="Input is DNA (A/C/G/T)")
    ap.add_argument("--fasta", action="store_true",
                    help="Translate each FASTA record and write protein FASTA")
    ap.add_argument("-o", "--output", default=None,
                    help="Write protein FASTA to this path (with --fasta; .gz compresses)")
    ap.add_argument("--line-width", type=int, default=DEFAULT_LINE_WIDTH,
                    help="Line width for FASTA output")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def _run(args: argparse.Namespace) -> None:
    code = GeneticCode.parse(args.code)
    options = dict(code=code, stop_at_termination=args.to_stop, dna=args.dna)

    if args.fasta:
        if args.input == "-":
            raise ValueError("--fasta needs a file path")
        records = translate_fasta(args.input, frame=args.frame, **options)
        if args.output:
            write_fasta(records, args.output, line_width=args.line_width)
            logger.debug("Wrote %s", args.output)
        else:
            for record in records:
                print(record.to_fasta(args.line_width))
        return

    if args.all_frames:
        source = sys.stdin if args.input == "-" else _read(args.input)
        for frame, protein in translate_frames(source, **options).items():
            print(f"frame {frame.offset}\t{protein}")
        return

    if args.input == "-":
        protein = "".join(u.symbol for u in iter_translation(sys.stdin, args.frame, **options))
    else:
        protein = translate_file(args.input, frame=args.frame, **options)
    print(protein)


def _read(path: str) -> str:
    return "".join(stream_nucleotides(path))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Arguments: %s", vars(args))

    try:
        _run(args)
    except (RibokitError, ValueError, OSError) as e:
        print(f"ribokit-translate: error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
