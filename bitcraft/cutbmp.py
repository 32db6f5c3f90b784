"""Command that cuts a bitmap into a grid of part files."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from bitcraft.bmp import cut_bmp_file


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cutbmp",
        description="Cut a 24-bit BMP file into parts.",
        add_help=False,
    )
    parser.add_argument("source", help="the bitmap to cut")
    parser.add_argument("-h", dest="rows", type=int, default=1, help="parts down")
    parser.add_argument("-w", dest="columns", type=int, default=1, help="parts across")
    return parser


def parse_args(argv: Sequence[str] | None) -> tuple[str, int, int]:
    """Return the source path, the number of rows and of columns."""
    args = _build_parser().parse_args(argv)
    return args.source, args.rows, args.columns


def main(argv: Sequence[str] | None = None) -> int:
    """Cut the bitmap named on the command line."""
    source, rows, columns = parse_args(argv)
    try:
        cut_bmp_file(source, rows, columns)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print("Split file successfully!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())