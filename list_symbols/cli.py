"""Command-line front end for list-symbols.

Prints the symbols CSV for one C/C++ source file. The CSV header is written
only once the file has parsed, so a failed run leaves stdout (or the output
file) untouched.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import clang.cindex

from .config import LIBRARY_FILE_ENV, configure_libclang, default_csv_path
from .declarations import parse_translation_unit, top_level_declarations
from .errors import ListSymbolsError, UsageError
from .symbols_csv import write_symbols_csv

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="list-symbols",
        description="List top-level declarations of a C/C++ source file as a symbols CSV.",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("-o", "--output", help="write the CSV here instead of stdout")
    output.add_argument(
        "--csv-default",
        action="store_true",
        help="write the CSV to <source-stem>_symbols.csv",
    )
    parser.add_argument(
        "--libclang",
        metavar="PATH",
        help=f"libclang shared library to load (default: ${LIBRARY_FILE_ENV} or the bundled one)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    parser.add_argument("input_file", nargs="?", metavar="input-file")
    parser.add_argument(
        "clang_args",
        nargs=argparse.REMAINDER,
        metavar="clang-args",
        help="extra arguments passed to libclang, e.g. -DFOO -Iinclude",
    )
    return parser


def list_symbols(input_file: str, output: Optional[Path], clang_args: Sequence[str]) -> int:
    with parse_translation_unit(input_file, clang_args) as tu:
        declarations = top_level_declarations(tu.cursor)
        if output is None:
            rows = write_symbols_csv(sys.stdout, declarations)
        else:
            with open(output, "w", encoding="utf-8", newline="\n") as f:
                rows = write_symbols_csv(f, declarations)
    logger.info("%s: %d declarations", input_file, rows)
    return rows


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    clang_args = list(args.clang_args)
    if clang_args[:1] == ["--"]:
        clang_args = clang_args[1:]

    output: Optional[Path] = None
    if args.output:
        output = Path(args.output)
    elif args.csv_default and args.input_file:
        output = default_csv_path(args.input_file)

    try:
        if not args.input_file:
            raise UsageError("missing input file")
        configure_libclang(args.libclang)
        list_symbols(args.input_file, output, clang_args)
    except UsageError:
        parser.print_usage(sys.stderr)
        return 1
    except (ListSymbolsError, clang.cindex.LibclangError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
