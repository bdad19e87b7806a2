"""CLI entrypoint for parsing CSV files and printing their records."""

from __future__ import annotations

import argparse
import codecs
import logging
import sys
from pathlib import Path
from typing import Sequence

from simple_csv.io.text_io import read_text
from simple_csv.models import ParseOptions, ParseOutcome
from simple_csv.parser import parse_fields_from_text, try_parse_from_file
from simple_csv.reporting.formatting import format_table, join_fields, to_text
from simple_csv.validation import DELIMITER_NAMES, coerce_delimiter, collect_field_counts

logger = logging.getLogger("simple-csv")


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the parse command.
    """

    parser = argparse.ArgumentParser(description="Parse CSV files into records and fields.")
    parser.add_argument("paths", nargs="+", type=Path, help="CSV files to parse.")
    parser.add_argument(
        "--delimiter",
        choices=sorted(DELIMITER_NAMES),
        default="comma",
        help="Field delimiter (default: comma).",
    )
    parser.add_argument("--encoding", default="utf-8", help="File text encoding (default: utf-8).")
    parser.add_argument(
        "--fields-only",
        action="store_true",
        help="Treat each file as a single record and print its fields.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _print_records(outcome: ParseOutcome) -> None:
    """Print each record's field count and joined fields, then a width summary.

    Args:
        outcome: Successful parse outcome for one file.
    """

    print(f"== {outcome.path}")
    for number, record in enumerate(outcome.records, start=1):
        print(f"record {number} has {len(record)} fields.")
        print(join_fields(record, with_newline=False))

    field_counts = collect_field_counts(outcome.records)
    count_rows = [
        [str(width), to_text(field_counts[width], ",")] for width in sorted(field_counts)
    ]
    print(f"\nParsed {to_text(len(outcome.records), ',')} records:")
    if count_rows:
        print(format_table(["fields", "records"], count_rows))


def _print_fields(path: Path, options: ParseOptions) -> None:
    """Parse one file as a single record and print its fields, one per line.

    Args:
        path: CSV file path.
        options: Delimiter and encoding.
    """

    fields = parse_fields_from_text(read_text(path, options.encoding), options.delimiter)
    print(f"== {path}")
    for field in fields:
        print(field)


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow over every given file.

    Args:
        argv: Argument list; defaults to ``sys.argv[1:]``.

    Returns:
        Zero when every file parsed, one otherwise.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)
    try:
        codecs.lookup(args.encoding)
    except LookupError:
        parser.error(f"unknown encoding: {args.encoding}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    options = ParseOptions(delimiter=coerce_delimiter(args.delimiter), encoding=args.encoding)

    failures = 0
    if args.fields_only:
        for path in args.paths:
            try:
                _print_fields(path, options)
            except (FileNotFoundError, ValueError) as exc:
                sys.stderr.write(f"error: {path}: {exc}\n")
                failures += 1
        return 1 if failures else 0

    for path in args.paths:
        try:
            outcome = try_parse_from_file(path, options.delimiter, options.encoding)
        except UnicodeDecodeError as exc:
            sys.stderr.write(f"error: {path}: cannot decode as {options.encoding}: {exc}\n")
            failures += 1
            continue
        if outcome.failure is not None:
            sys.stderr.write(f"error: {path}: {outcome.failure.message}\n")
            failures += 1
            continue
        _print_records(outcome)
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
