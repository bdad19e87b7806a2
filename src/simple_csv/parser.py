"""Public parse API composing normalization, record splitting, and field splitting."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Iterable

from simple_csv.errors import MalformedInputError
from simple_csv.io.text_io import read_stream, read_text
from simple_csv.models import (
    Delimiter,
    FailureKind,
    ParseFailure,
    ParseOptions,
    ParseOutcome,
)
from simple_csv.scanning.fields import split_fields
from simple_csv.scanning.line_endings import normalize_line_endings
from simple_csv.scanning.records import split_records
from simple_csv.validation import coerce_delimiter

logger = logging.getLogger("simple-csv")


def parse_fields_from_text(text: str, delimiter: Delimiter | str = Delimiter.COMMA) -> list[str]:
    """Parse text holding a single record into its fields.

    Line breaks outside quotes do not start a new record here; they are dropped.

    Args:
        text: Record text.
        delimiter: Field delimiter.

    Returns:
        Field values in source order.

    Raises:
        MalformedInputError: If a quoted region is never closed.
        ValueError: If ``delimiter`` is not supported.
    """

    delimiter = coerce_delimiter(delimiter)
    fields = split_fields(normalize_line_endings(text), delimiter)
    logger.debug("Parsed %d fields", len(fields))
    return fields


def parse_from_text(text: str, delimiter: Delimiter | str = Delimiter.COMMA) -> list[list[str]]:
    """Parse a block of CSV text into records of fields.

    Args:
        text: CSV text with any mix of CR, LF, and CRLF line endings.
        delimiter: Field delimiter.

    Returns:
        Records in source order, each a list of field values.

    Raises:
        MalformedInputError: If a quoted region is never closed.
        ValueError: If ``delimiter`` is not supported.
    """

    delimiter = coerce_delimiter(delimiter)
    records = split_records(normalize_line_endings(text), delimiter)
    parsed = [split_fields(record, delimiter) for record in records]
    logger.debug("Parsed %d records", len(parsed))
    return parsed


def parse_from_file(
    path: Path | str,
    delimiter: Delimiter | str = Delimiter.COMMA,
    encoding: str = "utf-8",
) -> list[list[str]]:
    """Parse a CSV file into records of fields.

    Args:
        path: CSV file path.
        delimiter: Field delimiter.
        encoding: Text encoding of the file.

    Returns:
        Records in source order.

    Raises:
        FileNotFoundError: If ``path`` is not an existing file.
        MalformedInputError: If a quoted region is never closed.
        ValueError: If ``delimiter`` is not supported.
    """

    delimiter = coerce_delimiter(delimiter)
    return parse_from_text(read_text(Path(path), encoding=encoding), delimiter)


def parse_from_stream(
    handle: IO,
    delimiter: Delimiter | str = Delimiter.COMMA,
    encoding: str = "utf-8",
) -> list[list[str]]:
    """Parse all remaining content of a text or binary stream.

    Args:
        handle: Open file-like object.
        delimiter: Field delimiter.
        encoding: Text encoding used when the stream yields bytes.

    Returns:
        Records in source order.
    """

    delimiter = coerce_delimiter(delimiter)
    return parse_from_text(read_stream(handle, encoding=encoding), delimiter)


def _outcome(records: list[list[str]], path: Path | None) -> ParseOutcome:
    return ParseOutcome(records=tuple(tuple(record) for record in records), path=path)


def _failure(kind: FailureKind, exc: Exception, path: Path | None) -> ParseOutcome:
    offset = exc.offset if isinstance(exc, MalformedInputError) else None
    failure = ParseFailure(kind=kind, message=str(exc), path=path, offset=offset)
    return ParseOutcome(failure=failure, path=path)


def try_parse_from_text(text: str, delimiter: Delimiter | str = Delimiter.COMMA) -> ParseOutcome:
    """Parse text, returning malformed input as a failure value instead of raising.

    Args:
        text: CSV text.
        delimiter: Field delimiter.

    Returns:
        ``ParseOutcome`` with records, or with a ``MALFORMED_INPUT`` failure.

    Raises:
        ValueError: If ``delimiter`` is not supported.
    """

    delimiter = coerce_delimiter(delimiter)
    try:
        records = parse_from_text(text, delimiter)
    except MalformedInputError as exc:
        return _failure(FailureKind.MALFORMED_INPUT, exc, None)
    return _outcome(records, None)


def try_parse_from_file(
    path: Path | str,
    delimiter: Delimiter | str = Delimiter.COMMA,
    encoding: str = "utf-8",
) -> ParseOutcome:
    """Parse a file, returning not-found and malformed input as failure values.

    Args:
        path: CSV file path.
        delimiter: Field delimiter.
        encoding: Text encoding of the file.

    Returns:
        ``ParseOutcome`` with records, or with a tagged failure.

    Raises:
        ValueError: If ``delimiter`` is not supported.
    """

    path = Path(path)
    delimiter = coerce_delimiter(delimiter)
    try:
        records = parse_from_file(path, delimiter, encoding)
    except FileNotFoundError as exc:
        return _failure(FailureKind.NOT_FOUND, exc, path)
    except MalformedInputError as exc:
        return _failure(FailureKind.MALFORMED_INPUT, exc, path)
    return _outcome(records, path)


def parse_files(
    paths: Iterable[Path | str],
    options: ParseOptions = ParseOptions(),
) -> list[ParseOutcome]:
    """Parse many files, continuing past files that fail.

    Args:
        paths: CSV file paths.
        options: Delimiter and encoding shared by every file.

    Returns:
        One outcome per path, in input order.
    """

    outcomes: list[ParseOutcome] = []
    for path in paths:
        outcome = try_parse_from_file(path, options.delimiter, options.encoding)
        if outcome.failure is not None:
            logger.warning("Skipping %s: %s", path, outcome.failure.message)
        outcomes.append(outcome)
    return outcomes
