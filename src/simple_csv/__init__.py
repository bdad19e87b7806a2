"""CSV text parser with quote-aware record and field splitting."""

from .errors import MalformedInputError
from .models import Delimiter, FailureKind, ParseFailure, ParseOptions, ParseOutcome
from .parser import (
    parse_fields_from_text,
    parse_files,
    parse_from_file,
    parse_from_stream,
    parse_from_text,
    try_parse_from_file,
    try_parse_from_text,
)

__all__ = [
    "Delimiter",
    "FailureKind",
    "MalformedInputError",
    "ParseFailure",
    "ParseOptions",
    "ParseOutcome",
    "parse_fields_from_text",
    "parse_files",
    "parse_from_file",
    "parse_from_stream",
    "parse_from_text",
    "try_parse_from_file",
    "try_parse_from_text",
]

__version__ = "0.1.0"
