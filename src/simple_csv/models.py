"""Data models shared by the scanners and the public parse API.

Every value here is transient and immutable: scanners build them per call and
nothing is cached between calls, so concurrent callers never share state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import NamedTuple

from simple_csv.errors import MalformedInputError

QUOTE = '"'
CARRIAGE_RETURN = "\r"
LINE_FEED = "\n"
CRLF = CARRIAGE_RETURN + LINE_FEED


class Delimiter(str, Enum):
    """Closed set of field delimiters accepted by the parser."""

    COMMA = ","
    TAB = "\t"
    SEMICOLON = ";"


class QuoteState(Enum):
    """Scanner mode: outside or inside a quoted region."""

    NORMAL = "normal"
    QUOTED = "quoted"


class Transition(NamedTuple):
    """Outcome of one scanner step.

    Attributes:
        mode: Quote state after the step.
        consumed: Number of input characters the step consumed (1 or 2).
        output: Text appended to the record or field being built.
        boundary: Whether a record/field boundary fires after this step.
    """

    mode: QuoteState
    consumed: int
    output: str
    boundary: bool


class FailureKind(Enum):
    """Caller-correctable failure categories reported by result-returning APIs."""

    NOT_FOUND = "not_found"
    MALFORMED_INPUT = "malformed_input"


@dataclass(frozen=True)
class ParseOptions:
    """Per-call parse configuration.

    Attributes:
        delimiter: Field delimiter, one of :class:`Delimiter`.
        encoding: Text encoding used when decoding file or stream bytes.
    """

    delimiter: Delimiter = Delimiter.COMMA
    encoding: str = "utf-8"


@dataclass(frozen=True)
class ParseFailure:
    """Tagged failure returned instead of raised by ``try_*`` parse functions."""

    kind: FailureKind
    message: str
    path: Path | None = None
    offset: int | None = None

    def to_exception(self) -> Exception:
        """Rebuild the exception this failure stands for."""

        if self.kind is FailureKind.NOT_FOUND:
            return FileNotFoundError(self.message)
        return MalformedInputError(self.offset if self.offset is not None else -1, self.message)


@dataclass(frozen=True)
class ParseOutcome:
    """Result bundle distinguishing parsed records from a tagged failure.

    Exactly one of ``records`` and ``failure`` is meaningful: ``records`` is an
    empty tuple whenever ``failure`` is set, since no partial output is kept.
    """

    records: tuple[tuple[str, ...], ...] = ()
    failure: ParseFailure | None = None
    path: Path | None = None

    @property
    def ok(self) -> bool:
        """Whether the parse succeeded."""

        return self.failure is None

    def unwrap(self) -> list[list[str]]:
        """Return the parsed records or raise the failure's exception.

        Raises:
            FileNotFoundError: If the outcome is a not-found failure.
            MalformedInputError: If the outcome is a malformed-input failure.
        """

        if self.failure is not None:
            raise self.failure.to_exception()
        return [list(record) for record in self.records]
