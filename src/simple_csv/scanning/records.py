"""Record splitting: the first scanning stage.

Input must already be normalized to CRLF line endings. A record ends at a CRLF
found outside a quoted region; inside quotes, CR and LF are record content.
Quoting is left in place so the field stage can interpret it.
"""

from __future__ import annotations

from simple_csv.errors import MalformedInputError
from simple_csv.models import (
    CARRIAGE_RETURN,
    LINE_FEED,
    QUOTE,
    Delimiter,
    QuoteState,
    Transition,
)
from simple_csv.validation import coerce_delimiter


def step_record(mode: QuoteState, text: str, pos: int) -> Transition:
    """Compute the record-scanner transition for the character at ``pos``.

    Args:
        mode: Quote state before the step.
        text: Full text being scanned.
        pos: Index of the current character.

    Returns:
        The next state, characters consumed, emitted text, and boundary flag.
    """

    char = text[pos]
    if char == QUOTE:
        if mode is QuoteState.NORMAL:
            return Transition(QuoteState.QUOTED, 1, char, False)
        if text[pos + 1 : pos + 2] == QUOTE:
            # Escaped quote stays raw; the field stage collapses it.
            return Transition(QuoteState.QUOTED, 2, QUOTE + QUOTE, False)
        return Transition(QuoteState.NORMAL, 1, char, False)

    if mode is QuoteState.QUOTED:
        return Transition(mode, 1, char, False)
    if char == CARRIAGE_RETURN:
        return Transition(mode, 1, "", False)
    if char == LINE_FEED:
        return Transition(mode, 1, "", True)
    return Transition(mode, 1, char, False)


def split_records(text: str, delimiter: Delimiter | str = Delimiter.COMMA) -> list[str]:
    """Split normalized text into raw record strings.

    The delimiter is not needed to find record boundaries; it is validated so
    the signature matches the field stage.

    Args:
        text: CRLF-normalized CSV text.
        delimiter: Field delimiter of the text.

    Returns:
        Record strings in source order. Empty text yields no records.

    Raises:
        MalformedInputError: If the text ends inside a quoted region.
        ValueError: If ``delimiter`` is not supported.
    """

    coerce_delimiter(delimiter)

    records: list[str] = []
    buffer: list[str] = []
    mode = QuoteState.NORMAL
    opened_at = 0
    pos = 0
    end = len(text)

    while pos < end:
        step = step_record(mode, text, pos)
        if mode is QuoteState.NORMAL and step.mode is QuoteState.QUOTED:
            opened_at = pos
        mode = step.mode
        pos += step.consumed
        buffer.append(step.output)

        if pos >= end and mode is QuoteState.QUOTED:
            raise MalformedInputError(opened_at)

        if step.boundary or pos >= end:
            records.append("".join(buffer))
            buffer.clear()

    return records
