"""Field splitting: the second scanning stage, applied to one record's text."""

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


def step_field(mode: QuoteState, text: str, pos: int, delimiter: Delimiter) -> Transition:
    """Compute the field-scanner transition for the character at ``pos``.

    Quotes are emitted as they are read so that :func:`finalize_field` can
    recognize a quote-wrapped value; an escaped pair emits a single quote.

    Args:
        mode: Quote state before the step.
        text: Full record text being scanned.
        pos: Index of the current character.
        delimiter: Field delimiter.

    Returns:
        The next state, characters consumed, emitted text, and boundary flag.
    """

    char = text[pos]
    if char == QUOTE:
        if mode is QuoteState.NORMAL:
            return Transition(QuoteState.QUOTED, 1, char, False)
        if text[pos + 1 : pos + 2] == QUOTE:
            return Transition(QuoteState.QUOTED, 2, QUOTE, False)
        return Transition(QuoteState.NORMAL, 1, char, False)

    if mode is QuoteState.QUOTED:
        return Transition(mode, 1, char, False)
    if char in (CARRIAGE_RETURN, LINE_FEED):
        return Transition(mode, 1, "", False)
    if char == delimiter.value:
        return Transition(mode, 1, "", True)
    return Transition(mode, 1, char, False)


def finalize_field(buffer: str, has_quote: bool) -> str:
    """Turn an accumulated field buffer into the field value.

    When the record contained quoting and the buffer holds at least two quote
    characters, spaces outside the quotes are trimmed and one wrapping quote is
    removed from each end. Only U+0020 is trimmed. A buffer that does not start
    and end with a quote once trimmed is returned unchanged.

    Args:
        buffer: Characters emitted for the field.
        has_quote: Whether a quoted region was opened anywhere in the record.

    Returns:
        Field value.
    """

    if not buffer or not has_quote or buffer.count(QUOTE) < 2:
        return buffer

    trimmed = buffer.strip(" ")
    if len(trimmed) >= 2 and trimmed[0] == QUOTE and trimmed[-1] == QUOTE:
        return trimmed[1:-1]
    return buffer


def split_fields(text: str, delimiter: Delimiter | str = Delimiter.COMMA) -> list[str]:
    """Split one record's text into field values.

    A delimiter as the last character implies one more, empty, trailing field.
    CR and LF outside quotes are dropped.

    Args:
        text: Record text.
        delimiter: Field delimiter.

    Returns:
        Field values in source order. Empty text yields no fields.

    Raises:
        MalformedInputError: If the text ends inside a quoted region.
        ValueError: If ``delimiter`` is not supported.
    """

    delimiter = coerce_delimiter(delimiter)

    fields: list[str] = []
    buffer: list[str] = []
    mode = QuoteState.NORMAL
    has_quote = False
    opened_at = 0
    pos = 0
    end = len(text)

    while pos < end:
        step = step_field(mode, text, pos, delimiter)
        if mode is QuoteState.NORMAL and step.mode is QuoteState.QUOTED:
            has_quote = True
            opened_at = pos
        mode = step.mode
        pos += step.consumed
        buffer.append(step.output)

        if pos >= end and mode is QuoteState.QUOTED:
            raise MalformedInputError(opened_at)

        if step.boundary or pos >= end:
            fields.append(finalize_field("".join(buffer), has_quote))
            buffer.clear()
            if step.boundary and pos >= end:
                fields.append("")

    return fields
